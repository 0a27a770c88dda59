from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import requests

from x_guest_timeline.contract import GRAPHQL_ENDPOINTS, GUEST_ACTIVATE_URL, LANDING_PAGE_URL


FIXTURES = Path(__file__).parent / "fixtures"
BUNDLE_URL = "https://abs.twimg.com/responsive-web/client-web/main.6d1f0a4c.js"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "", payload: Any = None):
        self.status_code = status_code
        self.text = json.dumps(payload) if payload is not None else text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeHttp:
    """Stands in for requests.Session: replays canned responses by URL, records calls."""

    def __init__(self, routes: dict[str, Any] | None = None):
        self.routes = dict(routes or {})
        self.calls: list[dict[str, Any]] = []

    def _respond(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if url not in self.routes:
            return FakeResponse(404, text="not found")
        resp = self.routes[url]
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._respond("GET", url, **kwargs)

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self._respond("POST", url, **kwargs)

    def urls(self, method: str | None = None) -> list[str]:
        return [c["url"] for c in self.calls if method is None or c["method"] == method]


def tweet_entry(entry_id: str, legacy: dict[str, Any], wrapped: bool = False) -> dict[str, Any]:
    if wrapped:
        result = {
            "__typename": "TweetWithVisibilityResults",
            "tweet": {"rest_id": entry_id.split("-", 1)[1], "legacy": legacy},
        }
    else:
        result = {"__typename": "Tweet", "rest_id": entry_id.split("-", 1)[1], "legacy": legacy}
    return {
        "entryId": entry_id,
        "sortIndex": "1",
        "content": {
            "entryType": "TimelineTimelineItem",
            "itemContent": {"itemType": "TimelineTweet", "tweet_results": {"result": result}},
        },
    }


def cursor_entry(kind: str = "bottom") -> dict[str, Any]:
    return {
        "entryId": f"cursor-{kind}-1849201938475012345",
        "sortIndex": "0",
        "content": {"entryType": "TimelineTimelineCursor", "value": "DAABCgABGaZ", "cursorType": kind.capitalize()},
    }


def legacy(text: str, created_at: str = "Wed Oct 15 08:12:44 +0000 2025", retweets: int = 3, likes: int = 17) -> dict[str, Any]:
    return {
        "created_at": created_at,
        "full_text": text,
        "retweet_count": retweets,
        "favorite_count": likes,
        "lang": "en",
    }


def timeline_response(entries: list[dict[str, Any]], extra_instructions: list[dict[str, Any]] | None = None, key: str = "timeline_v2") -> dict[str, Any]:
    instructions = list(extra_instructions or [])
    instructions.append({"type": "TimelineAddEntries", "entries": entries})
    return {"data": {"user": {"result": {"__typename": "User", key: {"timeline": {"instructions": instructions}}}}}}


@pytest.fixture
def landing_html() -> str:
    return (FIXTURES / "landing.html").read_text(encoding="utf-8")


@pytest.fixture
def bundle_js() -> str:
    return (FIXTURES / "bundle.js").read_text(encoding="utf-8")


@pytest.fixture
def happy_routes(landing_html, bundle_js) -> dict[str, Any]:
    return {
        LANDING_PAGE_URL: FakeResponse(text=landing_html),
        BUNDLE_URL: FakeResponse(text=bundle_js),
        GUEST_ACTIVATE_URL: FakeResponse(payload={"guest_token": "1849201938475012345"}),
        GRAPHQL_ENDPOINTS["UserByScreenName"]: FakeResponse(
            payload={"data": {"user": {"result": {"__typename": "User", "rest_id": "42", "legacy": {"screen_name": "zhanghedev"}}}}}
        ),
        GRAPHQL_ENDPOINTS["UserTweets"]: FakeResponse(
            payload=timeline_response(
                [
                    tweet_entry("tweet-101", legacy("first post")),
                    tweet_entry("tweet-102", legacy("second post", retweets=0, likes=5), wrapped=True),
                    cursor_entry("top"),
                    cursor_entry("bottom"),
                ],
                extra_instructions=[{"type": "TimelineClearCache"}],
            )
        ),
    }


@pytest.fixture
def fake_http(happy_routes) -> FakeHttp:
    return FakeHttp(happy_routes)
