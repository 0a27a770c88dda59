"""Bearer credential scraping from the public web client.

X's web app ships its application bearer inside the main script bundle.
Two fetches get us there: the landing page (to find the bundle URL), then
the bundle itself. Both lookups are plain regexes against third-party
markup, so they live in `contract.py` and are pinned by fixture tests.
"""

from __future__ import annotations

import requests

from ..contract import BEARER_RE, BROWSER_USER_AGENT, BUNDLE_URL_RE, LANDING_PAGE_URL
from ..errors import ExtractionError


def find_bundle_url(html: str) -> str:
    m = BUNDLE_URL_RE.search(html or "")
    if not m:
        raise ExtractionError("Could not find the main.js bundle URL on the landing page")
    return m.group(0)


def find_bearer_literal(js: str) -> str:
    m = BEARER_RE.search(js or "")
    if not m:
        raise ExtractionError("Could not find the bearer token in the main.js bundle")
    return m.group(1)


def _get_text(http: requests.Session, url: str, timeout: float, headers: dict[str, str] | None = None) -> str:
    try:
        r = http.get(url, headers=headers, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise ExtractionError(f"Failed to fetch {url}: {e}") from e
    return r.text


class CredentialExtractor:
    """Lazily scrapes the bearer credential once and keeps it for its lifetime."""

    def __init__(self, http: requests.Session, timeout: float = 30.0):
        self.http = http
        self.timeout = timeout
        self._bearer: str | None = None

    @property
    def cached(self) -> bool:
        return self._bearer is not None

    def extract(self) -> str:
        if self._bearer is None:
            html = _get_text(self.http, LANDING_PAGE_URL, self.timeout, headers={"User-Agent": BROWSER_USER_AGENT})
            bundle_url = find_bundle_url(html)
            js = _get_text(self.http, bundle_url, self.timeout)
            self._bearer = find_bearer_literal(js)
        return self._bearer
