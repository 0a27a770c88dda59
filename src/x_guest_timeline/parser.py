"""Flatten a UserTweets GraphQL response into PostRecords.

The response is untrusted: instructions come in several kinds, entries mix
tweets with cursors and modules, and tweets come either inline or wrapped
in a `TweetWithVisibilityResults` envelope. Each lookup goes through `dig`
so a missing field means "skip this entry", never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from .jsonpath import dig
from .models import PostRecord


# Known locations of the instruction list, newest layout last.
INSTRUCTION_PATHS: tuple[tuple[str, ...], ...] = (
    ("data", "user", "result", "timeline_v2", "timeline", "instructions"),
    ("data", "user", "result", "timeline", "timeline", "instructions"),
)
ADD_ENTRIES = "TimelineAddEntries"
POST_ENTRY_PREFIX = "tweet-"


@dataclass(frozen=True)
class DirectPost:
    """Tweet result with `legacy` inline."""

    legacy: dict[str, Any]

    @classmethod
    def match(cls, result: Any) -> Optional["DirectPost"]:
        legacy = dig(result, "legacy")
        return cls(legacy) if isinstance(legacy, dict) else None


@dataclass(frozen=True)
class WrappedPost:
    """Tweet result nested under `tweet` (TweetWithVisibilityResults)."""

    legacy: dict[str, Any]

    @classmethod
    def match(cls, result: Any) -> Optional["WrappedPost"]:
        legacy = dig(result, "tweet", "legacy")
        return cls(legacy) if isinstance(legacy, dict) else None


RawPost = Union[DirectPost, WrappedPost]

# Tried in order; add a new shape by appending here.
POST_SHAPES = (DirectPost, WrappedPost)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def normalize(post: RawPost) -> Optional[PostRecord]:
    legacy = post.legacy
    created_at = legacy.get("created_at")
    text = legacy.get("full_text")
    retweets = legacy.get("retweet_count")
    favorites = legacy.get("favorite_count")
    if not isinstance(created_at, str) or not isinstance(text, str):
        return None
    if not _is_int(retweets) or not _is_int(favorites):
        return None
    return PostRecord(created_at=created_at, text=text, retweet_count=retweets, favorite_count=favorites)


def find_instructions(response: Any) -> Optional[list]:
    for path in INSTRUCTION_PATHS:
        found = dig(response, *path)
        if isinstance(found, list):
            return found
    return None


def find_add_entries(instructions: list) -> Optional[list]:
    for inst in instructions:
        if dig(inst, "type") == ADD_ENTRIES:
            entries = dig(inst, "entries")
            return entries if isinstance(entries, list) else []
    return None


def is_post_row(entry: Any) -> bool:
    entry_id = dig(entry, "entryId")
    return isinstance(entry_id, str) and entry_id.startswith(POST_ENTRY_PREFIX)


def extract_raw_post(entry: Any) -> Optional[RawPost]:
    result = dig(entry, "content", "itemContent", "tweet_results", "result")
    if not isinstance(result, dict):
        return None
    for shape in POST_SHAPES:
        post = shape.match(result)
        if post is not None:
            return post
    return None


class TimelineParser:
    """Parses one response at a time; `diagnostic` explains an empty result."""

    def __init__(self):
        self.diagnostic: str | None = None
        self.skipped = 0

    def parse(self, response: Any) -> list[PostRecord]:
        self.diagnostic = None
        self.skipped = 0

        instructions = find_instructions(response)
        if instructions is None:
            self.diagnostic = "No instruction list in timeline response; the response layout may have changed"
            return []

        entries = find_add_entries(instructions)
        if entries is None:
            self.diagnostic = f"No {ADD_ENTRIES} instruction in timeline response"
            return []

        posts: list[PostRecord] = []
        for entry in entries:
            if not is_post_row(entry):
                continue
            raw = extract_raw_post(entry)
            record = normalize(raw) if raw is not None else None
            if record is None:
                self.skipped += 1
                continue
            posts.append(record)

        if not posts:
            self.diagnostic = (
                f"No valid posts among {len(entries)} entries"
                + (f" ({self.skipped} post rows could not be read)" if self.skipped else "")
            )
        return posts


def parse_timeline(response: Any) -> list[PostRecord]:
    return TimelineParser().parse(response)
