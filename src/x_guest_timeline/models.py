from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True)
class PostRecord:
    # Values are copied from the tweet's legacy block without conversion
    created_at: str
    text: str
    retweet_count: int
    favorite_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
