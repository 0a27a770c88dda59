from __future__ import annotations

from typing import Any


def dig(obj: Any, *path: str | int) -> Any | None:
    """Follow `path` through nested dicts/lists; None if any step is missing.

    Never raises: wrong container types and out-of-range indexes count as
    missing.
    """
    cur = obj
    for key in path:
        if isinstance(key, int):
            if not isinstance(cur, list) or not -len(cur) <= key < len(cur):
                return None
            cur = cur[key]
        else:
            if not isinstance(cur, dict) or key not in cur:
                return None
            cur = cur[key]
    return cur
