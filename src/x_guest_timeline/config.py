from __future__ import annotations

from pydantic import BaseModel
from dotenv import load_dotenv
import os


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings(BaseModel):
    handle: str | None = None
    count: int = 20

    # Per-request timeout in seconds; there is no retry policy
    timeout: float = 30.0

    out_dir: str = "./data/exports"


def load_settings(env_file: str | None = None) -> Settings:
    # Load .env if present
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return Settings(
        handle=os.getenv("X_TIMELINE_HANDLE") or None,
        count=_env_int("X_TIMELINE_COUNT", 20),
        timeout=_env_float("X_TIMELINE_TIMEOUT", 30.0),
        out_dir=os.getenv("X_TIMELINE_OUT_DIR", "./data/exports"),
    )
