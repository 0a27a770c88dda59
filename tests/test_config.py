import os

import pytest

from x_guest_timeline.config import load_settings


KEYS = ("X_TIMELINE_HANDLE", "X_TIMELINE_COUNT", "X_TIMELINE_TIMEOUT", "X_TIMELINE_OUT_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for k in KEYS:
        monkeypatch.delenv(k, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for k in KEYS:
        os.environ.pop(k, None)


def test_defaults(tmp_path):
    s = load_settings(str(tmp_path / "missing.env"))
    assert s.handle is None
    assert s.count == 20
    assert s.timeout == 30.0
    assert s.out_dir == "./data/exports"


def test_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("X_TIMELINE_HANDLE=zhanghedev\nX_TIMELINE_COUNT=5\nX_TIMELINE_TIMEOUT=2.5\n", encoding="utf-8")
    s = load_settings(str(env))
    assert s.handle == "zhanghedev"
    assert s.count == 5
    assert s.timeout == 2.5


def test_bad_count_falls_back(monkeypatch, tmp_path):
    monkeypatch.setenv("X_TIMELINE_COUNT", "lots")
    assert load_settings(str(tmp_path / "missing.env")).count == 20
