import pytest
import requests

from x_guest_timeline.client.session import activate_session
from x_guest_timeline.contract import GUEST_ACTIVATE_URL
from x_guest_timeline.errors import ActivationError

from conftest import FakeHttp, FakeResponse


def test_activate_returns_guest_token():
    http = FakeHttp({GUEST_ACTIVATE_URL: FakeResponse(payload={"guest_token": "abc123"})})
    assert activate_session(http, "BEARER") == "abc123"
    call = http.calls[0]
    assert call["method"] == "POST"
    assert call["headers"] == {"Authorization": "Bearer BEARER"}


def test_activate_missing_token():
    http = FakeHttp({GUEST_ACTIVATE_URL: FakeResponse(payload={})})
    with pytest.raises(ActivationError):
        activate_session(http, "BEARER")


def test_activate_non_json_body():
    http = FakeHttp({GUEST_ACTIVATE_URL: FakeResponse(text="<html>blocked</html>")})
    with pytest.raises(ActivationError):
        activate_session(http, "BEARER")


def test_activate_rejected_carries_detail():
    body = '{"errors":[{"code":239,"message":"Bad guest token."}]}'
    http = FakeHttp({GUEST_ACTIVATE_URL: FakeResponse(403, text=body)})
    with pytest.raises(ActivationError) as ei:
        activate_session(http, "BEARER")
    assert ei.value.status_code == 403
    assert ei.value.body == body
    assert "Bad guest token" in str(ei.value)


def test_activate_transport_error():
    http = FakeHttp({GUEST_ACTIVATE_URL: requests.Timeout("read timed out")})
    with pytest.raises(ActivationError) as ei:
        activate_session(http, "BEARER")
    assert "read timed out" in str(ei.value)
