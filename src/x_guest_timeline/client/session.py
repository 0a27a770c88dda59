from __future__ import annotations

import requests

from ..contract import GUEST_ACTIVATE_URL
from ..errors import ActivationError


def activate_session(http: requests.Session, bearer: str, timeout: float = 30.0) -> str:
    """Exchange the application bearer for a fresh anonymous guest token.

    Raises:
        ActivationError: on transport failure, non-2xx status, or a body
            without a `guest_token`.
    """
    try:
        r = http.post(GUEST_ACTIVATE_URL, headers={"Authorization": f"Bearer {bearer}"}, timeout=timeout)
    except requests.RequestException as e:
        raise ActivationError(f"Guest activation request failed: {e}") from e

    if not r.ok:
        raise ActivationError("Guest activation was rejected", status_code=r.status_code, body=r.text)

    try:
        data = r.json()
    except ValueError as e:
        raise ActivationError("Guest activation returned non-JSON", status_code=r.status_code, body=r.text) from e

    token = data.get("guest_token") if isinstance(data, dict) else None
    if not token:
        raise ActivationError("No guest_token in activation response", status_code=r.status_code, body=r.text)
    return str(token)
