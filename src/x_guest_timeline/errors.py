from __future__ import annotations


class TimelineError(Exception):
    """Base for every stage failure of a timeline run."""


class ExtractionError(TimelineError):
    """Landing page or script bundle no longer matches the expected pattern."""


class _HttpDetailError(TimelineError):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        msg = super().__str__()
        if self.status_code is not None:
            msg = f"{msg} (HTTP {self.status_code})"
        if self.body:
            msg = f"{msg}: {self.body[:500]}"
        return msg


class ActivationError(_HttpDetailError):
    """Guest session exchange was rejected or returned no token."""


class GatewayError(_HttpDetailError):
    """A GraphQL call failed at the transport or HTTP level."""


class ResolutionError(TimelineError):
    """The handle did not map to a rest_id in the response."""
