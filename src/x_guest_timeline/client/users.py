from __future__ import annotations

from ..contract import GRAPHQL_ENDPOINTS
from ..errors import ResolutionError
from ..jsonpath import dig
from .gateway import GraphQLGateway


def normalize_handle(handle: str) -> str:
    h = (handle or "").strip().lstrip("@").strip()
    if not h:
        raise ValueError("handle must be a non-empty string")
    return h


def resolve_user_id(gateway: GraphQLGateway, handle: str, bearer: str, session: str) -> str:
    """Map a screen name to the numeric rest_id."""
    handle = normalize_handle(handle)
    data = gateway.query(
        GRAPHQL_ENDPOINTS["UserByScreenName"],
        {"screen_name": handle, "withSafetyModeUserFields": True},
        bearer,
        session,
    )
    rest_id = dig(data, "data", "user", "result", "rest_id")
    if rest_id is None or rest_id == "" or isinstance(rest_id, (dict, list, bool)):
        raise ResolutionError(f"No rest_id for @{handle} (user not found or response shape changed)")
    return str(rest_id)
