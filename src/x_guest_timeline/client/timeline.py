from __future__ import annotations

from typing import Any

from ..contract import GRAPHQL_ENDPOINTS
from .gateway import GraphQLGateway


DEFAULT_COUNT = 20


def fetch_timeline(gateway: GraphQLGateway, user_id: str, bearer: str, session: str, count: int = DEFAULT_COUNT) -> dict[str, Any]:
    # Raw body, shape is checked by the parser
    return gateway.query(
        GRAPHQL_ENDPOINTS["UserTweets"],
        {"rest_id": user_id, "count": count},
        bearer,
        session,
    )
