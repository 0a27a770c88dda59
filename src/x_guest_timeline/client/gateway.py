from __future__ import annotations

import json
from typing import Any

import requests

from ..contract import GQL_FEATURES, GRAPHQL_HEADERS
from ..errors import GatewayError


class GraphQLGateway:
    """Signed GET against the internal GraphQL endpoints.

    Every call carries the bearer and guest token headers plus the JSON
    encoded `variables` and `features` query parameters.
    """

    def __init__(self, http: requests.Session, timeout: float = 30.0, features: dict[str, bool] | None = None):
        self.http = http
        self.timeout = timeout
        self.features = features if features is not None else GQL_FEATURES

    def headers(self, bearer: str, session: str) -> dict[str, str]:
        return {
            **GRAPHQL_HEADERS,
            "Authorization": f"Bearer {bearer}",
            "x-guest-token": session,
        }

    def params(self, variables: dict[str, Any]) -> dict[str, str]:
        return {
            "variables": json.dumps(variables, separators=(",", ":")),
            "features": json.dumps(self.features, separators=(",", ":")),
        }

    def query(self, endpoint: str, variables: dict[str, Any], bearer: str, session: str) -> dict[str, Any]:
        if not bearer or not session:
            raise GatewayError("Refusing GraphQL call without both bearer and guest token")

        try:
            r = self.http.get(
                endpoint,
                params=self.params(variables),
                headers=self.headers(bearer, session),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GatewayError(f"GraphQL request to {endpoint} failed: {e}") from e

        if not r.ok:
            raise GatewayError(f"GraphQL call to {endpoint} failed", status_code=r.status_code, body=r.text)

        try:
            data = r.json()
        except ValueError as e:
            raise GatewayError(f"GraphQL call to {endpoint} returned non-JSON", status_code=r.status_code, body=r.text) from e
        if not isinstance(data, dict):
            raise GatewayError(f"GraphQL call to {endpoint} returned {type(data).__name__}, expected object", status_code=r.status_code, body=r.text)
        return data
