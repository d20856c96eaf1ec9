"""Request generators that map an action to its HTTP endpoint."""

from collections.abc import Callable

import httpx

from livechat_sdk.authorization import Token

API_VERSION = "3.3"

HTTPRequestGenerator = Callable[[Token, str, str], httpx.Request]
"""Build the base request for `(token, host, action)`.

The returned request carries method and URL only. Body and auth headers are
filled in by the API client.
"""


def action_url(host: str, name: str, action: str) -> str:
    """Return the versioned action URL of a service."""
    return f"{host}/v{API_VERSION}/{name}/action/{action}"


def default_http_request_generator(name: str) -> HTTPRequestGenerator:
    """Generate API requests for the given service in the stable version.

    Args:
        name: Service name, e.g. "configuration" or "agent".
    """

    def generator(token: Token, host: str, action: str) -> httpx.Request:
        return httpx.Request("POST", action_url(host, name, action))

    return generator


def customer_http_request_generator(name: str = "customer") -> HTTPRequestGenerator:
    """Generate API requests scoped to the token's organization.

    Customer endpoints identify the tenant through a query parameter. The
    organization id is preferred; tokens without one fall back to license id.
    """

    def generator(token: Token, host: str, action: str) -> httpx.Request:
        if token.organization_id:
            params = {"organization_id": token.organization_id}
        elif token.license_id is not None:
            params = {"license_id": str(token.license_id)}
        else:
            raise ValueError("token has neither organization_id nor license_id")
        return httpx.Request("POST", action_url(host, name, action), params=params)

    return generator
