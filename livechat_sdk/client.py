"""Service clients for the LiveChat platform APIs.

All services share the same action client and differ only in how the
request URL is built.

Example usage:
    from livechat_sdk import Token, new_configuration_api, static_token_getter

    token = Token(type="Bearer", access_token="...", region="dal")
    api = new_configuration_api(static_token_getter(token), client_id="my-app")

    webhooks = api.call("list_webhooks", {"owner_client_id": "my-app"})
"""

import httpx

from livechat_sdk._internal.api import (
    API,
    FileUploadAPI,
    customer_http_request_generator,
    default_http_request_generator,
)
from livechat_sdk.authorization import TokenGetter

CONFIGURATION_SERVICE = "configuration"
AGENT_SERVICE = "agent"
CUSTOMER_SERVICE = "customer"


def new_configuration_api(
    token_getter: TokenGetter | None,
    client: httpx.Client | None = None,
    client_id: str = "",
) -> API:
    """Create a Configuration API client."""
    return API(
        token_getter,
        client,
        client_id,
        default_http_request_generator(CONFIGURATION_SERVICE),
    )


def new_agent_api(
    token_getter: TokenGetter | None,
    client: httpx.Client | None = None,
    client_id: str = "",
) -> FileUploadAPI:
    """Create an Agent Chat API client with file upload."""
    return FileUploadAPI(
        token_getter,
        client,
        client_id,
        default_http_request_generator(AGENT_SERVICE),
    )


def new_customer_api(
    token_getter: TokenGetter | None,
    client: httpx.Client | None = None,
    client_id: str = "",
) -> FileUploadAPI:
    """Create a Customer Chat API client with file upload.

    Requests are scoped by the organization id (or license id) of the token.
    """
    return FileUploadAPI(
        token_getter,
        client,
        client_id,
        customer_http_request_generator(CUSTOMER_SERVICE),
    )
