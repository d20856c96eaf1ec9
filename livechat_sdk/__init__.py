"""LiveChat SDK for Python.

Public API:
    new_configuration_api, new_agent_api, new_customer_api - Service clients
    Token, TokenGetter, static_token_getter - Authorization
    livechat_sdk.exceptions - Error types

Internal:
    _internal.api - Shared action dispatch
"""

from livechat_sdk._version import __version__
from livechat_sdk.authorization import (
    BASIC_TOKEN,
    BEARER_TOKEN,
    Token,
    TokenGetter,
    static_token_getter,
)
from livechat_sdk.client import new_agent_api, new_configuration_api, new_customer_api

__all__ = [
    "__version__",
    "BASIC_TOKEN",
    "BEARER_TOKEN",
    "Token",
    "TokenGetter",
    "static_token_getter",
    "new_configuration_api",
    "new_agent_api",
    "new_customer_api",
]
