"""Action dispatch for LiveChat service APIs.

WARNING: This is the shared base of the service clients.
Use the factories in `livechat_sdk.client` instead.
"""

from livechat_sdk._internal.api.client import API, FileUploadAPI
from livechat_sdk._internal.api.request import (
    API_VERSION,
    HTTPRequestGenerator,
    customer_http_request_generator,
    default_http_request_generator,
)

__all__ = [
    "API",
    "FileUploadAPI",
    "API_VERSION",
    "HTTPRequestGenerator",
    "default_http_request_generator",
    "customer_http_request_generator",
]
