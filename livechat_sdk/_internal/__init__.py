"""Internal modules for LiveChat SDK.

WARNING: This package contains the shared request machinery used by the
service clients in `livechat_sdk.client`. Use those instead.

Modules:
    api - Authenticated action dispatch and file upload
    http - Shared HTTP client configuration
"""
