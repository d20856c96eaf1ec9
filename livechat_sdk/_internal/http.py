"""Shared HTTP client configuration."""

import httpx

from livechat_sdk._version import __version__

DEFAULT_TIMEOUT = 20.0


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create the default HTTP transport for API clients.

    Args:
        timeout: Overall request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": f"livechat-sdk/{__version__}"},
    )
