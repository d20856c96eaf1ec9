"""Public exceptions for the LiveChat SDK."""


class LiveChatError(Exception):
    """Base exception for all LiveChat SDK errors."""


class LiveChatConfigError(LiveChatError):
    """Configuration error (missing token getter, invalid settings)."""


class LiveChatRequestBuildError(LiveChatError):
    """The outgoing request could not be built."""


class LiveChatEncodingError(LiveChatRequestBuildError):
    """Request payload or multipart body could not be encoded."""


class LiveChatAuthError(LiveChatError):
    """No usable token was available for the request."""


class LiveChatUnsupportedTokenError(LiveChatAuthError):
    """Token scheme is neither Bearer nor Basic."""

    def __init__(self, token_type: str) -> None:
        super().__init__(f"unsupported token type: {token_type!r}")
        self.token_type = token_type


class LiveChatTransportError(LiveChatError):
    """Network failure while sending the request or reading the response."""


class LiveChatAPIError(LiveChatError):
    """Structured error returned by the LiveChat API."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class LiveChatUnexpectedResponseError(LiveChatError):
    """Error response whose body is not a structured API error."""

    def __init__(self, message: str, status_code: int, raw_body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.raw_body = raw_body


class LiveChatDecodeError(LiveChatError):
    """Successful response body does not match the expected shape."""
