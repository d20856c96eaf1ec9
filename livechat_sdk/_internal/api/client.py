"""Authenticated action client shared by all LiveChat service APIs."""

import os
import sys
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from livechat_sdk._internal.api.request import HTTPRequestGenerator
from livechat_sdk._internal.api.response import (
    StructuredError,
    SynthesizedError,
    classify_response,
    decode_body,
    read_response,
)
from livechat_sdk._internal.http import DEFAULT_TIMEOUT, create_http_client
from livechat_sdk.authorization import BEARER_TOKEN, SUPPORTED_TOKEN_TYPES, Token, TokenGetter
from livechat_sdk.exceptions import (
    LiveChatAuthError,
    LiveChatConfigError,
    LiveChatEncodingError,
    LiveChatRequestBuildError,
    LiveChatTransportError,
    LiveChatUnsupportedTokenError,
)

DEFAULT_HOST = "https://api.livechatinc.com"
DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)
USER_AGENT_TAG = "Python SDK Application"
UPLOAD_FILE_ACTION = "upload_file"

# Headers describing the body of the base request; they are recomputed.
_BODY_HEADERS = frozenset({"content-length", "content-type", "transfer-encoding"})


class UploadFileResponse(BaseModel):
    """Response of the upload_file action."""

    url: str = ""


class API:
    """Raw API client sending authenticated actions to a LiveChat service.

    This is the base used by the specialized clients in `livechat_sdk.client`.
    Each call fetches a fresh token, builds the request with the configured
    request generator and decodes the JSON response. Errors are raised to the
    caller; nothing is retried.

    Host and custom headers are read at call time. The setters are not
    synchronized with in-flight calls.
    """

    def __init__(
        self,
        token_getter: TokenGetter | None,
        client: httpx.Client | None = None,
        client_id: str = "",
        request_generator: HTTPRequestGenerator | None = None,
        *,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the API client.

        Args:
            token_getter: Returns the current token for each request.
            client: HTTP transport. If None, a client with `timeout` is created
                and owned by this instance.
            client_id: Application client id, sent in the User-Agent header.
            request_generator: Builds the base request for an action.
            host: API host, scheme included.
            timeout: Timeout in seconds for the default transport.
            debug: Enable debug logging to stderr.

        Raises:
            LiveChatConfigError: token_getter or request_generator is missing.
        """
        if token_getter is None:
            raise LiveChatConfigError("cannot initialize api without TokenGetter")
        if request_generator is None:
            raise LiveChatConfigError("cannot initialize api without HTTPRequestGenerator")

        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(timeout=timeout)
        self._token_getter = token_getter
        self._client_id = client_id
        self._request_generator = request_generator
        self._host = host
        self._custom_headers = httpx.Headers()
        self._debug = debug

    @classmethod
    def from_env(
        cls,
        token_getter: TokenGetter | None,
        request_generator: HTTPRequestGenerator | None,
        *,
        client: httpx.Client | None = None,
    ) -> "API":
        """Create an API client from environment variables.

        Optional environment variables:
            LIVECHAT_CLIENT_ID: Client id sent in the User-Agent header.
            LIVECHAT_API_HOST: API host override.
            LIVECHAT_TIMEOUT_MS: Timeout of the default transport in milliseconds.
            LIVECHAT_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ValueError: LIVECHAT_TIMEOUT_MS is not a valid integer.
        """
        client_id = os.environ.get("LIVECHAT_CLIENT_ID", "")
        host = os.environ.get("LIVECHAT_API_HOST") or DEFAULT_HOST
        debug = os.environ.get("LIVECHAT_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("LIVECHAT_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            token_getter,
            client,
            client_id,
            request_generator,
            host=host,
            timeout=timeout_ms / 1000,
            debug=debug,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def custom_headers(self) -> dict[str, str]:
        return dict(self._custom_headers.items())

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[livechat-sdk] {message}", file=sys.stderr)

    def set_custom_header(self, key: str, value: str | None) -> None:
        """Set a header (e.g. X-Debug-Id or X-Author-Id) sent with every call.

        Custom headers take precedence over the ones set by the client. Setting
        a header again replaces its value; None removes it.
        """
        if value is None:
            self._custom_headers.pop(key, None)
            return
        self._custom_headers[key] = value

    def set_custom_host(self, host: str) -> None:
        """Change the API host for subsequent calls.

        Meant for pointing the client at a test server, not for production.
        """
        self._host = host

    def call(self, action: str, payload: Any = None, response_type: Any = None) -> Any:
        """Send an action to the API and decode its response.

        Args:
            action: Action name, e.g. "list_webhooks".
            payload: JSON serializable request body. Pydantic models, also nested
                in lists or dicts, are dumped without None fields.
            response_type: Expected response shape. If None, the parsed JSON is
                returned.

        Returns:
            The decoded response.

        Raises:
            LiveChatEncodingError: Payload is not JSON serializable.
            LiveChatAuthError: No token is available or its type is unsupported.
            LiveChatRequestBuildError: The request generator failed.
            LiveChatTransportError: Sending the request or reading the response failed.
            LiveChatAPIError: The API returned a structured error.
            LiveChatUnexpectedResponseError: The API returned an unparsable error.
            LiveChatDecodeError: The response does not match response_type.
        """
        raw_body = _encode_payload(payload)

        token = self._get_token()
        if token.type not in SUPPORTED_TOKEN_TYPES:
            raise LiveChatUnsupportedTokenError(token.type)

        base = self._generate_request(token, action)

        headers = _copy_headers(base)
        headers["Content-Type"] = "application/json"
        headers["Authorization"] = f"{token.type} {token.access_token}"
        headers["User-Agent"] = self._user_agent()
        headers["X-Region"] = token.region
        headers.update(self._custom_headers)

        request = self._client.build_request(
            base.method,
            base.url,
            headers=headers,
            content=raw_body,
            extensions=dict(base.extensions),
        )
        return self._send(request, response_type)

    def close(self) -> None:
        """Close the HTTP transport if it was created by this client."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "API":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_token(self) -> Token:
        token = self._token_getter()
        if token is None:
            raise LiveChatAuthError("couldn't get token")
        return token

    def _generate_request(self, token: Token, action: str) -> httpx.Request:
        try:
            return self._request_generator(token, self._host, action)
        except Exception as e:
            raise LiveChatRequestBuildError(f"couldn't create new http request: {e}") from e

    def _user_agent(self) -> str:
        return f"{USER_AGENT_TAG} {self._client_id}"

    def _send(self, request: httpx.Request, response_type: Any) -> Any:
        """Execute the request and decode the response."""
        self._log_debug(f"Sending {request.method} {request.url}")
        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise LiveChatTransportError(f"request to {request.url} failed: {e}") from e

        body = read_response(response)
        self._log_debug(f"Response status {response.status_code}")

        outcome = classify_response(response.status_code, body)
        if isinstance(outcome, StructuredError | SynthesizedError):
            raise outcome.error
        return decode_body(outcome.body, response_type)


class FileUploadAPI(API):
    """Raw API client with file upload support."""

    def upload_file(self, filename: str, file: bytes) -> str:
        """Upload a file to the LiveChat CDN.

        The returned URL is valid for about 24 hours and should be used in a
        single follow-up action (e.g. send_event).

        Args:
            filename: Name of the uploaded file.
            file: File contents.

        Returns:
            URL of the uploaded file.

        Raises:
            LiveChatAuthError: No token is available.
            LiveChatRequestBuildError: The request generator failed.
            LiveChatEncodingError: The multipart body could not be built.
            LiveChatTransportError: Sending the request or reading the response failed.
            LiveChatAPIError: The API returned a structured error.
            LiveChatUnexpectedResponseError: The API returned an unparsable error.
        """
        if not isinstance(filename, str):
            raise LiveChatEncodingError(
                f"couldn't create form file: filename must be str, got {type(filename).__name__}"
            )
        if not isinstance(file, bytes | bytearray | memoryview):
            raise LiveChatEncodingError(
                f"couldn't write file to multipart body: expected bytes, got {type(file).__name__}"
            )

        token = self._get_token()
        base = self._generate_request(token, UPLOAD_FILE_ACTION)

        # Upload is always authorized with the Bearer scheme.
        headers = _copy_headers(base)
        headers["Authorization"] = f"{BEARER_TOKEN} {token.access_token}"
        headers["User-Agent"] = self._user_agent()
        headers["X-Region"] = token.region

        try:
            request = self._client.build_request(
                "POST",
                base.url,
                headers=headers,
                files={"file": (filename, bytes(file), "application/octet-stream")},
                extensions=dict(base.extensions),
            )
        except (TypeError, ValueError) as e:
            raise LiveChatEncodingError(f"couldn't create multipart body: {e}") from e

        response: UploadFileResponse = self._send(request, UploadFileResponse)
        return response.url


def _encode_payload(payload: Any) -> bytes:
    """Serialize a request payload to JSON bytes.

    Nested pydantic models, dataclasses and datetimes are supported; None
    fields of models are omitted.
    """
    try:
        return to_json(payload, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise LiveChatEncodingError(f"couldn't encode request payload: {e}") from e


def _copy_headers(request: httpx.Request) -> httpx.Headers:
    """Copy the base request headers, dropping the ones tied to its body."""
    return httpx.Headers(
        [(k, v) for k, v in request.headers.multi_items() if k.lower() not in _BODY_HEADERS]
    )
