"""Response classification and decoding.

Every completed response ends in exactly one of three outcomes:

    Success            - status 200, body is handed to `decode_body`
    StructuredError    - error body parsed into code and message
    SynthesizedError   - error body unusable, raw status and body preserved

Classification is a pure function of status code and body bytes; the client
decides what to raise.
"""

import json
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError, model_validator

from livechat_sdk.exceptions import (
    LiveChatAPIError,
    LiveChatDecodeError,
    LiveChatTransportError,
    LiveChatUnexpectedResponseError,
)


class APIErrorDetails(BaseModel):
    """Error details as sent by the API."""

    code: str = Field(default="", validation_alias=AliasChoices("code", "type"))
    message: str = ""


class APIErrorBody(BaseModel):
    """Error response envelope: `{"error": {"code": ..., "message": ...}}`.

    A flat `{"code": ..., "message": ...}` body is accepted as well.
    """

    error: APIErrorDetails = Field(default_factory=APIErrorDetails)

    @model_validator(mode="before")
    @classmethod
    def wrap_flat_body(cls, data: Any) -> Any:
        if isinstance(data, dict) and "error" not in data:
            return {"error": data}
        return data


@dataclass(frozen=True)
class Success:
    """Status 200; the body still has to be decoded."""

    body: bytes


@dataclass(frozen=True)
class StructuredError:
    """Error response with a usable code and message."""

    error: LiveChatAPIError


@dataclass(frozen=True)
class SynthesizedError:
    """Error response whose body could not be parsed."""

    error: LiveChatUnexpectedResponseError


ResponseOutcome = Success | StructuredError | SynthesizedError


def read_response(response: httpx.Response) -> bytes:
    """Drain a streamed response body.

    Raises:
        LiveChatTransportError: The connection failed while reading.
    """
    try:
        return response.read()
    except httpx.HTTPError as e:
        raise LiveChatTransportError(f"couldn't read response body: {e}") from e
    finally:
        response.close()


def classify_response(status_code: int, body: bytes) -> ResponseOutcome:
    """Classify a completed response as success or error."""
    if status_code == httpx.codes.OK:
        return Success(body)

    raw_body = body.decode("utf-8", errors="replace")
    try:
        parsed = APIErrorBody.model_validate_json(body)
    except ValidationError as e:
        return SynthesizedError(
            LiveChatUnexpectedResponseError(
                f"couldn't unmarshal error response: {e.errors()[0]['msg']} "
                f"(code: {status_code}, raw body: {raw_body})",
                status_code=status_code,
                raw_body=raw_body,
            )
        )

    if not parsed.error.message:
        return SynthesizedError(
            LiveChatUnexpectedResponseError(
                f"couldn't unmarshal error response (code: {status_code}, raw body: {raw_body})",
                status_code=status_code,
                raw_body=raw_body,
            )
        )

    return StructuredError(
        LiveChatAPIError(
            parsed.error.message,
            code=parsed.error.code,
            status_code=status_code,
        )
    )


def decode_body(body: bytes, response_type: Any = None) -> Any:
    """Decode a successful response body.

    Args:
        body: Raw response body.
        response_type: Expected shape (pydantic model, dict, list, ...). If
            None, the parsed JSON is returned as is.

    Raises:
        LiveChatDecodeError: Body is not valid JSON or does not match the shape.
    """
    if response_type is None:
        if not body.strip():
            return None
        try:
            return json.loads(body)
        except ValueError as e:
            raise LiveChatDecodeError(f"couldn't decode response body: {e}") from e

    try:
        return TypeAdapter(response_type).validate_json(body)
    except ValidationError as e:
        raise LiveChatDecodeError(f"couldn't decode response body: {e}") from e
