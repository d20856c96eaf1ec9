"""Tests for public exceptions."""

import pytest

from livechat_sdk.exceptions import (
    LiveChatAPIError,
    LiveChatAuthError,
    LiveChatConfigError,
    LiveChatDecodeError,
    LiveChatEncodingError,
    LiveChatError,
    LiveChatRequestBuildError,
    LiveChatTransportError,
    LiveChatUnexpectedResponseError,
    LiveChatUnsupportedTokenError,
)


class TestLiveChatError:
    """Tests for base LiveChatError."""

    def test_is_exception(self):
        """LiveChatError should be an Exception."""
        assert issubclass(LiveChatError, Exception)

    def test_can_be_raised(self):
        """LiveChatError should be raisable with message."""
        with pytest.raises(LiveChatError) as exc_info:
            raise LiveChatError("test error")
        assert str(exc_info.value) == "test error"

    @pytest.mark.parametrize(
        "error_cls",
        [
            LiveChatConfigError,
            LiveChatRequestBuildError,
            LiveChatEncodingError,
            LiveChatAuthError,
            LiveChatTransportError,
            LiveChatDecodeError,
        ],
    )
    def test_subclasses_inherit_from_base(self, error_cls):
        """Every SDK error should be catchable as LiveChatError."""
        assert issubclass(error_cls, LiveChatError)


class TestLiveChatAPIError:
    """Tests for LiveChatAPIError."""

    def test_with_message_only(self):
        """Should create error with message only."""
        error = LiveChatAPIError("bad payload")
        assert str(error) == "bad payload"
        assert error.message == "bad payload"
        assert error.code is None
        assert error.status_code is None

    def test_with_code_and_status(self):
        """Should store code and status code."""
        error = LiveChatAPIError("bad payload", code="invalid_request", status_code=400)
        assert error.code == "invalid_request"
        assert error.status_code == 400

    def test_is_not_a_decode_error(self):
        """Structured API errors should be distinguishable from decode failures."""
        assert not issubclass(LiveChatAPIError, LiveChatDecodeError)
        assert not issubclass(LiveChatDecodeError, LiveChatAPIError)


class TestLiveChatUnexpectedResponseError:
    """Tests for LiveChatUnexpectedResponseError."""

    def test_stores_raw_response(self):
        """Should keep raw status and body."""
        error = LiveChatUnexpectedResponseError("oops", status_code=502, raw_body="<html>")
        assert str(error) == "oops"
        assert error.status_code == 502
        assert error.raw_body == "<html>"

    def test_is_not_a_structured_api_error(self):
        """Synthesized errors should not pose as structured API errors."""
        assert not issubclass(LiveChatUnexpectedResponseError, LiveChatAPIError)


class TestLiveChatUnsupportedTokenError:
    """Tests for LiveChatUnsupportedTokenError."""

    def test_is_auth_error(self):
        """Unsupported schemes should be authentication errors."""
        assert issubclass(LiveChatUnsupportedTokenError, LiveChatAuthError)

    def test_names_the_scheme(self):
        """Message should name the rejected scheme."""
        error = LiveChatUnsupportedTokenError("Digest")
        assert error.token_type == "Digest"
        assert "Digest" in str(error)


class TestLiveChatEncodingError:
    """Tests for LiveChatEncodingError."""

    def test_is_request_build_error(self):
        """Encoding failures should be request build errors."""
        assert issubclass(LiveChatEncodingError, LiveChatRequestBuildError)
