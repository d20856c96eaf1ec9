"""Authorization tokens consumed by the API clients.

Tokens are produced and refreshed by the application. The SDK only asks for
the current one through a `TokenGetter` right before each request.
"""

from collections.abc import Callable

from pydantic import BaseModel

BEARER_TOKEN = "Bearer"
BASIC_TOKEN = "Basic"

SUPPORTED_TOKEN_TYPES: frozenset[str] = frozenset({BEARER_TOKEN, BASIC_TOKEN})


class Token(BaseModel):
    """Credential used to authorize API requests.

    Fields:
        type: Authorization scheme, "Bearer" or "Basic".
        access_token: Credential value sent after the scheme.
        region: Data center region, sent as X-Region.
        license_id: Optional license the token belongs to.
        organization_id: Optional organization the token belongs to.
    """

    type: str
    access_token: str
    region: str = ""
    license_id: int | None = None
    organization_id: str | None = None

    model_config = {"frozen": True}


TokenGetter = Callable[[], Token | None]


def static_token_getter(token: Token) -> TokenGetter:
    """Return a token getter that always yields the given token."""

    def getter() -> Token | None:
        return token

    return getter
