"""Token envelope returned by the authentication endpoints."""

from shiphero.models.base import ShipHeroModel


class AuthResponse(ShipHeroModel):
    """Access/refresh token pair and its metadata.

    Attributes:
        access_token: Bearer token for API requests.
        refresh_token: Token used to obtain a new access token.
        expires_in: Lifetime of the access token in seconds (0 if unknown).
        scope: Granted scope.
        token_type: Usually ``Bearer``.
    """

    access_token: str | None = None
    refresh_token: str | None = None
    expires_in: int = 0
    scope: str | None = None
    token_type: str | None = None
