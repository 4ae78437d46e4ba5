"""Exception hierarchy for the ShipHero SDK.

Every failure at the transport boundary is converted to one of these before it
reaches the caller; the underlying exception, if any, is chained as
``__cause__``.
"""

from typing import Any


class ShipHeroError(Exception):
    """Base exception for ShipHero SDK errors."""

    pass


class AuthenticationError(ShipHeroError):
    """Raised when credential exchange or token refresh fails."""

    pass


class ApiError(ShipHeroError):
    """Raised when the API answers with an error.

    Attributes:
        status_code: HTTP status, 400 for GraphQL envelope errors, 0 when no
            response was received.
        error_code: Machine-readable API error code, if the API sent one.
        response_body: Decoded error body, if any.
        errors: Raw GraphQL error objects, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        error_code: str | None = None,
        response_body: Any = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.response_body = response_body
        self.errors = errors or []


class NotFoundError(ApiError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    pass


class ValidationError(ApiError):
    """Raised when the API rejects a request's fields.

    Attributes:
        field_errors: Mapping of field name to validation messages.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 422,
        error_code: str | None = None,
        response_body: Any = None,
        field_errors: dict[str, list[str]] | None = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            response_body=response_body,
        )
        self.field_errors = field_errors or {}


class RateLimitError(ApiError):
    """Raised when the API keeps answering HTTP 429.

    Attributes:
        retry_after: Seconds the API asked us to wait, if it said.
    """

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        error_code: str | None = None,
        response_body: Any = None,
    ):
        super().__init__(
            message,
            status_code=429,
            error_code=error_code,
            response_body=response_body,
        )
        self.retry_after = retry_after
