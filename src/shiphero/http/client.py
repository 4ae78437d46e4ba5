"""Authenticated HTTP transport for the ShipHero REST endpoints.

Implements the client every resource API talks through:
- Lazy bearer-token authentication guarded so concurrent first calls
  authenticate only once
- Proactive token renewal before expiry and a single renewal on HTTP 401
- Optional retries with exponential backoff on timeouts, 429 and 5xx
- Conversion of every failure into a ShipHeroError subclass
"""

import json
import random
import threading
import time
from datetime import datetime, timezone
from decimal import Decimal
from email.utils import parsedate_to_datetime
from functools import lru_cache
from typing import Any

import requests
from pydantic import TypeAdapter

from shiphero.config import ShipHeroSettings, get_settings
from shiphero.exceptions import (
    ApiError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ShipHeroError,
    ValidationError,
)
from shiphero.logging_config import get_logger
from shiphero.models.auth import AuthResponse
from shiphero.models.base import ShipHeroModel

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _type_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _encode_json(value: Any) -> str:
    """Encode JSON text, writing Decimals as exact numbers.

    Raises:
        TypeError: If a value is not JSON serializable.
        ValueError: For non-finite numbers.
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot encode non-finite number {value}")
        return str(value)
    if isinstance(value, dict):
        members = (
            f"{json.dumps(str(key))}:{_encode_json(item)}" for key, item in value.items()
        )
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode_json(item) for item in value) + "]"
    return json.dumps(value, allow_nan=False)


def _serialize(body: Any) -> bytes:
    """Encode a request model (or a plain mapping) as a UTF-8 JSON body."""
    if isinstance(body, ShipHeroModel):
        body = body.to_payload()
    return _encode_json(body).encode("utf-8")


def _parse_retry_after(response: requests.Response) -> float | None:
    """Read a Retry-After header given either as seconds or as an HTTP date."""
    value = response.headers.get("Retry-After")
    if not value:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


def _extract_field_errors(body: Any) -> dict[str, list[str]]:
    """Pull a ``{field: [messages]}`` map out of an error body, if it has one."""
    if not isinstance(body, dict):
        return {}
    errors = body.get("errors")
    if not isinstance(errors, dict):
        return {}
    field_errors: dict[str, list[str]] = {}
    for field_name, messages in errors.items():
        if isinstance(messages, (list, tuple)):
            field_errors[str(field_name)] = [str(m) for m in messages]
        else:
            field_errors[str(field_name)] = [str(messages)]
    return field_errors


class ShipHeroHttpClient:
    """Authenticated client for the ShipHero REST-style endpoints.

    Owns one ``requests.Session`` and the current access token. Every call
    made through :meth:`get`, :meth:`post`, :meth:`put` or :meth:`delete`
    authenticates first if no token is held.

    Example:
        >>> with ShipHeroHttpClient() as http:
        ...     orders = http.get("/orders", list[Order])
    """

    MAX_BACKOFF_SECONDS = 60.0

    # Renew tokens this many seconds before the server would expire them
    TOKEN_EXPIRY_SKEW_SECONDS = 30.0

    def __init__(
        self,
        settings: ShipHeroSettings | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the transport.

        Args:
            settings: SDK settings. If None, loads from environment.
            session: HTTP session to use. If None, a new one is created.
        """
        self.settings = settings or get_settings()
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        self._auth_response: AuthResponse | None = None
        self._token_expires_at: float | None = None
        self._auth_lock = threading.RLock()

    # --- Session state ---

    @property
    def auth_response(self) -> AuthResponse | None:
        """The token envelope currently in use, if any."""
        return self._auth_response

    @property
    def access_token(self) -> str | None:
        return self._auth_response.access_token if self._auth_response else None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def _token_expired(self) -> bool:
        if self._token_expires_at is None:
            return False
        return time.monotonic() >= self._token_expires_at - self.TOKEN_EXPIRY_SKEW_SECONDS

    def _has_usable_token(self) -> bool:
        if not self.is_authenticated:
            return False
        return not (self.settings.auto_refresh_tokens and self._token_expired())

    def _store_token(self, auth: AuthResponse) -> None:
        self._auth_response = auth
        if auth.expires_in > 0:
            self._token_expires_at = time.monotonic() + auth.expires_in
        else:
            self._token_expires_at = None
        self._session.headers["Authorization"] = f"Bearer {auth.access_token}"

    # --- Authentication ---

    def authenticate(self) -> AuthResponse:
        """Exchange the configured credentials for an access token.

        Returns:
            The new token envelope, which also becomes the current session.

        Raises:
            AuthenticationError: If the exchange fails or yields no token.
        """
        with self._auth_lock:
            logger.info(
                "Authenticating with ShipHero",
                extra={"url": self.settings.token_url},
            )
            auth = self._exchange_token(
                self.settings.token_url,
                {
                    "username": self.settings.username,
                    "password": self.settings.password,
                },
                failure_message="Authentication failed",
                missing_token_message="Failed to obtain access token",
            )
            logger.info(
                "Successfully authenticated with ShipHero",
                extra={"expires_in": auth.expires_in},
            )
            return auth

    def refresh_token(self) -> AuthResponse:
        """Swap the held refresh token for a new access token.

        Raises:
            AuthenticationError: If no refresh token is held, or the refresh
                fails or yields no token.
        """
        with self._auth_lock:
            refresh = self._auth_response.refresh_token if self._auth_response else None
            if not refresh:
                raise AuthenticationError("No refresh token available")

            logger.info(
                "Refreshing access token",
                extra={"url": self.settings.refresh_url},
            )
            auth = self._exchange_token(
                self.settings.refresh_url,
                {"refresh_token": refresh},
                failure_message="Token refresh failed",
                missing_token_message="Failed to refresh access token",
            )
            logger.info(
                "Successfully refreshed access token",
                extra={"expires_in": auth.expires_in},
            )
            return auth

    def _exchange_token(
        self,
        url: str,
        payload: dict[str, Any],
        failure_message: str,
        missing_token_message: str,
    ) -> AuthResponse:
        try:
            response = self._send("POST", url, data=_serialize(payload))
            if not 200 <= response.status_code < 300:
                logger.error(
                    failure_message,
                    extra={"url": url, "status_code": response.status_code},
                )
                raise AuthenticationError(f"{failure_message}: {response.text}")

            auth = AuthResponse.model_validate(response.json())
        except ShipHeroError:
            raise
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(failure_message, extra={"url": url, "error": str(e)})
            raise AuthenticationError(failure_message) from e

        if not auth.access_token:
            logger.error(missing_token_message, extra={"url": url})
            raise AuthenticationError(missing_token_message)

        self._store_token(auth)
        return auth

    def _renew_token(self) -> AuthResponse:
        """Refresh if possible, otherwise (or if that fails) re-authenticate."""
        if self._auth_response and self._auth_response.refresh_token:
            try:
                return self.refresh_token()
            except AuthenticationError as e:
                logger.warning(
                    "Token refresh failed, re-authenticating",
                    extra={"error": str(e)},
                )
        return self.authenticate()

    def _ensure_token(self) -> None:
        """Make sure a usable token is held before a business call."""
        if self._has_usable_token():
            return

        with self._auth_lock:
            # Another thread may have finished authenticating while we waited
            if self._has_usable_token():
                return
            if not self.is_authenticated:
                self.authenticate()
            else:
                logger.info("Access token expired, renewing")
                self._renew_token()

    # --- Low-level request handling ---

    def _calculate_backoff(self, retry_count: int) -> float:
        """Calculate the delay before retry ``retry_count`` (1-based).

        Uses ``retry_delay * 2**(retry_count - 1)`` with exponential backoff,
        a flat ``retry_delay`` otherwise, plus up to ``retry_delay`` of jitter.
        """
        policy = self.settings.retry_policy
        if policy is None:
            return 0.0
        if policy.use_exponential_backoff:
            base = policy.retry_delay * (2 ** (retry_count - 1))
        else:
            base = policy.retry_delay
        jitter = random.uniform(0, policy.retry_delay)
        return min(self.MAX_BACKOFF_SECONDS, base + jitter)

    @staticmethod
    def _is_retryable_status(status_code: int) -> bool:
        return status_code == 429 or status_code >= 500

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send one HTTP exchange, retrying transient failures per the policy.

        Raises:
            requests.exceptions.RequestException: When the final attempt fails
                without a response.
        """
        policy = self.settings.retry_policy
        max_retries = policy.max_retries if policy else 0
        retry_count = 0

        while True:
            logger.debug(
                "Sending request",
                extra={"method": method, "url": url, "attempt": retry_count + 1},
            )
            try:
                response = self._session.request(
                    method, url, timeout=self.settings.timeout, **kwargs
                )
            except (
                requests.exceptions.Timeout,
                requests.exceptions.ConnectionError,
            ) as e:
                if retry_count >= max_retries:
                    raise
                retry_count += 1
                backoff_time = self._calculate_backoff(retry_count)
                logger.warning(
                    "Request failed, retrying",
                    extra={
                        "url": url,
                        "error": str(e),
                        "retry_count": retry_count,
                        "backoff_seconds": backoff_time,
                    },
                )
                time.sleep(backoff_time)
                continue

            if self._is_retryable_status(response.status_code) and retry_count < max_retries:
                retry_count += 1
                backoff_time = self._calculate_backoff(retry_count)
                if response.status_code == 429:
                    retry_after = _parse_retry_after(response)
                    if retry_after is not None:
                        backoff_time = min(self.MAX_BACKOFF_SECONDS, retry_after)
                logger.warning(
                    "Retryable response from ShipHero, backing off",
                    extra={
                        "url": url,
                        "status_code": response.status_code,
                        "retry_count": retry_count,
                        "backoff_seconds": backoff_time,
                    },
                )
                time.sleep(backoff_time)
                continue

            return response

    def _authorized_request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send a business request with a valid token, renewing once on 401."""
        self._ensure_token()
        sent_token = self.access_token
        response = self._send(method, url, **kwargs)

        if response.status_code == 401 and self.settings.auto_refresh_tokens:
            logger.warning(
                "Access token rejected, renewing and retrying once",
                extra={"method": method, "url": url},
            )
            with self._auth_lock:
                if self.access_token == sent_token:
                    self._renew_token()
            response = self._send(method, url, **kwargs)

        return response

    def _raise_for_status(self, response: requests.Response, method: str, path: str) -> None:
        """Map a non-2xx response to the matching ApiError subclass."""
        status = response.status_code
        if 200 <= status < 300:
            return

        try:
            body: Any = response.json()
        except ValueError:
            body = {"text": response.text}

        error_code = None
        if isinstance(body, dict):
            code = body.get("code") or body.get("errorCode")
            error_code = str(code) if code is not None else None

        message = f"ShipHero API {method} {path} failed with {status}"
        logger.error(
            "ShipHero API error",
            extra={"method": method, "path": path, "status_code": status, "error": body},
        )

        if status == 404:
            raise NotFoundError(message, status_code=status, error_code=error_code, response_body=body)
        if status == 429:
            raise RateLimitError(
                message,
                retry_after=_parse_retry_after(response),
                error_code=error_code,
                response_body=body,
            )
        field_errors = _extract_field_errors(body)
        if status == 422 or (status == 400 and field_errors):
            raise ValidationError(
                message,
                status_code=status,
                error_code=error_code,
                response_body=body,
                field_errors=field_errors,
            )
        raise ApiError(message, status_code=status, error_code=error_code, response_body=body)

    @staticmethod
    def _decode_body(response: requests.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _build_url(self, path: str) -> str:
        return f"{self.settings.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
        response_type: Any = None,
    ) -> Any:
        url = self._build_url(path)
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = params

        try:
            if body is not None:
                kwargs["data"] = _serialize(body)
            response = self._authorized_request(method, url, **kwargs)
            self._raise_for_status(response, method, path)
            data = self._decode_body(response)
            if data is None or response_type is None:
                return data
            return _type_adapter(response_type).validate_python(data)
        except ShipHeroError:
            raise
        except (requests.exceptions.RequestException, TypeError, ValueError) as e:
            logger.error(
                "ShipHero request failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise ApiError(f"ShipHero API {method} {path} failed: {e}", status_code=0) from e

    # --- REST verbs ---

    def get(
        self,
        path: str,
        response_type: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET ``path`` and decode the body into ``response_type``.

        Returns:
            The decoded body, or None when the response has no body.
        """
        return self._request("GET", path, params=params, response_type=response_type)

    def post(self, path: str, body: Any = None, response_type: Any = None) -> Any:
        return self._request("POST", path, body=body, response_type=response_type)

    def put(self, path: str, body: Any = None, response_type: Any = None) -> Any:
        return self._request("PUT", path, body=body, response_type=response_type)

    def delete(self, path: str) -> None:
        self._request("DELETE", path)

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self) -> "ShipHeroHttpClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes the session."""
        self.close()
