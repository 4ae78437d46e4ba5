"""GraphQL transport for the ShipHero API.

Shares authentication, retries and error mapping with the REST transport and
adds the GraphQL envelope handling on top.
"""

from typing import Any

import requests

from shiphero.exceptions import ApiError, ShipHeroError
from shiphero.logging_config import get_logger

from .client import ShipHeroHttpClient, _serialize, _type_adapter

logger = get_logger(__name__)


def _first_error_code(errors: list[Any]) -> str | None:
    for error in errors:
        if isinstance(error, dict):
            extensions = error.get("extensions")
            if not isinstance(extensions, dict):
                continue
            code = extensions.get("code")
            if code is not None:
                return str(code)
    return None


class ShipHeroGraphQLClient(ShipHeroHttpClient):
    """Client for the ShipHero GraphQL endpoint.

    Every query or mutation is a POST to ``{base_url}/graphql``. Because it is
    also a :class:`ShipHeroHttpClient`, one instance can serve the REST
    resources too, sharing a single token.

    Example:
        >>> client = ShipHeroGraphQLClient()
        >>> data = client.execute_query("query { products { id sku } }")
        >>> data["products"]
    """

    GRAPHQL_PATH = "/graphql"

    def execute_query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        response_type: Any = None,
    ) -> Any:
        """Execute a GraphQL query.

        Args:
            query: The GraphQL query document.
            variables: Optional variables for the query.
            response_type: Optional type to validate the ``data`` field into.

        Returns:
            The ``data`` field of the response, validated into
            ``response_type`` when given.

        Raises:
            ApiError: If the response carries GraphQL errors (status 400), the
                endpoint answers non-2xx, or the request cannot be completed
                (status 0).
            AuthenticationError: If lazy authentication fails.
        """
        return self._execute("query", query, variables, response_type)

    def execute_mutation(
        self,
        mutation: str,
        variables: dict[str, Any] | None = None,
        response_type: Any = None,
    ) -> Any:
        """Execute a GraphQL mutation. Same contract as :meth:`execute_query`."""
        return self._execute("mutation", mutation, variables, response_type)

    def _execute(
        self,
        operation: str,
        document: str,
        variables: dict[str, Any] | None,
        response_type: Any,
    ) -> Any:
        url = self.settings.graphql_url
        payload = {"query": document, "variables": variables or {}}

        try:
            logger.debug(
                "Executing GraphQL %s",
                operation,
                extra={"url": url, "variables": sorted(payload["variables"])},
            )

            response = self._authorized_request("POST", url, data=_serialize(payload))
            self._raise_for_status(response, "POST", self.GRAPHQL_PATH)

            envelope = response.json()
            if not isinstance(envelope, dict):
                raise ValueError("GraphQL response is not a JSON object")

            errors = envelope.get("errors") or []
            if errors:
                error_messages = [
                    str(e.get("message") or "Unknown error") if isinstance(e, dict) else str(e)
                    for e in errors
                ]
                logger.error(
                    "GraphQL errors in response",
                    extra={"operation": operation, "errors": error_messages},
                )
                raise ApiError(
                    f"GraphQL {operation} failed: {'; '.join(error_messages)}",
                    status_code=400,
                    error_code=_first_error_code(errors),
                    errors=errors,
                )

            data = envelope.get("data") or {}
            if response_type is None:
                return data
            return _type_adapter(response_type).validate_python(data)

        except ShipHeroError:
            raise
        except (requests.exceptions.RequestException, TypeError, ValueError) as e:
            logger.error(
                "Error executing GraphQL %s",
                operation,
                extra={"url": url, "error": str(e)},
            )
            raise ApiError(
                f"GraphQL {operation} execution failed", status_code=0
            ) from e
