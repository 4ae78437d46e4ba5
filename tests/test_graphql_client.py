"""Tests for the GraphQL transport envelope handling."""

from datetime import datetime

import pytest
import requests

from shiphero.exceptions import ApiError, NotFoundError
from shiphero.http import ShipHeroGraphQLClient
from shiphero.models import ShipHeroModel

from conftest import GRAPHQL_URL, TOKEN_URL

QUERY = "query GetThing { thing { id } }"


class ThingData(ShipHeroModel):
    thing: dict | None = None


@pytest.fixture
def graphql_client(settings, session, router, make_response, token_payload):
    router.add("POST", TOKEN_URL, make_response(200, token_payload))
    return ShipHeroGraphQLClient(settings, session=session)


class TestEnvelope:
    def test_returns_data_field(self, graphql_client, router, make_response):
        router.add("POST", GRAPHQL_URL, make_response(200, {"data": {"thing": {"id": "1"}}}))

        assert graphql_client.execute_query(QUERY) == {"thing": {"id": "1"}}

    def test_posts_query_and_variables(self, graphql_client, router, make_response):
        router.add("POST", GRAPHQL_URL, make_response(200, {"data": {}}))

        graphql_client.execute_query(QUERY, {"id": "1"})

        assert router.calls_to(GRAPHQL_URL)[0]["body"] == {
            "query": QUERY,
            "variables": {"id": "1"},
        }

    def test_missing_data_returns_empty_mapping(self, graphql_client, router, make_response):
        router.add("POST", GRAPHQL_URL, make_response(200, {"data": None}))

        assert graphql_client.execute_mutation("mutation { noop }") == {}

    def test_response_type_validation(self, graphql_client, router, make_response):
        router.add("POST", GRAPHQL_URL, make_response(200, {"data": {"thing": {"id": "9"}}}))

        data = graphql_client.execute_query(QUERY, response_type=ThingData)

        assert data.thing == {"id": "9"}


class TestErrors:
    def test_query_errors_are_joined(self, graphql_client, router, make_response):
        router.add(
            "POST",
            GRAPHQL_URL,
            make_response(200, {"data": None, "errors": [{"message": "a"}, {"message": "b"}]}),
        )

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY)

        assert "a; b" in str(exc_info.value)
        assert exc_info.value.status_code == 400
        assert len(exc_info.value.errors) == 2

    def test_mutation_errors_are_joined(self, graphql_client, router, make_response):
        router.add(
            "POST",
            GRAPHQL_URL,
            make_response(200, {"errors": [{"message": "a"}, {"message": "b"}]}),
        )

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_mutation("mutation { createThing { id } }")

        assert "GraphQL mutation failed: a; b" == str(exc_info.value)
        assert exc_info.value.status_code == 400

    def test_error_code_from_extensions(self, graphql_client, router, make_response):
        router.add(
            "POST",
            GRAPHQL_URL,
            make_response(
                200,
                {"errors": [{"message": "denied", "extensions": {"code": "FORBIDDEN"}}]},
            ),
        )

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY)

        assert exc_info.value.error_code == "FORBIDDEN"

    def test_error_without_message_uses_placeholder(self, graphql_client, router, make_response):
        router.add(
            "POST",
            GRAPHQL_URL,
            make_response(200, {"errors": [{"message": None}, {"message": "b"}]}),
        )

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY)

        assert str(exc_info.value) == "GraphQL query failed: Unknown error; b"
        assert exc_info.value.status_code == 400

    def test_malformed_extensions_are_ignored(self, graphql_client, router, make_response):
        router.add(
            "POST",
            GRAPHQL_URL,
            make_response(
                200,
                {
                    "errors": [
                        {"message": "a", "extensions": "oops"},
                        {"message": "b", "extensions": {"code": "BAD_INPUT"}},
                    ]
                },
            ),
        )

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY)

        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == "BAD_INPUT"

    def test_unserializable_variables_are_wrapped(self, graphql_client, router):
        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY, {"when": datetime(2024, 1, 1)})

        assert exc_info.value.status_code == 0
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert router.calls_to(GRAPHQL_URL) == []

    def test_transport_failure_is_wrapped_with_status_zero(self, graphql_client, router):
        failure = requests.exceptions.ConnectionError("dns failure")
        router.add("POST", GRAPHQL_URL, failure)

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY)

        assert exc_info.value.status_code == 0
        assert exc_info.value.__cause__ is failure

    def test_non_object_envelope_is_wrapped(self, graphql_client, router, make_response):
        router.add("POST", GRAPHQL_URL, make_response(200, ["unexpected"]))

        with pytest.raises(ApiError) as exc_info:
            graphql_client.execute_query(QUERY)

        assert exc_info.value.status_code == 0
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_http_error_status_is_mapped(self, graphql_client, router, make_response):
        router.add("POST", GRAPHQL_URL, make_response(404, text="not here"))

        with pytest.raises(NotFoundError):
            graphql_client.execute_query(QUERY)
