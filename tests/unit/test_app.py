"""
Tests for application wiring: static endpoints, the centralized error
handlers and the database dependency.
"""

import importlib
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from movies_lib.core.errors import (
    BadRequestError,
    CustomError,
    NotFoundError,
    register_error_handlers,
)
from movies_lib import server
from movies_lib.server import create_app


class TestStaticEndpoints:

    def test_health_check(self, client):
        response = client.get("/health-check")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Server is working!"}

    def test_about(self, client):
        response = client.get("/about")

        assert response.status_code == 200
        assert response.text == "about"
        assert response.headers["content-type"].startswith("text/plain")

    def test_ab_optional_cd_matches_abcd(self, client):
        response = client.get("/abcd")

        assert response.status_code == 200
        assert response.text == "ab?cd"

    def test_ab_optional_cd_matches_acd(self, client):
        response = client.get("/acd")

        assert response.status_code == 200
        assert response.text == "ab?cd"

    def test_ab_optional_cd_rejects_other_letters(self, client):
        assert client.get("/abbcd").status_code == 404

    def test_api_docs_are_served(self, client):
        assert client.get("/api-docs").status_code == 200

        schema = client.get("/api-docs/openapi.json").json()
        assert "/movies/genres/{name}" in schema["paths"]
        assert "/genres/{genre_id}" in schema["paths"]


class TestErrorHandlers:
    """The centralized handlers, exercised through a throwaway app."""

    @staticmethod
    def _client() -> TestClient:
        app = FastAPI()
        register_error_handlers(app)

        @app.get("/bad")
        async def bad():
            raise BadRequestError("Title was not provided.")

        @app.get("/missing")
        async def missing():
            raise NotFoundError(errors=[{"message": "first"}, {"message": "second"}])

        @app.get("/boom")
        async def boom():
            raise RuntimeError("driver exploded")

        @app.get("/db")
        async def db():
            raise ServerSelectionTimeoutError("no servers")

        return TestClient(app, raise_server_exceptions=False)

    def test_custom_error_uses_its_status_and_errors(self):
        response = self._client().get("/bad")

        assert response.status_code == 400
        assert response.json() == {"errors": [{"message": "Title was not provided."}]}

    def test_custom_error_with_several_entries(self):
        response = self._client().get("/missing")

        assert response.status_code == 404
        assert response.json() == {"errors": [{"message": "first"}, {"message": "second"}]}

    def test_unclassified_error_is_a_generic_500(self):
        response = self._client().get("/boom")

        assert response.status_code == 500
        assert response.json() == {"errors": [{"message": "Something went wrong"}]}

    def test_store_error_is_a_generic_500(self):
        response = self._client().get("/db")

        assert response.status_code == 500
        assert response.json() == {"errors": [{"message": "Something went wrong"}]}

    def test_unmatched_route(self):
        response = self._client().get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_unmatched_verb_is_not_found(self, client):
        response = client.patch("/movies")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_custom_error_message_defaults(self):
        error = CustomError()

        assert error.status_code == 500
        assert error.serialize_errors() == [{"message": "Something went wrong"}]


class TestDatabaseDependency:

    def test_requests_fail_with_503_without_database(self, settings):
        # No overrides and no lifespan: app.state.db stays unset
        client = TestClient(create_app(settings), raise_server_exceptions=False)

        response = client.get("/movies")

        assert response.status_code == 503
        assert response.json() == {"errors": [{"message": "Database service not available."}]}

    def test_static_endpoints_do_not_need_database(self, settings):
        client = TestClient(create_app(settings))

        assert client.get("/health-check").status_code == 200


class TestServerModule:

    def test_import_configures_logging_from_settings(self):
        with patch("logging.basicConfig") as basic_config:
            importlib.reload(server)

        assert basic_config.call_args.kwargs["level"] == "WARNING"

    def test_main_serves_the_module_level_app(self):
        with patch("uvicorn.run") as run, patch.object(server, "create_app") as factory:
            server.main()

        factory.assert_not_called()
        run.assert_called_once_with(
            server.app,
            host=server.app.state.settings.API_HOST,
            port=server.app.state.settings.PORT,
            log_level="warning",
        )
