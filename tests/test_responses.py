"""Tests for the standardized response formatter."""

import json

import pytest

from user_api.config import Settings
from user_api.responses import (
    ApiResponse,
    create_error_response,
    create_success_response,
    default_headers,
)
from user_api.schemas.user_schemas import UserResponse

EXPECTED_HEADERS = {
    "content-type": "application/json",
    "access-control-allow-headers": "Content-Type,X-Amz-Date,Authorization,X-Amz-Security-Token",
    "access-control-allow-methods": "GET,POST,OPTIONS",
    "access-control-allow-credentials": "true",
    "x-content-type-options": "nosniff",
    "x-frame-options": "DENY",
    "x-xss-protection": "1; mode=block",
    "strict-transport-security": "max-age=31536000; includeSubDomains",
    "content-security-policy": "default-src 'self'",
    "referrer-policy": "strict-origin-when-cross-origin",
}


def _body(response) -> dict:
    return json.loads(response.body)


class TestErrorResponse:
    """Test cases for create_error_response."""

    @pytest.mark.parametrize(
        "status_code,name",
        [
            (400, "Bad Request"),
            (401, "Unauthorized"),
            (403, "Forbidden"),
            (404, "Not Found"),
            (409, "Conflict"),
            (500, "Internal Server Error"),
            (503, "Service Unavailable"),
        ],
    )
    def test_known_status_names(self, development_settings: Settings, status_code: int, name: str):
        """Test recognized status codes map to their standard names."""
        response = create_error_response(status_code, "msg", settings=development_settings)

        assert response.status_code == status_code
        assert _body(response)["error"] == name

    @pytest.mark.parametrize("status_code", [418, 422, 502, 599, 302])
    def test_unknown_status_code(self, development_settings: Settings, production_settings: Settings, status_code: int):
        """Test unrecognized status codes get the generic label."""
        for settings in (development_settings, production_settings):
            response = create_error_response(status_code, "teapot", settings=settings)

            assert response.status_code == status_code
            assert _body(response)["error"] == "Unknown Error"

    def test_development_keeps_message_and_details(self, development_settings: Settings):
        """Test nothing is redacted outside production."""
        response = create_error_response(
            500, "Database error: disk full", ["trace line"], settings=development_settings
        )

        assert _body(response) == {
            "error": "Internal Server Error",
            "message": "Database error: disk full",
            "details": ["trace line"],
        }

    @pytest.mark.parametrize("message", ["Database error: connection refused", "secret", None, ""])
    @pytest.mark.parametrize("status_code", [500, 503, 504])
    def test_production_replaces_server_error_message(
        self, production_settings: Settings, status_code: int, message
    ):
        """Test every 5xx message is generic in production."""
        response = create_error_response(status_code, message, settings=production_settings)

        assert _body(response)["message"] == "Internal server error"

    def test_production_keeps_client_error_message(self, production_settings: Settings):
        """Test 4xx messages stay descriptive in production."""
        response = create_error_response(404, "User with id u9 not found", settings=production_settings)

        assert _body(response) == {"error": "Not Found", "message": "User with id u9 not found"}

    @pytest.mark.parametrize("details", [["User ID cannot be empty"], {"userId": "u9"}])
    @pytest.mark.parametrize("status_code", [400, 404, 500])
    def test_production_drops_details(self, production_settings: Settings, status_code: int, details):
        """Test details never appear in production bodies."""
        response = create_error_response(status_code, "msg", details, settings=production_settings)

        assert "details" not in _body(response)

    def test_suppression_flag_drops_details_only(self):
        """Test the explicit flag drops details but leaves messages alone."""
        settings = Settings(environment="development", suppress_error_details=True)

        response = create_error_response(500, "Database error: boom", ["cause"], settings=settings)

        assert _body(response) == {"error": "Internal Server Error", "message": "Database error: boom"}

    def test_sparse_body(self, development_settings: Settings):
        """Test missing message and details are omitted rather than null."""
        for message, details in [(None, None), ("", []), (None, {})]:
            response = create_error_response(400, message, details, settings=development_settings)

            assert _body(response) == {"error": "Bad Request"}

    def test_details_mapping(self, development_settings: Settings):
        """Test string-keyed details pass through unchanged."""
        response = create_error_response(404, "missing", {"userId": "u1"}, settings=development_settings)

        assert _body(response)["details"] == {"userId": "u1"}


class TestSuccessResponse:
    """Test cases for create_success_response."""

    def test_data_fields_are_spread(self, development_settings: Settings):
        """Test data fields land at the top level with no wrapper."""
        response = create_success_response(200, {"id": "u1", "name": "Alice"}, settings=development_settings)

        assert response.body == b'{"id":"u1","name":"Alice"}'

    def test_message_is_added(self, development_settings: Settings):
        """Test a message sits next to the data fields."""
        response = create_success_response(
            201, {"id": "u1"}, "User created", settings=development_settings
        )

        assert _body(response) == {"id": "u1", "message": "User created"}

    def test_empty_body(self, development_settings: Settings):
        """Test no data and no message gives an empty object."""
        response = create_success_response(200, settings=development_settings)

        assert _body(response) == {}

    def test_model_data_uses_wire_names(self, development_settings: Settings, sample_user):
        """Test models are dumped by alias with ISO timestamps."""
        response = create_success_response(
            200, UserResponse.from_user(sample_user), settings=development_settings
        )

        body = _body(response)
        assert body["id"] == "u1"
        assert body["name"] == "Alice"
        assert body["createdAt"].startswith("2024-01-01T12:30:00")
        assert body["updatedAt"].startswith("2024-01-01T12:30:00")
        assert "created_at" not in body

    def test_no_content_has_empty_body(self, development_settings: Settings):
        """Test 204 responses carry headers but no body."""
        response = ApiResponse(development_settings).no_content()

        assert response.status_code == 204
        assert response.body == b""
        assert response.headers["content-security-policy"] == "default-src 'self'"


class TestHeaders:
    """Test cases for the fixed header set."""

    def test_every_response_has_fixed_headers(self, development_settings: Settings):
        """Test success and error responses share the same header set."""
        responses = [
            create_success_response(200, {"id": "u1"}, settings=development_settings),
            create_error_response(404, "missing", settings=development_settings),
            create_error_response(500, "boom", settings=development_settings),
            create_error_response(999, settings=development_settings),
        ]

        for response in responses:
            for name, value in EXPECTED_HEADERS.items():
                assert response.headers[name] == value
            assert len(response.headers.getlist("content-type")) == 1

    def test_origin_defaults_by_mode(self, development_settings: Settings, production_settings: Settings):
        """Test the CORS origin default depends on the environment."""
        assert default_headers(development_settings)["Access-Control-Allow-Origin"] == "http://localhost:3000"
        assert default_headers(production_settings)["Access-Control-Allow-Origin"] == "https://yourdomain.com"

    def test_origin_from_allow_list(self):
        """Test a configured origin wins over the defaults."""
        settings = Settings(environment="production", allowed_origins="https://app.example.com")

        response = create_error_response(400, "bad", settings=settings)

        assert response.headers["access-control-allow-origin"] == "https://app.example.com"


class TestApiResponse:
    """Test cases for the convenience constructors."""

    @pytest.mark.parametrize(
        "method,status_code",
        [
            ("bad_request", 400),
            ("unauthorized", 401),
            ("forbidden", 403),
            ("not_found", 404),
            ("conflict", 409),
            ("internal_server_error", 500),
            ("service_unavailable", 503),
        ],
    )
    def test_error_constructors_bind_status(self, development_settings: Settings, method: str, status_code: int):
        """Test each error constructor only binds its status code."""
        responses = ApiResponse(development_settings)

        response = getattr(responses, method)("message", ["detail"])
        expected = create_error_response(status_code, "message", ["detail"], settings=development_settings)

        assert response.status_code == status_code
        assert response.body == expected.body

    @pytest.mark.parametrize("method,status_code", [("ok", 200), ("created", 201)])
    def test_success_constructors_bind_status(self, development_settings: Settings, method: str, status_code: int):
        """Test each success constructor only binds its status code."""
        responses = ApiResponse(development_settings)

        response = getattr(responses, method)({"id": "u1"}, "done")

        assert response.status_code == status_code
        assert _body(response) == {"id": "u1", "message": "done"}

    def test_uses_global_settings_by_default(self):
        """Test constructors fall back to the process settings."""
        response = ApiResponse().internal_server_error("Database error: boom", ["cause"])

        # The test process runs in the testing environment
        assert _body(response) == {
            "error": "Internal Server Error",
            "message": "Database error: boom",
            "details": ["cause"],
        }
