"""
Unit tests for the response envelope builders.
"""

import json
from datetime import datetime

from crud_service.handlers.utils.responses import build_error, build_success, create_api_response, utc_timestamp
from crud_service.models.user import User


class TestBuildSuccess:
    """Test cases for build_success."""

    def test_default_status(self):
        response = build_success({"message": "ok"})
        body = json.loads(response.body)

        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"] == {"message": "ok"}
        assert "error" not in body
        assert body["timestamp"].endswith("Z")

    def test_custom_status_and_headers(self):
        response = build_success({"id": "1"}, 201, headers={"Location": "/users/1"})

        assert response.status_code == 201
        assert response.headers["Location"] == "/users/1"
        assert response.headers["Content-Type"] == "application/json"

    def test_serializes_models(self):
        user = User.create(name="Ada", email="ada@example.com")
        body = json.loads(build_success(user).body)

        assert body["data"]["id"] == user.id
        assert body["data"]["createdAt"]


class TestBuildError:
    """Test cases for build_error."""

    def test_default_status(self):
        response = build_error("Invalid request body")
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body == {"success": False, "error": "Invalid request body", "timestamp": body["timestamp"]}

    def test_custom_status(self):
        response = build_error("User not found", 404)

        assert response.status_code == 404
        assert json.loads(response.body)["error"] == "User not found"


class TestCreateApiResponse:
    """Test cases for create_api_response."""

    def test_headers_and_json_body(self):
        response = create_api_response(200, {"a": 1})

        assert response.headers["Content-Type"] == "application/json"
        assert response.headers["X-Request-ID"]
        assert json.loads(response.body) == {"a": 1}

    def test_string_body_passes_through(self):
        response = create_api_response(200, "{}")

        assert response.body == "{}"

    def test_request_ids_are_unique(self):
        assert create_api_response(200, {}).headers["X-Request-ID"] != create_api_response(200, {}).headers["X-Request-ID"]


def test_utc_timestamp_format():
    timestamp = utc_timestamp()

    assert timestamp.endswith("Z")
    assert datetime.fromisoformat(timestamp.replace("Z", "+00:00")).utcoffset().total_seconds() == 0
