"""
Tests for shared-secret API key authentication
"""
import pytest

from app.core.auth import check_api_key
from app.core.config import Settings
from app.core.errors import UnauthorizedError

PROTECTED_PATHS = ["/encode", "/decode"]


class TestCheckApiKey:
    """Tests for the key comparison"""

    def test_matching_key_passes(self):
        assert check_api_key("secret", "secret") is None

    @pytest.mark.parametrize("supplied", [None, ""])
    def test_missing_key(self, supplied):
        with pytest.raises(UnauthorizedError) as exc_info:
            check_api_key(supplied, "secret")
        assert exc_info.value.message == "Please provide an API key"
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("supplied", ["wrong", "Secret", "secret ", "secretsecret"])
    def test_wrong_key(self, supplied):
        with pytest.raises(UnauthorizedError) as exc_info:
            check_api_key(supplied, "secret")
        assert exc_info.value.message == "Please provide a valid API key"

    @pytest.mark.parametrize("expected", [None, ""])
    def test_unset_secret_rejects_every_key(self, expected):
        with pytest.raises(UnauthorizedError) as exc_info:
            check_api_key("anything", expected)
        assert exc_info.value.message == "Please provide a valid API key"

    def test_non_ascii_keys_are_compared(self):
        assert check_api_key("clé", "clé") is None
        with pytest.raises(UnauthorizedError):
            check_api_key("cle", "clé")


@pytest.mark.parametrize("path", PROTECTED_PATHS)
def test_missing_header_is_unauthorized(client, path):
    """No header yields the missing-key message"""
    response = client.post(path, json={"input": "aGVsbG8="})

    assert response.status_code == 401
    assert response.json() == {"message": "Please provide an API key"}
    assert response.headers["WWW-Authenticate"] == "ApiKey"


@pytest.mark.parametrize("path", PROTECTED_PATHS)
def test_wrong_header_is_unauthorized(client, path):
    """A wrong key yields the invalid-key message"""
    response = client.post(path, json={"input": "aGVsbG8="}, headers={"x_api_key": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Please provide a valid API key"}


@pytest.mark.parametrize("path", PROTECTED_PATHS)
def test_auth_runs_before_input_validation(client, path):
    """An unauthenticated request never reaches input checks"""
    response = client.post(path, json={})

    assert response.status_code == 401


def test_hyphenated_header_is_not_accepted(client, auth_headers):
    """Only the exact x_api_key header name is read"""
    response = client.post(
        "/encode",
        json={"input": "hello"},
        headers={"x-api-key": auth_headers["x_api_key"]},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Please provide an API key"}


def test_header_name_is_case_insensitive(client, auth_headers):
    """HTTP header names are case-insensitive"""
    response = client.post(
        "/encode",
        json={"input": "hello"},
        headers={"X_API_KEY": auth_headers["x_api_key"]},
    )

    assert response.status_code == 200


class TestUnsetSecret:
    """Protected routes are locked when no secret is configured"""

    @pytest.fixture
    def settings(self):
        return Settings(x_api_key=None)

    @pytest.mark.parametrize("path", PROTECTED_PATHS)
    def test_any_key_is_rejected(self, client, path):
        response = client.post(path, json={"input": "aGVsbG8="}, headers={"x_api_key": "undefined"})

        assert response.status_code == 401
        assert response.json() == {"message": "Please provide a valid API key"}

    def test_root_still_public(self, client):
        assert client.get("/").status_code == 200
