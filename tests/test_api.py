"""Tests for the HTTP surface."""

import json

import pytest
from fastapi.testclient import TestClient

from fhir_x_props import __version__
from fhir_x_props.api.config import APIConfig
from fhir_x_props.api.main import create_app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(create_app(APIConfig()))


class TestConfig:
    def test_defaults(self):
        config = APIConfig()

        assert config.port == 8000
        assert config.json_indent == 2

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FHIR_X_PROPS_PORT", "9001")
        monkeypatch.setenv("FHIR_X_PROPS_DEBUG", "yes")
        monkeypatch.setenv("FHIR_X_PROPS_LOG_LEVEL", "debug")
        monkeypatch.setenv("FHIR_X_PROPS_JSON_INDENT", "4")

        config = APIConfig.from_env()

        assert config.port == 9001
        assert config.debug is True
        assert config.log_level == "DEBUG"
        assert config.json_indent == 4


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestBuildPatientEndpoint:
    def test_returns_fhir_json(self, client):
        response = client.post(
            "/fhir", json={"name.given": "Jane", "name.family": "Doe"}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/fhir+json")
        data = json.loads(response.text)
        assert data["resourceType"] == "Patient"
        assert data["name"][0]["text"] == "Jane Doe"

    def test_empty_object_is_ok(self, client):
        response = client.post("/fhir", json={})

        assert response.status_code == 200
        assert json.loads(response.text)["name"][0]["text"] == " "

    def test_bad_values_degrade_without_error(self, client):
        response = client.post(
            "/fhir",
            json={"active": "sometimes", "maritalStatus": "ZZ", "race": "Martian"},
        )

        assert response.status_code == 200
        data = json.loads(response.text)
        assert data["active"] is False
        assert "maritalStatus" not in data
        assert "extension" not in data

    def test_blank_values_degrade_without_error(self, client):
        response = client.post(
            "/fhir",
            json={"name.family": "\u00a0", "address.city": "Springfield"},
        )

        assert response.status_code == 200
        data = json.loads(response.text)
        assert data["address"][0]["city"] == "Springfield"
        assert "family" not in data["name"][0]

    def test_response_is_pretty_printed(self, client):
        response = client.post("/fhir", json={"identifier": "A1"})

        assert "\n" in response.text

    def test_non_object_body_is_rejected(self, client):
        response = client.post("/fhir", json=["identifier", "A1"])

        assert response.status_code == 422

    def test_non_string_values_are_rejected(self, client):
        response = client.post("/fhir", json={"active": True})

        assert response.status_code == 422
