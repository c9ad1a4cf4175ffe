from unittest.mock import patch

import pytest

import auth
from infrastructure.auth_gateway import HttpAuthGateway
from use_cases.auth_gateway import AuthFailure, AuthGatewayError
from use_cases.validation import ValidationError


@pytest.fixture
def no_secrets_file():
    with patch.object(auth.st, "secrets", {}):
        yield


def test_get_secret_falls_back_to_env(no_secrets_file, monkeypatch):
    monkeypatch.setenv("AUTH_BASE_URL", "http://auth.example.com")
    assert auth.get_secret("AUTH_BASE_URL") == "http://auth.example.com"


def test_get_secret_prefers_streamlit_secrets(monkeypatch):
    monkeypatch.setenv("AUTH_BASE_URL", "http://from-env")
    with patch.object(auth.st, "secrets", {"AUTH_BASE_URL": "http://from-secrets"}):
        assert auth.get_secret("AUTH_BASE_URL") == "http://from-secrets"


def test_get_secret_missing(no_secrets_file, monkeypatch):
    monkeypatch.delenv("AUTH_CALLBACK_URL", raising=False)
    assert auth.get_secret("AUTH_CALLBACK_URL") is None


def test_create_gateway_reads_settings(no_secrets_file, monkeypatch):
    monkeypatch.setenv("AUTH_BASE_URL", " http://auth.example.com/ ")
    monkeypatch.setenv("AUTH_HTTP_TIMEOUT_SEC", "3.5")
    monkeypatch.setenv("AUTH_CALLBACK_URL", "http://dash.example.com/")

    gateway = auth.create_gateway()

    assert isinstance(gateway, HttpAuthGateway)
    assert gateway.base_url == "http://auth.example.com"
    assert gateway.timeout == 3.5
    assert gateway.callback_url == "http://dash.example.com/"


def test_create_gateway_bad_timeout_uses_default(no_secrets_file, monkeypatch):
    monkeypatch.setenv("AUTH_BASE_URL", "http://auth.example.com")
    monkeypatch.setenv("AUTH_HTTP_TIMEOUT_SEC", "soon")
    monkeypatch.delenv("AUTH_CALLBACK_URL", raising=False)

    gateway = auth.create_gateway()

    assert gateway.timeout == auth.DEFAULT_HTTP_TIMEOUT_SEC
    assert gateway.callback_url == "/"


def test_errors_are_reexported():
    assert auth.AuthGatewayError is AuthGatewayError
    assert auth.ValidationError is ValidationError
    with pytest.raises(auth.AuthGatewayError) as excinfo:
        AuthFailure(message="Invalid email or password").raise_for_failure()
    assert excinfo.value.message == "Invalid email or password"
