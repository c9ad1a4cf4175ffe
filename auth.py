import os
import logging

import streamlit as st
from streamlit.errors import StreamlitAPIException

from infrastructure.auth_gateway import HttpAuthGateway
from use_cases.auth_gateway import AuthGatewayError
from use_cases.validation import ValidationError

log = logging.getLogger(__name__)

__all__ = [
    "AuthGatewayError",
    "ValidationError",
    "create_gateway",
    "get_auth_base_url",
    "get_secret",
]

DEFAULT_CALLBACK_URL = "/"
DEFAULT_HTTP_TIMEOUT_SEC = 8.0


def get_secret(key):
    try:
        value = st.secrets.get(key)
    except (FileNotFoundError, StreamlitAPIException):
        value = None
    return value if value is not None else os.getenv(key)


def get_auth_base_url():
    return (get_secret("AUTH_BASE_URL") or "").strip()


def _get_timeout():
    raw = get_secret("AUTH_HTTP_TIMEOUT_SEC")
    if raw in (None, ""):
        return DEFAULT_HTTP_TIMEOUT_SEC
    try:
        return float(raw)
    except (TypeError, ValueError):
        log.warning(f"AUTH_HTTP_TIMEOUT_SEC={raw!r} is not a number, using {DEFAULT_HTTP_TIMEOUT_SEC}")
        return DEFAULT_HTTP_TIMEOUT_SEC


def create_gateway() -> HttpAuthGateway:
    """Gateway for the current browser session; holds that session's cookies."""
    return HttpAuthGateway(
        get_auth_base_url(),
        timeout_sec=_get_timeout(),
        callback_url=get_secret("AUTH_CALLBACK_URL") or DEFAULT_CALLBACK_URL,
    )
