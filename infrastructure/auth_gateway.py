import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from use_cases.auth_gateway import AuthFailure, AuthRedirect, AuthSuccess, GENERIC_ERROR_MESSAGE
from use_cases.session_models import PROVIDERS, Session, session_from_payload

log = logging.getLogger(__name__)


class HttpAuthGateway:
    """
    Async client for the auth service REST API (`/api/auth/*`).

    Session cookies returned by the service are kept in `self.cookies` and
    sent back on every call. A fresh AsyncClient is opened per call because
    Streamlit drives each interaction on its own event loop.
    """

    def __init__(
        self,
        base_url: str,
        timeout_sec: float = 8.0,
        callback_url: str = "/",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout_sec
        self.callback_url = callback_url
        self.cookies = httpx.Cookies()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            cookies=self.cookies,
            headers={"Origin": self.base_url},
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        async with self._client() as client:
            r = await client.request(method, f"/api/auth{path}", json=json)
            # Keep whatever the service set or expired
            self.cookies = httpx.Cookies(client.cookies)
            return r

    def seed_cookies(self, cookies: Mapping[str, str]) -> None:
        """Adopt cookies the browser already holds for the auth service (same-site deployment)."""
        host = httpx.URL(self.base_url).host if self.base_url else ""
        for name, value in cookies.items():
            self.cookies.set(name, value, domain=host)

    async def fetch_session(self) -> Optional[Session]:
        if not self.base_url:
            return None
        try:
            r = await self._request("GET", "/get-session")
            r.raise_for_status()
            return session_from_payload(r.json())
        except (httpx.HTTPError, ValueError) as e:
            log.warning(f"get-session failed: {e}")
            return None

    async def sign_in_with_credentials(self, email: str, password: str):
        return await self._sign_in("/sign-in/email", {"email": email, "password": password})

    async def sign_up(self, name: str, email: str, password: str):
        return await self._sign_in("/sign-up/email", {"name": name, "email": email, "password": password})

    async def sign_in_with_provider(self, provider: str):
        if provider not in PROVIDERS:
            return AuthFailure(message=f"Unsupported provider: {provider}")
        try:
            r = await self._request(
                "POST", "/sign-in/social", json={"provider": provider, "callbackURL": self.callback_url}
            )
        except httpx.HTTPError as e:
            return _network_failure(e)
        if r.status_code >= 400:
            return _failure_from_response(r)

        data = _json_or_empty(r)
        if data.get("url") and data.get("redirect", True):
            return AuthRedirect(url=str(data["url"]))
        return AuthSuccess(session=session_from_payload(data))

    async def sign_out(self):
        try:
            r = await self._request("POST", "/sign-out", json={})
        except httpx.HTTPError as e:
            return _network_failure(e)
        if r.status_code >= 400:
            return _failure_from_response(r)
        self.cookies = httpx.Cookies()
        return AuthSuccess()

    async def _sign_in(self, path: str, payload: Dict[str, Any]):
        if not self.base_url:
            return AuthFailure(message="Auth service is not configured")
        try:
            r = await self._request("POST", path, json=payload)
        except httpx.HTTPError as e:
            return _network_failure(e)
        if r.status_code >= 400:
            return _failure_from_response(r)
        return AuthSuccess(session=session_from_payload(_json_or_empty(r)))


def _json_or_empty(r: httpx.Response) -> Dict[str, Any]:
    try:
        data = r.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _failure_from_response(r: httpx.Response) -> AuthFailure:
    data = _json_or_empty(r)
    message = data.get("message") or GENERIC_ERROR_MESSAGE
    log.info(f"Auth service answered {r.status_code}: {data.get('code') or 'no code'}")
    return AuthFailure(message=str(message), code=data.get("code"), status=r.status_code)


def _network_failure(e: Exception) -> AuthFailure:
    log.warning(f"Auth service unreachable: {e}")
    return AuthFailure(message=GENERIC_ERROR_MESSAGE)
