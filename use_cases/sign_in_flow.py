"""Sign-in orchestration: one authentication attempt at a time."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from use_cases.auth_gateway import (
    AuthFailure,
    AuthGateway,
    AuthRedirect,
    AuthSuccess,
    GENERIC_ERROR_MESSAGE,
    failure_message,
)
from use_cases.session_models import PROVIDERS, AuthMethod, CredentialInput, Provider, SignUpInput
from use_cases.session_store import SessionStore
from use_cases.validation import ValidationError, validate_credentials, validate_sign_up

log = logging.getLogger(__name__)

ROOT_ROUTE = "/"
SIGN_IN_ROUTE = "/sign-in"
SIGN_UP_ROUTE = "/sign-up"

SIGN_IN_SUCCESS_MESSAGE = "Signed in successfully"
SIGN_UP_SUCCESS_MESSAGE = "Account created successfully"

Notifier = Callable[[str], None]
Navigator = Callable[[str], None]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class InFlight:
    method: AuthMethod


AttemptState = Union[Idle, InFlight]
IDLE = Idle()


class SignInOrchestrator:
    """
    Owns the form-level attempt state for the sign-in and sign-up views.

    `navigate` receives an application route on success and an absolute URL
    when a provider flow leaves the application.
    """

    def __init__(
        self,
        gateway: AuthGateway,
        store: SessionStore,
        notify: Notifier,
        navigate: Navigator,
    ):
        self._gateway = gateway
        self._store = store
        self._notify = notify
        self._navigate = navigate
        self.attempt: AttemptState = IDLE
        self.error_message: Optional[str] = None
        self.field_errors: Dict[str, str] = {}
        self._disposed = False

    @property
    def busy(self) -> bool:
        return isinstance(self.attempt, InFlight)

    @property
    def active_method(self) -> Optional[AuthMethod]:
        return self.attempt.method if isinstance(self.attempt, InFlight) else None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Called when the hosting view goes away; later resolutions are ignored."""
        self._disposed = True

    def dismiss_error(self) -> None:
        self.error_message = None

    async def submit_credentials(self, inp: CredentialInput) -> None:
        if self.busy or self._disposed:
            return
        try:
            valid = validate_credentials(inp)
        except ValidationError as e:
            self.field_errors = e.field_errors
            return

        self._begin("email")
        log.info("Credential sign-in started")
        try:
            result = await self._gateway.sign_in_with_credentials(valid.email, valid.password)
        except Exception as e:
            log.error(f"Credential sign-in crashed: {e}", exc_info=True)
            result = AuthFailure(message=GENERIC_ERROR_MESSAGE)
        await self._resolve("email", result, SIGN_IN_SUCCESS_MESSAGE)

    async def submit_social(self, provider: Provider) -> None:
        if provider not in PROVIDERS:
            raise ValueError(f"Unknown provider: {provider}")
        if self.busy or self._disposed:
            return

        self._begin(provider)
        log.info(f"Social sign-in started: {provider}")
        try:
            result = await self._gateway.sign_in_with_provider(provider)
        except Exception as e:
            log.error(f"Social sign-in crashed ({provider}): {e}", exc_info=True)
            result = AuthFailure(message=GENERIC_ERROR_MESSAGE)
        await self._resolve(provider, result, SIGN_IN_SUCCESS_MESSAGE)

    async def submit_sign_up(self, inp: SignUpInput) -> None:
        if self.busy or self._disposed:
            return
        try:
            valid = validate_sign_up(inp)
        except ValidationError as e:
            self.field_errors = e.field_errors
            return

        self._begin("email")
        log.info("Sign-up started")
        try:
            result = await self._gateway.sign_up(valid.name, valid.email, valid.password)
        except Exception as e:
            log.error(f"Sign-up crashed: {e}", exc_info=True)
            result = AuthFailure(message=GENERIC_ERROR_MESSAGE)
        await self._resolve("email", result, SIGN_UP_SUCCESS_MESSAGE)

    def _begin(self, method: AuthMethod) -> None:
        self.field_errors = {}
        self.error_message = None
        self.attempt = InFlight(method)

    async def _resolve(self, method: AuthMethod, result, success_message: str) -> None:
        if self._disposed:
            log.debug(f"Discarding {method} sign-in result for a closed view")
            return

        if isinstance(result, AuthRedirect):
            # The browser leaves the app; the attempt stays in flight until it does.
            log.info(f"Redirecting to {method} provider")
            self._navigate(result.url)
            return

        if isinstance(result, AuthFailure):
            self.attempt = IDLE
            self.error_message = failure_message(result)
            log.info(f"Sign-in via {method} failed: {self.error_message}")
            return

        if isinstance(result, AuthSuccess) and result.session is not None:
            self._store.set_session(result.session)
        else:
            await self._store.refresh(self._gateway)
            if self._disposed:
                return
            if self._store.session is None:
                self.attempt = IDLE
                self.error_message = GENERIC_ERROR_MESSAGE
                log.warning(f"Sign-in via {method} succeeded but no session was established")
                return

        self.attempt = IDLE
        log.info(f"Sign-in via {method} succeeded")
        self._notify(success_message)
        self._navigate(ROOT_ROUTE)
