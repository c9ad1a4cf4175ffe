"""Identity display and sign-out for the dashboard user button."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from use_cases.auth_gateway import AuthFailure, AuthGateway, failure_message
from use_cases.session_store import SessionStore
from use_cases.sign_in_flow import SIGN_IN_ROUTE
from utils.avatar import Avatar, generated_avatar

log = logging.getLogger(__name__)

SIGN_OUT_SUCCESS_MESSAGE = "Logout successful"


@dataclass(frozen=True)
class IdentityView:
    name: str
    email: str
    image: Optional[str]
    avatar: Optional[Avatar]


class IdentityPanel:
    def __init__(
        self,
        gateway: AuthGateway,
        store: SessionStore,
        notify: Callable[[str], None],
        navigate: Callable[[str], None],
        notify_error: Optional[Callable[[str], None]] = None,
    ):
        self._gateway = gateway
        self._store = store
        self._notify = notify
        self._navigate = navigate
        self._notify_error = notify_error
        self.signing_out = False
        self._disposed = False

    def dispose(self) -> None:
        self._disposed = True

    def view(self) -> Optional[IdentityView]:
        """None while the session is pending or absent; callers render nothing."""
        snapshot = self._store.read()
        if snapshot.pending or snapshot.session is None:
            return None

        user = snapshot.session.user
        avatar = None if user.image else generated_avatar(user.name, "initials")
        return IdentityView(name=user.name, email=user.email, image=user.image, avatar=avatar)

    async def sign_out(self) -> bool:
        """Clears the store only after the gateway confirms. Returns success."""
        if self.signing_out or self._disposed:
            return False

        self.signing_out = True
        try:
            result = await self._gateway.sign_out()
        except Exception as e:
            log.error(f"Sign-out crashed: {e}", exc_info=True)
            result = AuthFailure()
        finally:
            self.signing_out = False

        if self._disposed:
            return False

        if isinstance(result, AuthFailure):
            message = failure_message(result)
            log.warning(f"Sign-out failed: {message}")
            if self._notify_error is not None:
                self._notify_error(message)
            return False

        self._store.clear()
        log.info("Signed out")
        self._notify(SIGN_OUT_SUCCESS_MESSAGE)
        self._navigate(SIGN_IN_ROUTE)
        return True
