"""Reactive holder of the current session for one browser session."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from use_cases.session_models import Session

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of the store. `pending` means not yet determined."""

    session: Optional[Session] = None
    pending: bool = True

    @property
    def authenticated(self) -> bool:
        return self.session is not None


Listener = Callable[[SessionSnapshot], None]


class SessionStore:
    """
    Single source of truth for the authenticated principal.

    Every update swaps the whole snapshot before listeners run, so readers
    never see a session paired with a stale `pending` flag.
    """

    def __init__(self, snapshot: Optional[SessionSnapshot] = None):
        self._snapshot = snapshot or SessionSnapshot()
        self._listeners: List[Listener] = []

    def read(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def session(self) -> Optional[Session]:
        return self._snapshot.session

    @property
    def pending(self) -> bool:
        return self._snapshot.pending

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a listener; returns the unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin_fetch(self) -> None:
        self._replace(SessionSnapshot(session=self._snapshot.session, pending=True))

    def set_session(self, session: Session) -> None:
        self._replace(SessionSnapshot(session=session, pending=False))

    def clear(self) -> None:
        self._replace(SessionSnapshot(session=None, pending=False))

    async def refresh(self, gateway) -> SessionSnapshot:
        """Point-in-time fetch. Any failure counts as no session."""
        self.begin_fetch()
        try:
            session = await gateway.fetch_session()
        except Exception as e:
            log.warning(f"Session fetch failed, treating as signed out: {e}")
            session = None
        if session is None:
            self.clear()
        else:
            self.set_session(session)
        return self._snapshot

    def _replace(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                # A broken subscriber must not block the others
                log.error(f"Session listener failed: {e}", exc_info=True)
