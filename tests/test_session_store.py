import asyncio
from unittest.mock import AsyncMock, MagicMock

from use_cases.session_models import Session, User
from use_cases.session_store import SessionSnapshot, SessionStore

SESSION = Session(user=User(id="u1", name="Ada", email="ada@example.com"))


def test_new_store_is_pending_without_session() -> None:
    store = SessionStore()
    snapshot = store.read()
    assert snapshot.pending is True
    assert snapshot.session is None
    assert snapshot.authenticated is False


def test_set_and_clear_session() -> None:
    store = SessionStore()
    store.set_session(SESSION)
    assert store.read() == SessionSnapshot(session=SESSION, pending=False)

    store.clear()
    assert store.read() == SessionSnapshot(session=None, pending=False)


def test_listeners_see_complete_snapshot() -> None:
    store = SessionStore()
    seen = []
    store.subscribe(lambda snap: seen.append((snap, store.read())))

    store.set_session(SESSION)

    snap, read_inside = seen[0]
    assert snap.session == SESSION and snap.pending is False
    # No torn read: the store already holds the same snapshot when listeners run
    assert read_inside is snap


def test_unsubscribe_stops_notifications() -> None:
    store = SessionStore()
    listener = MagicMock()
    unsubscribe = store.subscribe(listener)
    unsubscribe()
    store.clear()
    listener.assert_not_called()


def test_broken_listener_does_not_block_others() -> None:
    store = SessionStore()
    store.subscribe(MagicMock(side_effect=RuntimeError("boom")))
    healthy = MagicMock()
    store.subscribe(healthy)

    store.set_session(SESSION)

    healthy.assert_called_once()
    assert store.session == SESSION


def test_refresh_stores_fetched_session() -> None:
    store = SessionStore()
    gateway = MagicMock()
    gateway.fetch_session = AsyncMock(return_value=SESSION)

    snapshot = asyncio.run(store.refresh(gateway))

    assert snapshot.session == SESSION
    assert snapshot.pending is False


def test_refresh_fails_closed() -> None:
    store = SessionStore()
    store.set_session(SESSION)
    gateway = MagicMock()
    gateway.fetch_session = AsyncMock(side_effect=ConnectionError("down"))

    snapshot = asyncio.run(store.refresh(gateway))

    assert snapshot.session is None
    assert snapshot.pending is False


def test_refresh_marks_pending_while_in_flight() -> None:
    store = SessionStore()
    store.clear()
    observed = []

    async def fetch():
        observed.append(store.pending)
        return None

    gateway = MagicMock()
    gateway.fetch_session = fetch

    asyncio.run(store.refresh(gateway))

    assert observed == [True]
    assert store.pending is False
