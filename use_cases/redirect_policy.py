"""Session-gated routing decisions."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional

from use_cases.session_store import SessionSnapshot
from use_cases.sign_in_flow import ROOT_ROUTE, SIGN_IN_ROUTE, SIGN_UP_ROUTE


class ViewKind(str, Enum):
    AUTH_ONLY = "auth_only"
    PROTECTED = "protected"
    PUBLIC = "public"


ROUTE_KINDS = {
    ROOT_ROUTE: ViewKind.PROTECTED,
    SIGN_IN_ROUTE: ViewKind.AUTH_ONLY,
    SIGN_UP_ROUTE: ViewKind.AUTH_ONLY,
}

DecisionKind = Literal["RENDER", "REDIRECT", "PENDING"]


@dataclass(frozen=True)
class RedirectDecision:
    kind: DecisionKind
    target: Optional[str] = None


RENDER = RedirectDecision("RENDER")
PENDING = RedirectDecision("PENDING")


def view_kind_for(route: str) -> ViewKind:
    return ROUTE_KINDS.get(route, ViewKind.PUBLIC)


def is_authenticated(snapshot: SessionSnapshot) -> Optional[bool]:
    """Tri-state signal for the page shell: None while undetermined."""
    if snapshot.pending:
        return None
    return snapshot.session is not None


def evaluate(view: ViewKind, snapshot: SessionSnapshot) -> RedirectDecision:
    """Pure decision; the same inputs always give the same answer."""
    if view == ViewKind.PUBLIC:
        return RENDER

    authenticated = is_authenticated(snapshot)
    if authenticated is None:
        return PENDING
    if view == ViewKind.AUTH_ONLY and authenticated:
        return RedirectDecision("REDIRECT", ROOT_ROUTE)
    if view == ViewKind.PROTECTED and not authenticated:
        return RedirectDecision("REDIRECT", SIGN_IN_ROUTE)
    return RENDER
