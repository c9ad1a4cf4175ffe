"""Authentication flow orchestration (application layer)."""

from dataclasses import dataclass
from typing import Literal, Optional

from use_cases import redirect_policy
from use_cases.session_store import SessionStore

AuthFlowStatus = Literal["CONTINUE", "REDIRECT", "PENDING"]


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for auth flow orchestration."""

    status: AuthFlowStatus
    reason: str
    target: Optional[str] = None
    user_id: Optional[str] = None


async def ensure_view_access(route: str, store: SessionStore, gateway) -> AuthFlowResult:
    """Fetch the freshest session and decide whether `route` may render."""
    view = redirect_policy.view_kind_for(route)
    if view == redirect_policy.ViewKind.PUBLIC:
        return AuthFlowResult(status="CONTINUE", reason="public")

    snapshot = await store.refresh(gateway)
    return decide(route, snapshot)


def decide(route: str, snapshot) -> AuthFlowResult:
    """Map a policy decision for `route` onto a control-flow status."""
    decision = redirect_policy.evaluate(redirect_policy.view_kind_for(route), snapshot)
    user_id = snapshot.session.user.id if snapshot.session is not None else None

    if decision.kind == "PENDING":
        return AuthFlowResult(status="PENDING", reason="session_indeterminate")
    if decision.kind == "REDIRECT":
        reason = "already_authenticated" if snapshot.session is not None else "auth_required"
        return AuthFlowResult(status="REDIRECT", reason=reason, target=decision.target, user_id=user_id)
    return AuthFlowResult(status="CONTINUE", reason="authorized", user_id=user_id)


def ensure_authenticated_session() -> AuthFlowResult:
    """Run the session gate for the current route; fetches once per view entry."""
    from utils import session_manager

    session_manager.init_session_state()
    route = session_manager.current_route()
    store = session_manager.get_store()

    if session_manager.st.session_state.checked_route != route or store.pending:
        result = session_manager.run_async(ensure_view_access(route, store, session_manager.get_gateway()))
        session_manager.st.session_state.checked_route = route
        return result
    return decide(route, store.read())
