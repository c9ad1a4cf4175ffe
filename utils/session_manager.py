import asyncio
import json
import logging

import streamlit as st
import streamlit.components.v1 as components

import auth
from use_cases.identity_flow import IdentityPanel
from use_cases.session_store import SessionStore
from use_cases.sign_in_flow import ROOT_ROUTE, SIGN_IN_ROUTE, SIGN_UP_ROUTE, SignInOrchestrator

log = logging.getLogger(__name__)

"""
SESSION STATE CONTRACT

Everything below lives in st.session_state, i.e. once per browser session.

auth_store: SessionStore
    current session + pending flag
    default: SessionStore() (pending)
    owner: session_manager

auth_gateway: HttpAuthGateway
    auth service client, holds the session cookies
    default: auth.create_gateway() seeded with the browser cookies
    owner: session_manager

route: str
    "/", "/sign-in" or "/sign-up"
    default: ?page= query param, else "/"
    owner: session_manager.navigate

sign_in_orchestrator: SignInOrchestrator | None
    attempt state of the open sign-in / sign-up view
    default: None
    owner: views.login_view, views.signup_view

identity_panel: IdentityPanel | None
    user button state
    default: None
    owner: views.user_button_view, views.home_view

pending_toasts: list[tuple[str, str]]
    (level, message) shown on the next run
    default: []
    owner: session_manager

rerun_requested: bool
    a navigation happened during this run
    default: False
    owner: session_manager

checked_route: str | None
    route whose entry already ran the session check
    default: None
    owner: use_cases.auth_flow

external_redirect: str | None
    provider URL the browser must leave for
    default: None
    owner: session_manager / views.login_view
"""

ROUTE_PAGES = {
    ROOT_ROUTE: None,
    SIGN_IN_ROUTE: "sign-in",
    SIGN_UP_ROUTE: "sign-up",
}
PAGE_ROUTES = {page: route for route, page in ROUTE_PAGES.items() if page}


def _route_from_query():
    try:
        page = st.query_params.get("page")
    except Exception:
        # Bare-mode runs (tests) have no query params
        page = None
    return PAGE_ROUTES.get(page, ROOT_ROUTE)


def _browser_cookies():
    try:
        return dict(st.context.cookies)
    except Exception:
        # Bare-mode runs (tests) have no browser request
        return {}


def init_session_state():
    if "auth_store" not in st.session_state:
        st.session_state.auth_store = SessionStore()
    if "auth_gateway" not in st.session_state:
        gateway = auth.create_gateway()
        # A provider callback lands in a new session; the browser carries its cookie
        gateway.seed_cookies(_browser_cookies())
        st.session_state.auth_gateway = gateway
    if "route" not in st.session_state:
        st.session_state.route = _route_from_query()
    if "sign_in_orchestrator" not in st.session_state:
        st.session_state.sign_in_orchestrator = None
    if "identity_panel" not in st.session_state:
        st.session_state.identity_panel = None
    if "pending_toasts" not in st.session_state:
        st.session_state.pending_toasts = []
    if "rerun_requested" not in st.session_state:
        st.session_state.rerun_requested = False
    if "external_redirect" not in st.session_state:
        st.session_state.external_redirect = None
    if "checked_route" not in st.session_state:
        st.session_state.checked_route = None


def get_store() -> SessionStore:
    return st.session_state.auth_store


def get_gateway():
    return st.session_state.auth_gateway


def current_route():
    return st.session_state.route


def run_async(coro):
    """Drive one gateway interaction to completion from the script thread."""
    return asyncio.run(coro)


def notify(message):
    st.session_state.pending_toasts.append(("success", message))


def notify_error(message):
    st.session_state.pending_toasts.append(("error", message))


def navigate(target):
    if target.startswith("http://") or target.startswith("https://"):
        st.session_state.external_redirect = target
        return

    if target != st.session_state.route:
        close_sign_in_orchestrator()
    st.session_state.route = target
    page = ROUTE_PAGES.get(target)
    try:
        if page:
            st.query_params["page"] = page
        elif "page" in st.query_params:
            del st.query_params["page"]
    except Exception as e:
        # The URL mirror is cosmetic; session_state.route stays authoritative
        log.debug(f"Could not update query params: {e}")
    st.session_state.rerun_requested = True


def apply_navigation():
    """One rerun per navigation, issued after the gateway call has returned."""
    if st.session_state.rerun_requested:
        st.session_state.rerun_requested = False
        st.rerun()


def flush_notifications():
    toasts = st.session_state.pending_toasts
    st.session_state.pending_toasts = []
    for level, message in toasts:
        st.toast(message, icon="✅" if level == "success" else "⚠️")


def render_external_redirect():
    url = st.session_state.external_redirect
    if not url:
        return False
    st.session_state.external_redirect = None
    components.html(
        f"""
        <script>
          window.top.location.href = {json.dumps(url)};
        </script>
        """,
        height=0,
    )
    st.info("Redirecting to the provider…")
    return True


def get_sign_in_orchestrator() -> SignInOrchestrator:
    orchestrator = st.session_state.sign_in_orchestrator
    if orchestrator is None or orchestrator.disposed:
        orchestrator = SignInOrchestrator(get_gateway(), get_store(), notify=notify, navigate=navigate)
        st.session_state.sign_in_orchestrator = orchestrator
    return orchestrator


def close_sign_in_orchestrator():
    orchestrator = st.session_state.get("sign_in_orchestrator")
    if orchestrator is not None:
        orchestrator.dispose()
    st.session_state.sign_in_orchestrator = None


def get_identity_panel() -> IdentityPanel:
    panel = st.session_state.identity_panel
    if panel is None:
        panel = IdentityPanel(
            get_gateway(),
            get_store(),
            notify=notify,
            navigate=navigate,
            notify_error=notify_error,
        )
        st.session_state.identity_panel = panel
    return panel


def logout():
    """Shared by every sign-out entry point (user button, home view)."""
    if run_async(get_identity_panel().sign_out()):
        apply_navigation()
    else:
        flush_notifications()
