import streamlit as st

from infrastructure.observability import set_user_context, setup_observability
setup_observability()

import ui
from use_cases import auth_flow, bootstrap
from use_cases.sign_in_flow import SIGN_IN_ROUTE, SIGN_UP_ROUTE
from utils import session_manager
from views import home_view, login_view, signup_view, user_button_view

# --- PAGE SETUP ---
st.set_page_config(page_title=ui.APP_NAME, layout="wide", initial_sidebar_state="expanded")

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write(bootstrap.health_status())
    st.stop()

ui.setup_style()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.error("Auth service is not configured. Set AUTH_BASE_URL in secrets or environment.")
    st.stop()

session_manager.flush_notifications()

# --- SESSION GATE ---
# Fetch once per view entry, then redirect / hold / continue
auth_result = auth_flow.ensure_authenticated_session()

if auth_result.status == "REDIRECT":
    session_manager.navigate(auth_result.target)
    session_manager.apply_navigation()
    st.stop()

if auth_result.status == "PENDING":
    ui.render_pending()
    st.stop()

set_user_context(auth_result.user_id)

route = session_manager.current_route()

if route == SIGN_IN_ROUTE:
    login_view.render_auth_screen()
elif route == SIGN_UP_ROUTE:
    signup_view.render_sign_up_screen()
else:
    # === DASHBOARD ===
    with st.sidebar:
        st.markdown(f"### {ui.APP_NAME}")
        st.divider()
        user_button_view.render_user_button()

    home_view.render_home()
