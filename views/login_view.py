import streamlit as st

import ui
from use_cases.session_models import CredentialInput
from use_cases.sign_in_flow import SIGN_UP_ROUTE
from utils import session_manager

PROVIDER_LABELS = {"google": "Google", "github": "Github"}
PROVIDER_ICONS = {"google": ":material/language:", "github": ":material/code:"}


def render_field_error(orchestrator, field):
    message = orchestrator.field_errors.get(field)
    if message:
        st.caption(f":red[{message}]")


def render_error(orchestrator, key):
    if orchestrator.error_message:
        if ui.render_error_banner(orchestrator.error_message, key=key):
            orchestrator.dismiss_error()
            st.rerun()


def render_auth_screen():
    orchestrator = session_manager.get_sign_in_orchestrator()
    if session_manager.render_external_redirect():
        return

    busy = orchestrator.busy
    col_form, col_brand = st.columns([1, 1], gap="large")

    with col_form:
        st.markdown("## Welcome back")
        st.caption("Login to your account")

        with st.form("login_form", clear_on_submit=False):
            email = st.text_input("Email", placeholder="m@example.com", disabled=busy)
            render_field_error(orchestrator, "email")
            password = st.text_input("Password", type="password", placeholder="********", disabled=busy)
            render_field_error(orchestrator, "password")
            submitted = st.form_submit_button("Sign In", disabled=busy, use_container_width=True, type="primary")

        if submitted:
            with st.spinner("Signing in..."):
                session_manager.run_async(
                    orchestrator.submit_credentials(CredentialInput(email=email, password=password))
                )
            session_manager.apply_navigation()
            st.rerun()

        render_error(orchestrator, key="sign_in_error_dismiss")

        st.caption("Or continue with")
        col_google, col_github = st.columns(2)
        for provider, col in (("google", col_google), ("github", col_github)):
            label = PROVIDER_LABELS[provider]
            if orchestrator.active_method == provider:
                label = f"{label}…"
            if col.button(
                label,
                key=f"social_{provider}",
                icon=PROVIDER_ICONS[provider],
                disabled=busy,
                use_container_width=True,
            ):
                with st.spinner(f"Connecting to {PROVIDER_LABELS[provider]}..."):
                    session_manager.run_async(orchestrator.submit_social(provider))
                session_manager.apply_navigation()
                st.rerun()

        st.write("Don't have an account?")
        if st.button("Sign up", key="goto_sign_up", type="tertiary", disabled=busy):
            session_manager.navigate(SIGN_UP_ROUTE)
            session_manager.apply_navigation()

    with col_brand:
        ui.render_brand_panel()

    st.caption("By clicking continue, you agree to our Terms of Service and Privacy Policy.")
