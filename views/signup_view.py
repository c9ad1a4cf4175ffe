import streamlit as st

import ui
from use_cases.session_models import SignUpInput
from use_cases.sign_in_flow import SIGN_IN_ROUTE
from utils import session_manager
from views.login_view import PROVIDER_ICONS, PROVIDER_LABELS, render_error, render_field_error


def render_sign_up_screen():
    orchestrator = session_manager.get_sign_in_orchestrator()
    if session_manager.render_external_redirect():
        return

    busy = orchestrator.busy
    col_form, col_brand = st.columns([1, 1], gap="large")

    with col_form:
        st.markdown("## Let's get started")
        st.caption("Create your account")

        with st.form("register_form", clear_on_submit=False):
            name = st.text_input("Name", placeholder="John Doe", disabled=busy)
            render_field_error(orchestrator, "name")
            email = st.text_input("Email", placeholder="m@example.com", disabled=busy)
            render_field_error(orchestrator, "email")
            password = st.text_input("Password", type="password", placeholder="********", disabled=busy)
            render_field_error(orchestrator, "password")
            confirm = st.text_input("Confirm Password", type="password", placeholder="********", disabled=busy)
            render_field_error(orchestrator, "confirm_password")
            submitted = st.form_submit_button("Sign Up", disabled=busy, use_container_width=True, type="primary")

        if submitted:
            with st.spinner("Creating account..."):
                session_manager.run_async(
                    orchestrator.submit_sign_up(
                        SignUpInput(name=name, email=email, password=password, confirm_password=confirm)
                    )
                )
            session_manager.apply_navigation()
            st.rerun()

        render_error(orchestrator, key="sign_up_error_dismiss")

        st.caption("Or continue with")
        col_google, col_github = st.columns(2)
        for provider, col in (("google", col_google), ("github", col_github)):
            if col.button(
                PROVIDER_LABELS[provider],
                key=f"sign_up_social_{provider}",
                icon=PROVIDER_ICONS[provider],
                disabled=busy,
                use_container_width=True,
            ):
                session_manager.run_async(orchestrator.submit_social(provider))
                session_manager.apply_navigation()
                st.rerun()

        st.write("Already have an account?")
        if st.button("Sign in", key="goto_sign_in", type="tertiary", disabled=busy):
            session_manager.navigate(SIGN_IN_ROUTE)
            session_manager.apply_navigation()

    with col_brand:
        ui.render_brand_panel()
