import streamlit as st

import ui
from utils import session_manager


def render_user_button():
    """Sidebar identity card with the account menu. Renders nothing without a session."""
    panel = session_manager.get_identity_panel()
    identity = panel.view()
    if identity is None:
        return

    ui.render_user_card(identity)
    with st.popover(identity.name, use_container_width=True):
        st.markdown(f"**{identity.name}**")
        st.caption(identity.email)
        st.divider()
        st.button("Billing", key="billing_btn", icon=":material/credit_card:", disabled=True, use_container_width=True)
        if st.button(
            "Logout",
            key="user_button_logout_btn",
            icon=":material/logout:",
            disabled=panel.signing_out,
            use_container_width=True,
        ):
            session_manager.logout()
