import streamlit as st

import ui
from utils import session_manager


def render_home():
    identity = session_manager.get_identity_panel().view()
    if identity is None:
        ui.render_pending()
        return

    st.title(f"Logged in as {identity.name}")
    if st.button("Logout", key="home_logout_btn", type="secondary"):
        session_manager.logout()
