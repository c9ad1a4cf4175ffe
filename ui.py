import html

import streamlit as st

from utils.avatar import generated_avatar

APP_NAME = "Meet.AI"


def setup_style():
    st.markdown("""
    <style>
        :root {
            --brand-from: #15803d;
            --brand-to: #14532d;
            --muted: rgba(15, 23, 42, 0.6);
            --destructive-bg: rgba(220, 38, 38, 0.10);
            --destructive: #dc2626;
        }

        .auth-brand {
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
            gap: 1rem;
            min-height: 320px;
            border-radius: 12px;
            background: radial-gradient(circle, var(--brand-from), var(--brand-to));
        }

        .auth-brand p {
            font-size: 1.5rem;
            font-weight: 600;
            color: #fff;
        }

        .auth-banner {
            display: flex;
            align-items: center;
            gap: 0.5rem;
            padding: 0.75rem 1rem;
            border-radius: 8px;
            background: var(--destructive-bg);
            color: var(--destructive);
            font-weight: 500;
        }

        .user-card {
            display: flex;
            align-items: center;
            gap: 0.75rem;
            overflow: hidden;
        }

        .user-card img {
            width: 36px;
            height: 36px;
            border-radius: 50%;
        }

        .user-card .user-name,
        .user-card .user-email {
            white-space: nowrap;
            overflow: hidden;
            text-overflow: ellipsis;
            margin: 0;
        }

        .user-card .user-email {
            font-size: 0.8rem;
            color: var(--muted);
        }

        .pending-box {
            height: 2.5rem;
            border-radius: 8px;
            background: linear-gradient(90deg, rgba(0,0,0,0.04), rgba(0,0,0,0.09), rgba(0,0,0,0.04));
            background-size: 200% 100%;
            animation: pendingShimmer 1.2s linear infinite;
        }

        @keyframes pendingShimmer {
            from { background-position: 200% 0; }
            to { background-position: -200% 0; }
        }
    </style>
    """, unsafe_allow_html=True)


def render_brand_panel():
    st.markdown(
        f"""
        <div class="auth-brand">
          <p>{APP_NAME}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_error_banner(message, key):
    """Single dismissible banner; returns True when the user dismissed it."""
    col_msg, col_close = st.columns([12, 1])
    col_msg.markdown(
        f'<div class="auth-banner">⛔ {html.escape(message)}</div>',
        unsafe_allow_html=True,
    )
    return col_close.button("✕", key=key, help="Dismiss")


def render_pending(message="Loading..."):
    """Neutral state while the session is still being determined."""
    st.markdown('<div class="pending-box"></div>', unsafe_allow_html=True)
    st.caption(message)


def avatar_src(identity):
    if identity.image:
        return identity.image
    avatar = identity.avatar or generated_avatar(identity.name, "initials")
    return avatar.uri


def render_user_card(identity):
    st.markdown(
        f"""
        <div class="user-card">
          <img src="{html.escape(avatar_src(identity))}" alt="Avatar" />
          <div>
            <p class="user-name">{html.escape(identity.name)}</p>
            <p class="user-email">{html.escape(identity.email)}</p>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )
