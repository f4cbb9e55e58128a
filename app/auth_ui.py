"""
auth_ui.py — Sign In / Sign Up
-------------------------------

Email and password form for community members, rangers and admins. The
selected user type becomes the role of new accounts; after signing in the
flow controller routes by the role stored on the profile.
"""

import streamlit as st

from core.auth import sign_in, sign_up, user_type_title
from core.exception import SentryJamiiError
from tools.ui_tools import show_error


def render(flow):
    if st.button("← Back to user selection"):
        flow.back_to_user_selection()
        st.rerun()

    is_login = st.session_state.setdefault("auth_is_login", True)
    title = user_type_title(flow.selected_user_type)
    st.title(f"{title} {'Login' if is_login else 'Sign Up'}")
    st.write("Welcome back!" if is_login else "Create your account to get started")

    with st.form("auth_form"):
        email = st.text_input("Email Address", placeholder="Enter your email")
        password = st.text_input("Password", type="password", placeholder="Enter your password")
        submitted = st.form_submit_button("Sign In" if is_login else "Create Account", use_container_width=True)

    if submitted:
        try:
            if is_login:
                profile = sign_in(email, password)
            else:
                profile = sign_up(email, password, flow.selected_user_type)
        except SentryJamiiError as e:
            show_error(e)
        else:
            st.session_state.auth_is_login = True
            flow.authenticated(profile)
            st.rerun()

    toggle_text = "Don't have an account? Sign up" if is_login else "Already have an account? Sign in"
    if st.button(toggle_text, type="tertiary"):
        st.session_state.auth_is_login = not is_login
        st.rerun()
