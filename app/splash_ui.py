"""
splash_ui.py — Opening Screen
------------------------------

Shows the app name for SPLASH_SECONDS, then moves on to user type selection.
"""

import time

import streamlit as st

from config.settings import SPLASH_SECONDS


def render(flow):
    st.markdown(
        "<div style='text-align: center; padding-top: 25vh;'>"
        "<h1>🐾 Sentry Jamii</h1>"
        "<p>Community wildlife reporting (Kuripoti wanyamapori kwa jamii)</p>"
        "</div>",
        unsafe_allow_html=True,
    )
    with st.spinner(""):
        time.sleep(SPLASH_SECONDS)
    flow.splash_complete()
    st.rerun()
