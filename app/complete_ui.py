"""
complete_ui.py — Thank-You Screen
----------------------------------

Shown after a report is finished; returns to user selection after
COMPLETE_RESET_SECONDS.
"""

import time

import streamlit as st

from config.settings import COMPLETE_RESET_SECONDS


def render(flow):
    st.markdown(
        "<div style='text-align: center; padding-top: 25vh;'>"
        "<h1>✅</h1>"
        "<h2>Thank You! (Asante!)</h2>"
        "<p>Your contribution helps protect wildlife.</p>"
        "</div>",
        unsafe_allow_html=True,
    )
    time.sleep(COMPLETE_RESET_SECONDS)
    flow.reset()
    st.rerun()
