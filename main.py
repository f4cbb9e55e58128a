"""
main.py — Streamlit Screen-Flow Controller
-------------------------------------------

This script initializes the Sentry Jamii wildlife reporting app and renders
the screen for the current state of the per-session flow controller.

Features:
✅ One `FlowController` per browser session in `st.session_state`
✅ Screens: splash, user selection, sign in, camera, report, dashboards, thank-you
✅ Logging configured once from LOG_LEVEL
✅ Tables created on first start
✅ Python 3.12 compatibility patch for event loops

Run with:
    streamlit run main.py

Dependencies:
- streamlit
"""

import asyncio
import logging

import streamlit as st

from app import (
    admin_ui, auth_ui, camera_ui, complete_ui, ranger_ui, report_ui, splash_ui, user_selection_ui,
)
from config.settings import ENVIRONMENT, LOG_LEVEL
from core.flow import AppState, FlowController
from db.db import init_db
from tools.ui_tools import install_exception_hook, show_error


# Patch for Python 3.12 compatibility with Streamlit
try:
    asyncio.get_running_loop()
except RuntimeError:
    asyncio.set_event_loop(asyncio.new_event_loop())

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
install_exception_hook()
logging.getLogger(__name__).debug("Starting Sentry Jamii (%s)", ENVIRONMENT)

# --- Configure the main Streamlit app window ---
st.set_page_config(
    page_title="Sentry Jamii — Wildlife Reporting",
    page_icon="🐾",
    layout="centered",
    initial_sidebar_state="collapsed"
)


@st.cache_resource
def _init_database():
    init_db()
    return True


SCREENS = {
    AppState.SPLASH: splash_ui.render,
    AppState.USER_SELECTION: user_selection_ui.render,
    AppState.AUTH: auth_ui.render,
    AppState.CAMERA: camera_ui.render,
    AppState.REPORT: report_ui.render,
    AppState.RANGER_DASHBOARD: ranger_ui.render,
    AppState.ADMIN_DASHBOARD: admin_ui.render,
    AppState.COMPLETE: complete_ui.render,
}

try:
    _init_database()
except Exception as e:
    show_error(e)
    st.stop()

if "flow" not in st.session_state:
    st.session_state.flow = FlowController()

flow = st.session_state.flow

# --- Run the screen for the current state ---
SCREENS.get(flow.current_state, user_selection_ui.render)(flow)
