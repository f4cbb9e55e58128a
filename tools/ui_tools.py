"""
ui_tools.py — Shared Streamlit UI Utilities
---------------------------------------------

Provides reusable pieces for the app screens, including:

* English labels with their Swahili translation
* Status labels and colors shared by the ranger and admin dashboards
* One place to turn exceptions into on-screen errors

Dependencies:
- Streamlit

"""

import logging
import sys

import streamlit as st

from core.auth import get_profile
from core.exception import SentryJamiiError, custom_exception_hook

logger = logging.getLogger(__name__)

STATUS_BADGES = {
    "pending": ("🟡", "Pending"),
    "invalid": ("🔴", "Invalid"),
    "updated": ("🔵", "Updated"),
    "ranger_assigned": ("🟢", "Ranger Assigned"),
}


def bilingual(english: str, swahili: str) -> str:
    """Button/heading text with the Swahili translation in brackets."""
    return f"{english} ({swahili})"


def status_badge(status: str) -> str:
    icon, label = STATUS_BADGES.get(status, ("⚪", status.replace("_", " ")))
    return f"{icon} {label}"


def status_label(status: str) -> str:
    if status == "all":
        return "All"
    return STATUS_BADGES.get(status, (None, status.replace("_", " ")))[1]


def show_error(e: Exception) -> None:
    """
    Show an exception on screen.

    Expected errors are shown as-is; anything else is logged with its full
    traceback and shown by its first line.
    """
    if isinstance(e, SentryJamiiError):
        logger.info("%s: %s", type(e).__name__, e)
        st.error(str(e))
        return
    custom_exception_hook(type(e), e, e.__traceback__)
    st.error(f"{type(e).__name__}: {e}")


def install_exception_hook() -> None:
    """Route uncaught exceptions outside Streamlit's runner through the project hook."""
    sys.excepthook = custom_exception_hook


def refresh_account(flow):
    """
    Re-read the signed-in profile and show who is signed in.

    Returns the profile, or None when it could not be read. An account
    deleted since sign-in ends the session.
    """
    try:
        profile = get_profile(flow.profile.id, actor=flow.profile) if flow.profile else None
    except Exception as e:  # noqa: BLE001
        show_error(e)
        return None
    if profile is None:
        logger.info("Signed-in account is gone, signing out")
        flow.sign_out()
        st.rerun()
    flow.profile = profile
    st.caption(f"Signed in as {profile.email}")
    return profile
