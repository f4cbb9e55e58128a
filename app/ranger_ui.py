"""
ranger_ui.py — Ranger Dashboard
--------------------------------

Rangers review incoming wildlife reports:

- Filter reports by status (All, Pending, Invalid, Updated, Ranger Assigned)
- Open a report to see the photo, animal, date, location and feedback
- Mark Invalid / Mark Updated
- Assign Ranger, which asks for feedback before saving

Dependencies:
- Streamlit
- core.reports for queries and status updates
"""

import streamlit as st

from core.reports import STATUS_FILTERS, list_reports, update_report_status
from tools.geo_utils import format_coordinates
from tools.ui_tools import refresh_account, show_error, status_badge, status_label


def _header(flow):
    col_back, col_title, col_out = st.columns([1, 4, 1])
    if col_back.button("← Back"):
        flow.back_to_user_selection()
        st.rerun()
    with col_title:
        st.title("Ranger Dashboard")
        st.caption("Review and manage wildlife reports")
    if col_out.button("Sign Out"):
        flow.sign_out()
        st.rerun()


def _update(flow, report_id, status, feedback=None):
    try:
        update_report_status(flow.profile, report_id, status, feedback)
    except Exception as e:  # noqa: BLE001
        show_error(e)
        return
    st.session_state.selected_report_id = None
    st.session_state.show_feedback = False
    st.rerun()


def _report_detail(flow, report):
    st.subheader("Report Details")
    if report.image_url:
        st.image(report.image_url, use_container_width=True)
    st.markdown(f"### {report.animal_type}")
    st.write(f"Status: {status_badge(report.status)}")
    st.write(f"Date: {report.created_at:%Y-%m-%d %H:%M}")
    st.write(f"Location: {format_coordinates(report.latitude, report.longitude)}")
    if report.feedback:
        st.write("Feedback:")
        st.info(report.feedback)

    col1, col2, col3 = st.columns(3)
    if col1.button("❌ Mark Invalid", use_container_width=True):
        _update(flow, report.id, "invalid")
    if col2.button("✏️ Mark Updated", use_container_width=True):
        _update(flow, report.id, "updated")
    if col3.button("✅ Assign Ranger", use_container_width=True):
        st.session_state.show_feedback = True

    if st.session_state.get("show_feedback"):
        with st.form("feedback_form"):
            feedback = st.text_area("Add Feedback", placeholder="Enter your feedback for this report...")
            submit_col, cancel_col = st.columns(2)
            submitted = submit_col.form_submit_button("Submit", type="primary")
            cancelled = cancel_col.form_submit_button("Cancel")
        if cancelled:
            st.session_state.show_feedback = False
            st.rerun()
        if submitted:
            if not feedback.strip():
                st.warning("Please enter feedback before assigning a ranger.")
            else:
                _update(flow, report.id, "ranger_assigned", feedback)


def render(flow):
    _header(flow)
    if refresh_account(flow) is None:
        return

    status = st.radio("Reports", STATUS_FILTERS, format_func=status_label, horizontal=True, key="ranger_filter")
    try:
        reports = list_reports(status)
    except Exception as e:  # noqa: BLE001
        show_error(e)
        return

    col_list, col_detail = st.columns([1, 2])

    with col_list:
        if not reports:
            st.info("No reports for this filter.")
        for report in reports:
            label = f"{report.animal_type} · {status_badge(report.status)} · {report.created_at:%Y-%m-%d}"
            if st.button(label, key=f"report_{report.id}", use_container_width=True):
                st.session_state.selected_report_id = report.id
                st.session_state.show_feedback = False

    selected_id = st.session_state.get("selected_report_id")
    selected = next((r for r in reports if r.id == selected_id), None)
    with col_detail:
        if selected is None:
            st.info("Select a report to review.")
        else:
            with st.container(border=True):
                _report_detail(flow, selected)
