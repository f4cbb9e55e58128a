"""
admin_ui.py — Admin Dashboard
------------------------------

Full-access view for administrators, in three tabs:

- Overview: report and user totals, reports by status, top animals,
  recent activity, and the offline queue with a sync button
- Reports: every report with delete
- Users: every account with delete

Figures come from `core.analytics.generate_analytics`, recomputed on every
rerun so deletions show up immediately.

Dependencies:
- Streamlit
- pandas (via core.analytics)
"""

import streamlit as st

from core.analytics import generate_analytics, reports_frame
from core.reports import (
    delete_report, delete_user, list_reports, list_users, pending_offline_count, sync_offline_queue,
)
from tools.geo_utils import format_coordinates
from tools.ui_tools import refresh_account, show_error, status_badge


def _header(flow):
    col_back, col_title, col_out = st.columns([1, 4, 1])
    if col_back.button("← Back"):
        flow.back_to_user_selection()
        st.rerun()
    with col_title:
        st.title("Admin Dashboard")
        st.caption("System overview and management")
    if col_out.button("Sign Out"):
        flow.sign_out()
        st.rerun()


def _overview(analytics):
    col1, col2 = st.columns(2)
    col1.metric("Total Reports", analytics.total_reports)
    col2.metric("Total Users", analytics.total_users)

    col_status, col_animals = st.columns(2)
    with col_status:
        st.subheader("Reports by Status")
        st.dataframe(
            analytics.status_frame()[["name", "value"]].rename(columns={"name": "Status", "value": "Reports"}),
            hide_index=True, use_container_width=True,
        )
    with col_animals:
        st.subheader("Top Animals")
        animals = analytics.animal_frame()
        if animals.empty:
            st.info("No reports yet.")
        else:
            st.dataframe(
                animals.rename(columns={"name": "Animal", "count": "Reports"}),
                hide_index=True, use_container_width=True,
            )

    st.subheader("Recent Activity")
    recent = reports_frame(analytics.recent_activity)
    if recent.empty:
        st.info("No recent reports.")
    else:
        st.dataframe(recent[["animal_type", "status", "created_at"]], hide_index=True, use_container_width=True)

    st.subheader("Offline Queue")
    waiting = pending_offline_count()
    st.write(f"{waiting} report{'s' if waiting != 1 else ''} waiting to be sent.")
    if waiting and st.button("Sync Offline Reports"):
        try:
            with st.spinner("Syncing..."):
                synced = sync_offline_queue()
        except Exception as e:  # noqa: BLE001
            show_error(e)
        else:
            st.success(f"Synced {synced} of {waiting} reports.")


def _reports_tab(flow, reports):
    if not reports:
        st.info("No reports.")
    for report in reports:
        with st.container(border=True):
            col_info, col_action = st.columns([5, 1])
            with col_info:
                st.markdown(f"**{report.animal_type}** · {status_badge(report.status)}")
                st.caption(
                    f"{report.created_at:%Y-%m-%d %H:%M} · "
                    f"{format_coordinates(report.latitude, report.longitude)}"
                )
                if report.feedback:
                    st.caption(f"Feedback: {report.feedback}")
            if col_action.button("🗑️ Delete", key=f"delete_report_{report.id}"):
                try:
                    delete_report(flow.profile, report.id)
                except Exception as e:  # noqa: BLE001
                    show_error(e)
                else:
                    st.rerun()


def _users_tab(flow, users):
    if not users:
        st.info("No users.")
    for user in users:
        with st.container(border=True):
            col_info, col_action = st.columns([5, 1])
            with col_info:
                st.markdown(f"**{user.email}**")
                st.caption(f"{user.user_type.capitalize()} · joined {user.created_at:%Y-%m-%d}")
            if col_action.button("🗑️ Delete", key=f"delete_user_{user.id}"):
                try:
                    delete_user(flow.profile, user.id)
                except Exception as e:  # noqa: BLE001
                    show_error(e)
                else:
                    st.rerun()


def render(flow):
    _header(flow)
    if refresh_account(flow) is None:
        return

    try:
        reports = list_reports()
        users = list_users(flow.profile)
    except Exception as e:  # noqa: BLE001
        show_error(e)
        return

    analytics = generate_analytics(reports, users)

    tab_overview, tab_reports, tab_users = st.tabs(["📈 Overview", "📄 Reports", "👥 Users"])
    with tab_overview:
        _overview(analytics)
    with tab_reports:
        _reports_tab(flow, reports)
    with tab_users:
        _users_tab(flow, users)
