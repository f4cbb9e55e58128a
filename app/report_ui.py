"""
report_ui.py — Review & Submit a Wildlife Report
-------------------------------------------------

Runs for the photo captured on the camera screen:

1. Classify the photo (placeholder classifier) behind a spinner
2. Work out the sighting location (photo GPS, manual entry, or default)
3. Submit: stored online when the backend is reachable, queued offline otherwise
4. Offer the PDF receipt for download, then finish

Dependencies:
- Streamlit
- core.classifier, core.reports
"""

from datetime import datetime

import streamlit as st

from core.classifier import analyze_animal_image
from core.reports import backend_online, build_report, submit_report
from tools.geo_utils import reverse_geocode, resolve_location
from tools.ui_tools import bilingual, show_error


def _analysis_for(image):
    """Classify once per captured photo; reruns reuse the stored result."""
    cache_key = (image.filename, len(image.content), st.session_state.get("capture_round", 0))
    if st.session_state.get("analysis_key") != cache_key:
        with st.spinner(bilingual("Analyzing Image", "Inachambua Picha")):
            st.session_state.analysis = analyze_animal_image(image.filename)
        st.session_state.analysis_key = cache_key
        st.session_state.pop("submission", None)
    return st.session_state.analysis


def _location_for(image):
    use_manual = st.toggle("Enter coordinates manually", key="manual_location")
    manual = None
    if use_manual:
        detected = resolve_location(image)
        col1, col2 = st.columns(2)
        lat = col1.number_input("Latitude", -90.0, 90.0, value=detected.latitude, format="%.6f")
        lon = col2.number_input("Longitude", -180.0, 180.0, value=detected.longitude, format="%.6f")
        manual = (lat, lon)
    return resolve_location(image, manual=manual)


@st.cache_data(show_spinner=False, ttl=3600)
def _place_name(latitude, longitude):
    return reverse_geocode(latitude, longitude)


def _finish(flow):
    st.session_state.pop("submission", None)
    st.session_state.pop("analysis_key", None)
    flow.report_complete()
    st.rerun()


def render(flow):
    image = flow.captured_image

    if st.button(f"← {bilingual('Back', 'Rudi Nyuma')}"):
        st.session_state.pop("submission", None)
        flow.back_to_camera()
        st.rerun()

    st.title(bilingual("Wildlife Report", "Ripoti ya Wanyamapori"))
    st.write(bilingual("Review and submit your wildlife sighting", "Kagua na tuma taarifa ya mnyama uliyemuona"))

    analysis = _analysis_for(image)
    now = datetime.now()

    with st.container(border=True):
        col_img, col_info = st.columns(2)
        col_img.image(image.content, use_container_width=True)
        with col_info:
            st.markdown(f"**{bilingual('Animal Identified', 'Mnyama Aliyetambuliwa')}**")
            st.markdown(f"### {analysis.label}")
            st.write(f"📅 {now.strftime('%Y-%m-%d')} (Tarehe)")
            st.write(f"🕒 {now.strftime('%H:%M:%S')} (Saa)")
            location = _location_for(image)
            st.write(f"📍 {location} (Mahali)")
            place = _place_name(location.latitude, location.longitude)
            if place:
                st.caption(place)
            if location.source == "default":
                st.caption("No GPS found in the photo; using the default location.")

    submission = st.session_state.get("submission")
    if submission is None:
        if st.button(f"📤 {bilingual('Submit Report', 'Tuma Ripoti')}", type="primary", use_container_width=True):
            try:
                with st.spinner("Submitting..."):
                    report = build_report(analysis.label, location, flow.user_id_for_report())
                    submission = submit_report(report, image, online=backend_online())
            except Exception as e:  # noqa: BLE001
                show_error(e)
            else:
                st.session_state.submission = submission
                st.rerun()
        return

    with st.container(border=True):
        st.success(bilingual("Report Submitted Successfully!", "Ripoti Imetumwa Kwa Mafanikio!"))
        if submission.saved_offline:
            st.info(bilingual(
                "The server is offline, so the report was queued and will be sent once the connection is back.",
                "Ripoti yako imehifadhiwa ikiwa nje ya mtandao",
            ))
        st.write(f"Report ID: {submission.report.id} (Nambari ya Ripoti)")
        st.download_button(
            "⬇️ Download PDF (Pakua PDF)",
            data=submission.pdf_bytes,
            file_name=submission.pdf_filename,
            mime="application/pdf",
            on_click="ignore",
        )
        if st.button("Finish (Maliza)", type="primary"):
            _finish(flow)
