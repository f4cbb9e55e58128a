"""
camera_ui.py — Capture Wildlife
--------------------------------

Take a photo with the device camera or pick one from the gallery.
A camera shot is previewed and confirmed; a gallery upload goes straight
to the report screen.
"""

import streamlit as st

from core.exception import SentryJamiiError
from tools.image_utils import CapturedImage, open_image
from tools.ui_tools import bilingual, show_error

CAMERA_FILENAME = "wildlife-photo.jpg"


def _capture(flow, uploaded, filename=None):
    try:
        image = CapturedImage.from_upload(uploaded)
        if filename:
            image.filename = filename
        open_image(image.content)
    except SentryJamiiError as e:
        show_error(e)
        return
    # New widget keys so a retake starts from empty inputs
    st.session_state.capture_round = st.session_state.get("capture_round", 0) + 1
    flow.capture_image(image)
    st.rerun()


def render(flow):
    if st.button(f"← {bilingual('Back', 'Rudi Nyuma')}"):
        flow.back_to_user_selection()
        st.rerun()

    st.title(bilingual("Capture Wildlife", "Piga Picha ya Wanyamapori"))
    st.write(bilingual("Take a photo of the wildlife you've spotted", "Piga picha ya mnyama uliyemuona"))

    capture_round = st.session_state.get("capture_round", 0)

    with st.container(border=True):
        shot = st.camera_input(bilingual("Open Camera", "Fungua Kamera"), key=f"camera_{capture_round}")
        if shot is not None:
            if st.button(f"✅ {bilingual('Confirm', 'Thibitisha')}", type="primary", use_container_width=True):
                _capture(flow, shot, filename=CAMERA_FILENAME)

        st.write(bilingual("or", "au"))

        uploaded = st.file_uploader(
            bilingual("Upload from Gallery", "Pakia Kutoka Kwenye Matunzio"),
            type=["jpg", "jpeg", "png", "webp"],
            key=f"gallery_{capture_round}",
        )
        if uploaded is not None:
            _capture(flow, uploaded)
