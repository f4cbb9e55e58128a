"""
flow.py — Screen Flow Controller
---------------------------------

Finite state machine behind the app's screens. It keeps which screen is
showing, which user type was picked on the selection screen, and the photo
captured for the report in progress.

    splash ─▶ user_selection ─┬─ anonymous ──────────────▶ camera ─▶ report ─▶ complete
                              └─ community/ranger/admin ─▶ auth
    auth ── signed in ─▶ camera (community) | ranger_dashboard | admin_dashboard
    complete ── reset ─▶ user_selection

Streamlit keeps one `FlowController` per browser session in
`st.session_state`; the controller itself has no Streamlit dependency.
"""

import logging
from enum import Enum
from typing import Optional

from core.exception import ValidationError

logger = logging.getLogger(__name__)


class AppState(str, Enum):
    SPLASH = "splash"
    USER_SELECTION = "user_selection"
    AUTH = "auth"
    CAMERA = "camera"
    REPORT = "report"
    RANGER_DASHBOARD = "ranger_dashboard"
    ADMIN_DASHBOARD = "admin_dashboard"
    COMPLETE = "complete"


SELECTABLE_USER_TYPES = ("community", "anonymous", "ranger", "admin")

HOME_BY_ROLE = {
    "community": AppState.CAMERA,
    "ranger": AppState.RANGER_DASHBOARD,
    "admin": AppState.ADMIN_DASHBOARD,
}


class FlowController:
    def __init__(self):
        self.state = AppState.SPLASH
        self.selected_user_type = ""
        self.captured_image = None
        self.profile = None

    def __repr__(self):
        return f"<FlowController {self.state.value} user_type={self.selected_user_type!r}>"

    @property
    def is_anonymous(self) -> bool:
        return self.selected_user_type == "anonymous"

    @property
    def current_state(self) -> AppState:
        """The screen to render; a report screen without a photo falls back to the camera."""
        if self.state == AppState.REPORT and self.captured_image is None:
            return AppState.CAMERA
        return self.state

    def _go(self, state: AppState) -> None:
        logger.debug("Flow %s → %s", self.state.value, state.value)
        self.state = state

    def _clear_selection(self) -> None:
        self.selected_user_type = ""
        self.captured_image = None

    # --- Events -----------------------------------------------------------

    def splash_complete(self) -> None:
        self._go(AppState.USER_SELECTION)

    def select_user_type(self, user_type: str) -> None:
        if user_type not in SELECTABLE_USER_TYPES:
            raise ValidationError(f"Unknown user type: {user_type}")
        self.selected_user_type = user_type
        self._go(AppState.CAMERA if user_type == "anonymous" else AppState.AUTH)

    def authenticated(self, profile) -> None:
        """Route a signed-in user to the home screen of their role."""
        self.profile = profile
        target = HOME_BY_ROLE.get(getattr(profile, "user_type", None))
        if target is None:
            logger.warning("Profile %s has no known role; staying on %s", getattr(profile, "id", None), self.state.value)
            return
        self._go(target)

    def sign_out(self) -> None:
        self.profile = None
        self.back_to_user_selection()

    def capture_image(self, image) -> None:
        self.captured_image = image
        self._go(AppState.REPORT)

    def back_to_camera(self) -> None:
        self.captured_image = None
        self._go(AppState.CAMERA)

    def back_to_user_selection(self) -> None:
        self._clear_selection()
        self._go(AppState.USER_SELECTION)

    def report_complete(self) -> None:
        self._go(AppState.COMPLETE)

    def reset(self) -> None:
        """Leave the thank-you screen once its timer has run out."""
        self._clear_selection()
        self._go(AppState.USER_SELECTION)

    def user_id_for_report(self) -> Optional[str]:
        if self.is_anonymous or self.profile is None:
            return None
        return self.profile.id
