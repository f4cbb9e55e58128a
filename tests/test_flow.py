# pylint: disable=missing-module-docstring,missing-function-docstring
from types import SimpleNamespace

import pytest

from core.exception import ValidationError
from core.flow import AppState, FlowController


@pytest.fixture
def flow():
    return FlowController()


def test_starts_on_splash_then_user_selection(flow):
    assert flow.current_state == AppState.SPLASH
    flow.splash_complete()
    assert flow.current_state == AppState.USER_SELECTION


def test_anonymous_goes_straight_to_camera(flow):
    flow.select_user_type("anonymous")
    assert flow.current_state == AppState.CAMERA
    assert flow.is_anonymous


@pytest.mark.parametrize("user_type", ["community", "ranger", "admin"])
def test_account_types_go_to_auth(flow, user_type):
    flow.select_user_type(user_type)
    assert flow.current_state == AppState.AUTH
    assert flow.selected_user_type == user_type
    assert not flow.is_anonymous


def test_unknown_user_type_rejected(flow):
    with pytest.raises(ValidationError):
        flow.select_user_type("poacher")
    assert flow.current_state == AppState.SPLASH


@pytest.mark.parametrize("role,expected", [
    ("community", AppState.CAMERA),
    ("ranger", AppState.RANGER_DASHBOARD),
    ("admin", AppState.ADMIN_DASHBOARD),
])
def test_authenticated_routes_by_profile_role(flow, role, expected):
    flow.select_user_type("community")
    flow.authenticated(SimpleNamespace(id="u1", user_type=role))
    assert flow.current_state == expected


def test_authenticated_with_unknown_role_stays_put(flow):
    flow.select_user_type("ranger")
    flow.authenticated(SimpleNamespace(id="u1", user_type="visitor"))
    assert flow.current_state == AppState.AUTH


def test_capture_then_back_to_camera_clears_image(flow):
    flow.select_user_type("anonymous")
    flow.capture_image("photo")
    assert flow.current_state == AppState.REPORT
    assert flow.captured_image == "photo"

    flow.back_to_camera()
    assert flow.current_state == AppState.CAMERA
    assert flow.captured_image is None


def test_report_without_image_falls_back_to_camera(flow):
    flow.state = AppState.REPORT
    assert flow.current_state == AppState.CAMERA


def test_complete_then_reset_clears_selection(flow):
    flow.select_user_type("anonymous")
    flow.capture_image("photo")
    flow.report_complete()
    assert flow.current_state == AppState.COMPLETE

    flow.reset()
    assert flow.current_state == AppState.USER_SELECTION
    assert flow.selected_user_type == ""
    assert flow.captured_image is None


def test_back_to_user_selection_clears_selection(flow):
    flow.select_user_type("anonymous")
    flow.capture_image("photo")
    flow.back_to_user_selection()
    assert flow.current_state == AppState.USER_SELECTION
    assert flow.selected_user_type == ""
    assert flow.captured_image is None


def test_sign_out_forgets_profile(flow):
    flow.select_user_type("ranger")
    flow.authenticated(SimpleNamespace(id="r1", user_type="ranger"))
    flow.sign_out()
    assert flow.profile is None
    assert flow.current_state == AppState.USER_SELECTION


def test_report_user_id_is_none_for_anonymous(flow):
    flow.profile = SimpleNamespace(id="c1", user_type="community")
    flow.select_user_type("anonymous")
    assert flow.user_id_for_report() is None


def test_report_user_id_for_community_member(flow):
    flow.select_user_type("community")
    flow.authenticated(SimpleNamespace(id="c1", user_type="community"))
    assert flow.user_id_for_report() == "c1"
