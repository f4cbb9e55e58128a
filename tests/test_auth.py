# pylint: disable=missing-module-docstring,missing-function-docstring
import pytest

from core.auth import get_profile, sign_in, sign_up, user_type_title
from core.exception import AuthError, PermissionDenied, StorageError, ValidationError


def test_sign_up_then_sign_in():
    created = sign_up("  Ranger@Example.org ", "s3cret!", "ranger")
    assert created.email == "ranger@example.org"
    assert created.user_type == "ranger"
    assert created.password_hash != "s3cret!"

    signed_in = sign_in("ranger@example.org", "s3cret!")
    assert signed_in.id == created.id


def test_duplicate_email_rejected():
    sign_up("a@example.org", "password", "community")
    with pytest.raises(AuthError):
        sign_up("A@example.org", "password2", "community")


def test_wrong_password_and_unknown_email_share_message():
    sign_up("a@example.org", "password", "community")
    with pytest.raises(AuthError) as wrong:
        sign_in("a@example.org", "nope-nope")
    with pytest.raises(AuthError) as unknown:
        sign_in("b@example.org", "password")
    assert str(wrong.value) == str(unknown.value)


@pytest.mark.parametrize("email,password,user_type", [
    ("not-an-email", "password", "community"),
    ("a@example.org", "123", "community"),
    ("a@example.org", "password", "anonymous"),
])
def test_sign_up_validation(email, password, user_type):
    with pytest.raises(ValidationError):
        sign_up(email, password, user_type)


def test_get_profile_owner_or_admin_only(admin, community):
    created = sign_up("c@example.org", "password", "community")
    owner = type("Actor", (), {"id": created.id, "user_type": "community"})()

    assert get_profile(created.id, actor=owner).email == "c@example.org"
    assert get_profile(created.id, actor=admin).email == "c@example.org"
    with pytest.raises(PermissionDenied):
        get_profile(created.id, actor=community)
    with pytest.raises(PermissionDenied):
        get_profile(created.id, actor=None)


def test_user_type_title():
    assert user_type_title("community") == "Community Member"
    assert user_type_title("other") == "other"


def test_get_profile_database_error(admin, monkeypatch):
    from sqlalchemy.exc import OperationalError

    from core import auth

    def db_down():
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(auth, "SessionLocal", db_down)
    with pytest.raises(StorageError):
        get_profile("someone", actor=admin)
