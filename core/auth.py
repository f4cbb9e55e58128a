"""
auth.py — Email/Password Accounts
----------------------------------

Sign-up and sign-in for community members, rangers and admins.

* Emails are normalized (trimmed, lower-cased) and unique
* Passwords are hashed with passlib (pbkdf2_sha256)
* Sign-in failures never reveal whether the email exists

Dependencies:
- passlib
- SQLAlchemy session from `db.db`
"""

import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.exception import AuthError, StorageError, ValidationError
from core.permissions import require_self_or_admin
from db.db import SessionLocal
from db.user_model import UserProfile, USER_TYPES

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)

USER_TYPE_TITLES = {
    "community": "Community Member",
    "ranger": "Ranger",
    "admin": "Admin",
}


def user_type_title(user_type: str) -> str:
    return USER_TYPE_TITLES.get(user_type, user_type)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _validate_credentials(email: str, password: str) -> None:
    if not email or "@" not in email:
        raise ValidationError("Please enter a valid email address.")
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password should be at least {MIN_PASSWORD_LENGTH} characters.")


def sign_up(email: str, password: str, user_type: str) -> UserProfile:
    """
    Create an account and its profile.

    Raises:
        ValidationError: bad email, short password or unknown role
        AuthError: email already registered
    """
    email = normalize_email(email)
    _validate_credentials(email, password)
    if user_type not in USER_TYPES:
        raise ValidationError(f"Unknown user type: {user_type}")

    profile = UserProfile(
        email=email,
        password_hash=pwd_context.hash(password),
        user_type=user_type,
    )
    with SessionLocal() as session:
        session.add(profile)
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise AuthError("User already registered") from e
        session.refresh(profile)

    logger.info("Created %s account %s", user_type, profile.id)
    return profile


def sign_in(email: str, password: str) -> UserProfile:
    email = normalize_email(email)
    with SessionLocal() as session:
        profile = session.query(UserProfile).filter(UserProfile.email == email).first()

    if profile is None or not password or not pwd_context.verify(password, profile.password_hash):
        logger.info("Failed sign-in for %s", email)
        raise AuthError("Invalid login credentials")

    logger.info("Signed in %s (%s)", profile.id, profile.user_type)
    return profile


def get_profile(user_id: str, actor=None) -> Optional[UserProfile]:
    """Fetch a profile; only the owner or an admin may read it."""
    require_self_or_admin(actor, user_id)
    try:
        with SessionLocal() as session:
            return session.get(UserProfile, user_id)
    except SQLAlchemyError as e:
        raise StorageError(f"Could not load profile {user_id}: {e}") from e
