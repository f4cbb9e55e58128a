"""
user_model.py — User Profile ORM Model
---------------------------------------

Defines the SQLAlchemy ORM model for registered users of the reporting app.

Table:
- `user_profiles`: one row per signed-up account with its role

Roles:
- community: reports sightings under their own account
- ranger: reviews reports and records feedback
- admin: full access, analytics, and deletions

Anonymous reporters never get a row here; their reports carry no user_id.

Dependencies:
- SQLAlchemy ORM

"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, CheckConstraint

from db.db import Base

USER_TYPES = ("community", "ranger", "admin")


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class UserProfile(Base):
    __tablename__ = "user_profiles"
    __table_args__ = (
        CheckConstraint(
            "user_type IN ('community', 'ranger', 'admin')", name="ck_user_profiles_user_type"
        ),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    user_type = Column(Text, nullable=False)
    created_at = Column(DateTime, default=_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "user_type": self.user_type,
            "created_at": self.created_at,
        }

    def __repr__(self):
        return f"<UserProfile {self.email} ({self.user_type})>"
