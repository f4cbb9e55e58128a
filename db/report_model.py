"""
report_model.py — Wildlife Report ORM Model
--------------------------------------------

Defines the SQLAlchemy ORM model for wildlife sighting reports.

Table:
- `reports`: one row per submitted sighting

Fields:
- animal_type: classifier label, e.g. "Zebra (95%)"
- image_url: public URL of the uploaded photo in Spaces
- latitude / longitude: decimal GPS coordinates
- status: pending → invalid | updated | ranger_assigned (set by rangers)
- feedback: ranger note, required when a ranger is assigned

Dependencies:
- SQLAlchemy ORM

"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Float, DateTime, ForeignKey, CheckConstraint, Index

from db.db import Base
from db.user_model import UserProfile  # noqa: F401  (registers user_profiles for the foreign key)

REPORT_STATUSES = ("pending", "invalid", "updated", "ranger_assigned")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Report(Base):
    __tablename__ = "reports"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'invalid', 'updated', 'ranger_assigned')", name="ck_reports_status"
        ),
        Index("ix_reports_created_at", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("user_profiles.id", ondelete="SET NULL"), nullable=True)

    animal_type = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False, default="")

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    status = Column(Text, nullable=False, default="pending")
    feedback = Column(Text)

    created_at = Column(DateTime, default=_now)
    updated_at = Column(DateTime, default=_now, onupdate=_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "animal_type": self.animal_type,
            "image_url": self.image_url,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "status": self.status,
            "feedback": self.feedback,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
