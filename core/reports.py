"""
reports.py — Wildlife Report Lifecycle
---------------------------------------

Creates, stores, reviews and removes wildlife sighting reports.

Submission:
1. Build the report record (fresh id, status "pending", timestamps)
2. Online: upload the photo to Spaces, store its public URL, insert the row
3. Offline: append the report and its photo to the local queue instead
4. Render the PDF receipt in both cases

Review (rangers and admins):
- Mark Invalid / Mark Updated
- Assign Ranger, which requires written feedback

Administration (admins):
- Delete reports and user accounts

Dependencies:
- SQLAlchemy session from `db.db`
- tools.spaces for photo storage
- tools.offline_storage for the offline queue
- core.pdf_report for the receipt
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from config.settings import IMAGE_PREFIX
from core.exception import ReportNotFound, StorageError, ValidationError
from core.pdf_report import generate_report_pdf, pdf_filename
from core.permissions import require_admin, require_reviewer
from db.db import SessionLocal
from db.report_model import Report, REPORT_STATUSES
from db.user_model import UserProfile
from tools import offline_storage, spaces
from tools.geo_utils import Location, validate_coordinates
from tools.image_utils import CapturedImage, to_jpeg_bytes

logger = logging.getLogger(__name__)

STATUS_FILTERS = ("all",) + REPORT_STATUSES

STATUS_LABELS = {
    "pending": "Pending",
    "invalid": "Invalid",
    "updated": "Updated",
    "ranger_assigned": "Ranger Assigned",
}


@dataclass
class SubmissionResult:
    report: Report
    saved_offline: bool
    pdf_bytes: bytes

    @property
    def pdf_filename(self) -> str:
        return pdf_filename(self.report)


def build_report(animal_type: str, location: Optional[Location], user_id: Optional[str] = None,
                 now: Optional[datetime] = None) -> Report:
    """New, unsaved report; anonymous reporters pass user_id=None."""
    now = now or datetime.now(timezone.utc)
    return Report(
        id=str(uuid.uuid4()),
        user_id=user_id,
        animal_type=animal_type,
        image_url="",
        latitude=location.latitude if location else None,
        longitude=location.longitude if location else None,
        status="pending",
        created_at=now,
        updated_at=now,
    )


def image_key(report_id: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"{IMAGE_PREFIX}/{report_id}-{int(now.timestamp() * 1000)}.jpg"


def upload_report_image(report: Report, image: CapturedImage) -> str:
    """Upload the photo as JPEG and return its public URL."""
    key = image_key(report.id)
    spaces.upload_bytes(key, to_jpeg_bytes(image.content), content_type="image/jpeg")
    return spaces.public_url(key)


def _insert(report: Report) -> Report:
    with SessionLocal() as session:
        session.add(report)
        session.commit()
    return report


def _remove_uploaded(report: Report) -> None:
    key = spaces.key_from_public_url(report.image_url)
    if not key:
        return
    try:
        spaces.delete_file(key)
    except StorageError as e:
        logger.warning("Photo for report %s left in storage: %s", report.id, e)


def _store(report: Report, image: CapturedImage) -> Report:
    """Upload the photo, then insert the row; a failed insert removes the photo again."""
    report.image_url = upload_report_image(report, image)
    try:
        return _insert(report)
    except SQLAlchemyError as e:
        logger.error("Could not store report %s: %s", report.id, e)
        _remove_uploaded(report)
        raise StorageError(f"Could not store report {report.id}: {e}") from e


def _validate_for_submit(report: Report) -> None:
    if report.latitude is None or report.longitude is None:
        raise ValidationError("Location is required")
    validate_coordinates(report.latitude, report.longitude)
    if not (report.animal_type or "").strip():
        raise ValidationError("Animal type is required")


def submit_report(report: Report, image: CapturedImage, online: bool = True) -> SubmissionResult:
    """
    Store a report online, or queue it locally when offline.

    Args:
        report (Report): record from `build_report`
        image (CapturedImage): the captured photo
        online (bool): whether Spaces and the database are reachable

    Returns:
        SubmissionResult: the report, where it went, and its PDF receipt
    """
    _validate_for_submit(report)

    if online:
        _store(report, image)
        logger.info("Report %s stored (%s)", report.id, report.animal_type)
    else:
        offline_storage.save_offline_report(offline_storage.OfflineReport(
            temp_id=report.id,
            user_id=report.user_id,
            animal_type=report.animal_type,
            image_url="",
            image_data_url=image.data_url,
            latitude=report.latitude,
            longitude=report.longitude,
            status=report.status,
            timestamp=report.created_at.isoformat(),
        ))

    pdf_bytes = generate_report_pdf(report, image.content)
    return SubmissionResult(report=report, saved_offline=not online, pdf_bytes=pdf_bytes)


def _submit_queued(queued: offline_storage.OfflineReport) -> Report:
    """Upload and insert one report from the offline queue."""
    try:
        with SessionLocal() as session:
            existing = session.get(Report, queued.temp_id)
            reporter_exists = queued.user_id is None or session.get(UserProfile, queued.user_id) is not None
    except SQLAlchemyError as e:
        raise StorageError(f"Could not check queued report {queued.temp_id}: {e}") from e
    if existing is not None:
        logger.info("Offline report %s already stored, dropping from queue", queued.temp_id)
        return existing

    try:
        created = datetime.fromisoformat(queued.timestamp)
    except ValueError as e:
        raise ValidationError(f"Bad timestamp on queued report: {queued.timestamp}") from e

    user_id = queued.user_id
    if not reporter_exists:
        # Same outcome as ON DELETE SET NULL for reports already stored
        logger.info("Reporter of offline report %s no longer exists, storing it unattributed", queued.temp_id)
        user_id = None

    report = Report(
        id=queued.temp_id,
        user_id=user_id,
        animal_type=queued.animal_type,
        latitude=queued.latitude,
        longitude=queued.longitude,
        status=queued.status,
        created_at=created,
        updated_at=created,
    )
    _validate_for_submit(report)
    return _store(report, CapturedImage.from_data_url(queued.image_data_url))


def sync_offline_queue() -> int:
    """Push queued offline reports to storage; returns how many went through."""
    return offline_storage.sync_offline_reports(_submit_queued)


def backend_online() -> bool:
    """Whether reports can be stored right now (database and Spaces both reachable)."""
    try:
        with SessionLocal() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Database unavailable: %s", e)
        return False
    return spaces.is_available()


def pending_offline_count() -> int:
    return len(offline_storage.get_offline_reports())


# --- Queries ---------------------------------------------------------------

def list_reports(status: str = "all", limit: Optional[int] = None) -> List[Report]:
    """Reports newest first, optionally filtered by status."""
    if status not in STATUS_FILTERS:
        raise ValidationError(f"Unknown status filter: {status}")
    with SessionLocal() as session:
        query = session.query(Report).order_by(Report.created_at.desc())
        if status != "all":
            query = query.filter(Report.status == status)
        if limit:
            query = query.limit(limit)
        return query.all()


def get_report(report_id: str) -> Report:
    with SessionLocal() as session:
        report = session.get(Report, report_id)
    if report is None:
        raise ReportNotFound(f"Report {report_id} not found")
    return report


# --- Review ----------------------------------------------------------------

def update_report_status(actor, report_id: str, status: str, feedback: Optional[str] = None) -> Report:
    """
    Change a report's status, optionally recording ranger feedback.

    Feedback replaces the stored note only when non-blank. Assigning a
    ranger requires feedback.
    """
    require_reviewer(actor)
    if status not in REPORT_STATUSES:
        raise ValidationError(f"Unknown status: {status}")

    note = (feedback or "").strip()
    if status == "ranger_assigned" and not note:
        raise ValidationError("Feedback is required when assigning a ranger")

    with SessionLocal() as session:
        report = session.get(Report, report_id)
        if report is None:
            raise ReportNotFound(f"Report {report_id} not found")
        report.status = status
        if note:
            report.feedback = note
        session.commit()
        session.refresh(report)

    logger.info("Report %s set to %s by %s", report_id, status, getattr(actor, "id", None))
    return report


# --- Administration --------------------------------------------------------

def delete_report(actor, report_id: str) -> None:
    """Delete a report and, when it lives in our space, its photo."""
    require_admin(actor, "delete reports")
    with SessionLocal() as session:
        report = session.get(Report, report_id)
        if report is None:
            raise ReportNotFound(f"Report {report_id} not found")
        session.delete(report)
        session.commit()
    logger.info("Report %s deleted by %s", report_id, actor.id)

    _remove_uploaded(report)


def list_users(actor) -> List[UserProfile]:
    require_admin(actor, "list users")
    with SessionLocal() as session:
        return session.query(UserProfile).order_by(UserProfile.created_at.desc()).all()


def delete_user(actor, user_id: str) -> None:
    """Remove an account; its reports stay, detached from the user."""
    require_admin(actor, "delete users")
    with SessionLocal() as session:
        profile = session.get(UserProfile, user_id)
        if profile is None:
            raise ValidationError(f"User {user_id} not found")
        session.query(Report).filter(Report.user_id == user_id).update(
            {Report.user_id: None}, synchronize_session=False
        )
        session.delete(profile)
        session.commit()
    logger.info("User %s deleted by %s", user_id, actor.id)
