"""Single-page PDF receipt for a submitted wildlife report."""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from db.report_model import Report
from tools.geo_utils import format_coordinates
from tools.image_utils import to_jpeg_bytes

logger = logging.getLogger(__name__)

PDF_TITLE = "Sentry Jamii Wildlife Report"


def pdf_filename(report: Report) -> str:
    """Download name for ``report``'s PDF."""

    return f"wildlife-report-{report.id}.pdf"


def local_time(value: datetime | None) -> datetime:
    """``value`` in the local timezone; naive values are UTC as stored."""

    if value is None:
        return datetime.now().astimezone()
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone()


def _report_lines(report: Report) -> list[str]:
    created = local_time(report.created_at)
    return [
        f"Report ID: {report.id}",
        f"Animal Type: {report.animal_type}",
        f"Date: {created.strftime('%Y-%m-%d')}",
        f"Time: {created.strftime('%H:%M:%S')}",
        f"Location: {format_coordinates(report.latitude, report.longitude)}",
        f"Status: {report.status}",
    ]


def generate_report_pdf(report: Report, image_bytes: bytes | None = None) -> bytes:
    """Render ``report`` and its photo to PDF bytes.

    A photo that cannot be decoded is logged and left out; the text part of
    the report is always written.
    """

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    _, height = A4
    c.setTitle(f"{PDF_TITLE} {report.id}")

    c.setFont("Helvetica-Bold", 20)
    c.drawString(20 * mm, height - 30 * mm, PDF_TITLE)

    c.setFont("Helvetica", 12)
    y = height - 50 * mm
    for line in _report_lines(report):
        c.drawString(20 * mm, y, line)
        y -= 10 * mm

    if image_bytes:
        try:
            jpeg = to_jpeg_bytes(image_bytes)
            c.drawImage(
                ImageReader(io.BytesIO(jpeg)),
                20 * mm,
                height - 185 * mm,
                width=100 * mm,
                height=75 * mm,
                preserveAspectRatio=True,
            )
        except Exception as e:  # noqa: BLE001
            logger.error("Error adding image to PDF for report %s: %s", report.id, e)

    c.showPage()
    c.save()
    return buf.getvalue()
