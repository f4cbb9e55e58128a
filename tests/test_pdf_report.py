# pylint: disable=missing-module-docstring,missing-function-docstring
import os
import time
from datetime import datetime, timezone

import pytest


from core.pdf_report import _report_lines, generate_report_pdf, local_time, pdf_filename
from core.reports import build_report
from tools.geo_utils import Location


@pytest.fixture
def nairobi_time():
    """Local timezone UTC+3 for the duration of a test."""
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "EAT-3"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()


def _report():
    when = datetime(2024, 5, 1, 14, 30, 5, tzinfo=timezone.utc)
    return build_report("Elephant (98%)", Location(-1.2921, 36.8219), now=when)


def test_filename():
    report = _report()
    assert pdf_filename(report) == f"wildlife-report-{report.id}.pdf"


def test_lines(nairobi_time):
    report = _report()
    assert _report_lines(report) == [
        f"Report ID: {report.id}",
        "Animal Type: Elephant (98%)",
        "Date: 2024-05-01",
        "Time: 17:30:05",
        "Location: -1.292100, 36.821900",
        "Status: pending",
    ]


def test_pdf_with_photo(jpeg_bytes):
    pdf = generate_report_pdf(_report(), jpeg_bytes)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > len(generate_report_pdf(_report()))


def test_unreadable_photo_is_skipped():
    pdf = generate_report_pdf(_report(), b"not an image")
    assert pdf.startswith(b"%PDF")


def test_naive_times_are_read_as_utc(nairobi_time):
    stored = datetime(2024, 5, 1, 22, 15)
    assert local_time(stored).strftime("%Y-%m-%d %H:%M") == "2024-05-02 01:15"


def test_late_utc_report_dated_by_local_day(nairobi_time):
    report = build_report("Zebra (95%)", Location(-1.29, 36.82), now=datetime(2024, 5, 1, 22, 0, tzinfo=timezone.utc))
    lines = _report_lines(report)
    assert "Date: 2024-05-02" in lines
    assert "Time: 01:00:00" in lines
