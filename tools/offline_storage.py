"""
offline_storage.py — Local Queue for Reports Made Without Connectivity
-----------------------------------------------------------------------

Reports submitted while offline are appended to a JSON list on disk
(`OFFLINE_QUEUE_FILE`). The photo travels with each entry as a base64 data
URL, since nothing has been uploaded yet.

There is no conflict resolution and no retry/backoff: a sync pass submits
each entry once, drops the ones that went through, and leaves the rest
for the next pass.

Dependencies:
- config.settings
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Callable, List, Optional

from config.settings import OFFLINE_QUEUE_FILE
from core.exception import SentryJamiiError

logger = logging.getLogger(__name__)


@dataclass
class OfflineReport:
    temp_id: str
    animal_type: str
    image_data_url: str
    latitude: float
    longitude: float
    timestamp: str
    user_id: Optional[str] = None
    image_url: str = ""
    status: str = "pending"

    @classmethod
    def from_dict(cls, data: dict) -> "OfflineReport":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def _queue_path(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else OFFLINE_QUEUE_FILE


def _write(reports: List[OfflineReport], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps([asdict(r) for r in reports]), encoding="utf-8")
    tmp.replace(path)


def get_offline_reports(path: Optional[Path] = None) -> List[OfflineReport]:
    path = _queue_path(path)
    if not path.exists():
        return []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return [OfflineReport.from_dict(item) for item in raw]
    except (OSError, ValueError, TypeError) as e:
        logger.error("Error getting offline reports from %s: %s", path, e)
        return []


def save_offline_report(report: OfflineReport, path: Optional[Path] = None) -> None:
    path = _queue_path(path)
    reports = get_offline_reports(path)
    reports.append(report)
    _write(reports, path)
    logger.info("Queued offline report %s (%d waiting)", report.temp_id, len(reports))


def clear_offline_reports(path: Optional[Path] = None) -> None:
    path = _queue_path(path)
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error("Error clearing offline reports: %s", e)


def sync_offline_reports(submit: Callable[[OfflineReport], object], path: Optional[Path] = None) -> int:
    """
    Push queued reports through `submit`.

    Args:
        submit: callable that uploads and stores one queued report; raising
            `SentryJamiiError` keeps the entry queued
        path: queue file, defaults to OFFLINE_QUEUE_FILE

    Returns:
        int: number of reports synced
    """
    path = _queue_path(path)
    pending = get_offline_reports(path)
    if not pending:
        return 0

    remaining = []
    for report in pending:
        try:
            submit(report)
        except SentryJamiiError as e:
            logger.warning("Offline report %s not synced: %s", report.temp_id, e)
            remaining.append(report)

    if remaining:
        _write(remaining, path)
    else:
        clear_offline_reports(path)

    synced = len(pending) - len(remaining)
    logger.info("Synced %d of %d offline reports", synced, len(pending))
    return synced
