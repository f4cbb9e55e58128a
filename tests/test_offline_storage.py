# pylint: disable=missing-module-docstring,missing-function-docstring,redefined-outer-name,unused-argument
import json

import pytest

from core.exception import StorageError
from tools.offline_storage import (
    OfflineReport, clear_offline_reports, get_offline_reports, save_offline_report, sync_offline_reports,
)


def _queued(temp_id):
    return OfflineReport(
        temp_id=temp_id,
        animal_type="Zebra (95%)",
        image_data_url="data:image/jpeg;base64,AAAA",
        latitude=-1.2921,
        longitude=36.8219,
        timestamp="2024-05-01T10:00:00+00:00",
    )


def test_missing_queue_is_empty(queue_file):
    assert get_offline_reports() == []


def test_corrupt_queue_is_empty(queue_file):
    queue_file.write_text("{not json", encoding="utf-8")
    assert get_offline_reports() == []


def test_save_appends_in_order(queue_file):
    save_offline_report(_queued("a"))
    save_offline_report(_queued("b"))

    assert [r.temp_id for r in get_offline_reports()] == ["a", "b"]
    stored = json.loads(queue_file.read_text(encoding="utf-8"))
    assert stored[0]["status"] == "pending"
    assert stored[0]["user_id"] is None


def test_unknown_keys_are_ignored(queue_file):
    entry = {**_queued("a").__dict__, "legacy_field": 1}
    queue_file.write_text(json.dumps([entry]), encoding="utf-8")
    assert get_offline_reports()[0].temp_id == "a"


def test_explicit_path(tmp_path):
    path = tmp_path / "elsewhere" / "queue.json"
    save_offline_report(_queued("a"), path=path)
    assert path.exists()
    assert len(get_offline_reports(path)) == 1
    clear_offline_reports(path)
    assert not path.exists()


def test_clear_missing_queue_is_noop(queue_file):
    clear_offline_reports()
    assert not queue_file.exists()


def test_sync_all_succeed_clears_file(queue_file):
    save_offline_report(_queued("a"))
    save_offline_report(_queued("b"))
    seen = []

    assert sync_offline_reports(lambda r: seen.append(r.temp_id)) == 2
    assert seen == ["a", "b"]
    assert not queue_file.exists()


def test_sync_keeps_failures(queue_file):
    for temp_id in ("a", "b", "c"):
        save_offline_report(_queued(temp_id))

    def submit(report):
        if report.temp_id == "b":
            raise StorageError("upload failed")

    assert sync_offline_reports(submit) == 2
    assert [r.temp_id for r in get_offline_reports()] == ["b"]


def test_unexpected_errors_propagate(queue_file):
    save_offline_report(_queued("a"))

    def submit(report):
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        sync_offline_reports(submit)
    assert len(get_offline_reports()) == 1


def test_sync_empty_queue(queue_file):
    assert sync_offline_reports(lambda r: None) == 0
