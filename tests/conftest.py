# pylint: disable=missing-module-docstring,missing-function-docstring,redefined-outer-name,unused-argument
import io
import os
import tempfile
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from PIL import Image
from PIL.TiffImagePlugin import IFDRational

# Settings are read at import time, so point them at a scratch area first
_SCRATCH = tempfile.mkdtemp(prefix="sentry_jamii_tests_")
os.environ["MEDIA_ROOT"] = _SCRATCH
os.environ["DATABASE_URL"] = f"sqlite:///{_SCRATCH}/test.db"
os.environ["ANALYSIS_DELAY_SECONDS"] = "0"
os.environ["SPACE_NAME"] = "test-space"
os.environ["REGION"] = "nyc3"
os.environ.pop("SPACES_ENDPOINT", None)
os.environ.pop("IMAGE_PREFIX", None)
os.environ.pop("DEFAULT_LATITUDE", None)
os.environ.pop("DEFAULT_LONGITUDE", None)

from db.db import Base, engine, init_db  # noqa: E402
from tools import spaces  # noqa: E402
from tools.image_utils import CapturedImage  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    """Empty tables for every test."""
    init_db()
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture(autouse=True)
def fake_spaces(monkeypatch):
    """Replace the boto3 client so nothing leaves the machine."""
    client = MagicMock()
    monkeypatch.setattr(spaces, "client", client)
    return client


@pytest.fixture
def queue_file(tmp_path, monkeypatch):
    """Offline queue in a per-test location."""
    from tools import offline_storage

    path = tmp_path / "offline_reports.json"
    monkeypatch.setattr(offline_storage, "OFFLINE_QUEUE_FILE", path)
    return path


def _jpeg_bytes(size=(32, 24), color=(120, 90, 40)):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes():
    return _jpeg_bytes()


@pytest.fixture
def zebra_image(jpeg_bytes):
    return CapturedImage(filename="zebra_0412.jpg", content=jpeg_bytes)


@pytest.fixture
def gps_jpeg_bytes():
    """JPEG with EXIF GPS for 1°17'31.56"S 36°49'18.84"E (Nairobi)."""
    img = Image.new("RGB", (16, 16), (10, 200, 10))
    exif = Image.Exif()
    exif[0x8825] = {
        1: "S",
        2: (IFDRational(1, 1), IFDRational(17, 1), IFDRational(3156, 100)),
        3: "E",
        4: (IFDRational(36, 1), IFDRational(49, 1), IFDRational(1884, 100)),
    }
    buf = io.BytesIO()
    img.save(buf, format="JPEG", exif=exif)
    return buf.getvalue()


def make_actor(user_type, user_id="actor-1"):
    return SimpleNamespace(id=user_id, user_type=user_type)


@pytest.fixture
def ranger():
    return make_actor("ranger", "ranger-1")


@pytest.fixture
def admin():
    return make_actor("admin", "admin-1")


@pytest.fixture
def community():
    return make_actor("community", "community-1")
