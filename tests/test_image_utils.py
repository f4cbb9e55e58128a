# pylint: disable=missing-module-docstring,missing-function-docstring
import io
from types import SimpleNamespace

import pytest
from PIL import Image

from core.exception import ValidationError
from tools.image_utils import CapturedImage, dms_to_decimal, extract_gps, open_image, to_jpeg_bytes


def test_data_url_round_trip(jpeg_bytes):
    image = CapturedImage("zebra.jpg", jpeg_bytes)
    assert image.data_url.startswith("data:image/jpeg;base64,")
    restored = CapturedImage.from_data_url(image.data_url)
    assert restored.content == jpeg_bytes
    assert restored.mime_type == "image/jpeg"


@pytest.mark.parametrize("bad", ["", "not a data url", "data:image/jpeg;base64,@@@"])
def test_bad_data_url(bad):
    with pytest.raises(ValidationError):
        CapturedImage.from_data_url(bad)


def test_from_upload(jpeg_bytes):
    uploaded = SimpleNamespace(name="rhino.png", type="image/png", getvalue=lambda: jpeg_bytes)
    image = CapturedImage.from_upload(uploaded)
    assert (image.filename, image.mime_type, image.content) == ("rhino.png", "image/png", jpeg_bytes)


def test_to_jpeg_converts_png_with_alpha():
    buf = io.BytesIO()
    Image.new("RGBA", (8, 8), (255, 0, 0, 128)).save(buf, format="PNG")
    jpeg = to_jpeg_bytes(buf.getvalue())
    assert open_image(jpeg).format == "JPEG"


def test_unreadable_image():
    with pytest.raises(ValidationError):
        open_image(b"definitely not an image")


@pytest.mark.parametrize("ref,sign", [("N", 1), ("E", 1), ("S", -1), ("W", -1)])
def test_dms_to_decimal(ref, sign):
    assert dms_to_decimal((1, 30, 36), ref) == pytest.approx(sign * 1.51)


def test_extract_gps(gps_jpeg_bytes, jpeg_bytes):
    lat, lon = extract_gps(gps_jpeg_bytes)
    assert lat == pytest.approx(-1.2921, abs=1e-4)
    assert lon == pytest.approx(36.8219, abs=1e-4)
    assert extract_gps(jpeg_bytes) is None
    assert extract_gps(b"junk") is None
