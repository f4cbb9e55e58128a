"""
image_utils.py — Captured Photo Handling
-----------------------------------------

Utilities for the photo a reporter takes or uploads:

* `CapturedImage` keeps the original file name and bytes together
* Data URLs for the offline queue (the image travels inside the JSON file)
* JPEG normalization with Pillow before upload or PDF embedding
* GPS extraction from EXIF, converted from degrees/minutes/seconds to decimal

Dependencies:
- Pillow
"""

import base64
import binascii
import io
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from core.exception import ValidationError

logger = logging.getLogger(__name__)

JPEG_QUALITY = 80
GPS_IFD_TAG = 0x8825

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+);base64,(?P<data>.*)$", re.DOTALL)


@dataclass
class CapturedImage:
    filename: str
    content: bytes
    mime_type: str = "image/jpeg"

    @property
    def data_url(self) -> str:
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @classmethod
    def from_data_url(cls, data_url: str, filename: str = "wildlife-photo.jpg") -> "CapturedImage":
        match = _DATA_URL_RE.match(data_url or "")
        if not match:
            raise ValidationError("Image data is not a base64 data URL.")
        try:
            content = base64.b64decode(match.group("data"), validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError("Image data is not valid base64.") from e
        return cls(filename=filename, content=content, mime_type=match.group("mime"))

    @classmethod
    def from_upload(cls, uploaded) -> "CapturedImage":
        """Build from a Streamlit `UploadedFile` (camera_input or file_uploader)."""
        name = getattr(uploaded, "name", None) or "wildlife-photo.jpg"
        mime = getattr(uploaded, "type", None) or "image/jpeg"
        return cls(filename=name, content=uploaded.getvalue(), mime_type=mime)


def open_image(content: bytes) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(content))
        img.load()
        return img
    except (UnidentifiedImageError, OSError) as e:
        raise ValidationError("The selected file is not a readable image.") from e


def to_jpeg_bytes(content: bytes, quality: int = JPEG_QUALITY) -> bytes:
    """Re-encode any Pillow-readable image as RGB JPEG."""
    img = open_image(content)
    if img.mode != "RGB":
        img = img.convert("RGB")
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=quality)
    return buf.getvalue()


def dms_to_decimal(dms, ref: str) -> float:
    """
    Convert GPS coordinates from EXIF (degrees, minutes, seconds) rationals to decimal.
    """
    degrees, minutes, seconds = (float(v) for v in dms)
    decimal = degrees + minutes / 60 + seconds / 3600
    if ref in ("S", "W"):
        decimal *= -1
    return decimal


def extract_gps(content: bytes) -> Optional[Tuple[float, float]]:
    """
    Read latitude/longitude from the photo's EXIF GPS block.

    Returns:
        (latitude, longitude) in decimal degrees, or None if absent or unreadable
    """
    try:
        exif = open_image(content).getexif()
    except ValidationError:
        return None

    gps = exif.get_ifd(GPS_IFD_TAG)
    # GPS tags: 1 LatitudeRef, 2 Latitude, 3 LongitudeRef, 4 Longitude
    if not gps or not all(k in gps for k in (1, 2, 3, 4)):
        return None

    try:
        lat = dms_to_decimal(gps[2], gps[1])
        lon = dms_to_decimal(gps[4], gps[3])
    except (TypeError, ValueError, ZeroDivisionError) as e:
        logger.warning("Unreadable EXIF GPS block: %s", e)
        return None
    return lat, lon
