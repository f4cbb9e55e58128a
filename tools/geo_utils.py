"""
geo_utils.py — Sighting Location Utility
-----------------------------------------

This module provides location utilities for wildlife reports, including:

- Picking the report location: manual entry, photo EXIF GPS, or the default
- Validating and formatting decimal coordinates
- Reverse geocoding latitude/longitude to a readable place name using
  OpenStreetMap Nominatim

Expected settings:
- USER_AGENT, NOMINATIM_URL, DEFAULT_LATITUDE, DEFAULT_LONGITUDE

Dependencies:
- requests for API calls

"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import requests

from config.settings import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, HEADERS, NOMINATIM_URL
from core.exception import ValidationError
from tools.image_utils import CapturedImage, extract_gps

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    source: str = "default"  # manual | exif | default

    def __str__(self):
        return format_coordinates(self.latitude, self.longitude)


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.6f}, {longitude:.6f}"


def validate_coordinates(latitude: float, longitude: float) -> None:
    if latitude is None or longitude is None:
        raise ValidationError("Location is required")
    if not -90.0 <= float(latitude) <= 90.0:
        raise ValidationError(f"Latitude {latitude} is outside -90..90")
    if not -180.0 <= float(longitude) <= 180.0:
        raise ValidationError(f"Longitude {longitude} is outside -180..180")


def default_location() -> Location:
    return Location(DEFAULT_LATITUDE, DEFAULT_LONGITUDE, "default")


def resolve_location(image: Optional[CapturedImage],
                     manual: Optional[Tuple[float, float]] = None) -> Location:
    """
    Choose where the sighting happened.

    Order: coordinates typed by the reporter, GPS in the photo's EXIF,
    then the configured default location.
    """
    if manual is not None:
        lat, lon = manual
        validate_coordinates(lat, lon)
        return Location(float(lat), float(lon), "manual")

    if image is not None:
        gps = extract_gps(image.content)
        if gps is not None:
            try:
                validate_coordinates(*gps)
                return Location(gps[0], gps[1], "exif")
            except ValidationError as e:
                logger.warning("Ignoring EXIF GPS for %s: %s", image.filename, e)

    logger.info("No GPS available, using default location")
    return default_location()


def reverse_geocode(latitude: float, longitude: float) -> Optional[str]:
    """
    Reverse geocodes coordinates into a display name.

    Returns:
        str | None: e.g. "Nairobi National Park, Nairobi, Kenya", or None on failure
    """
    params = {
        "lat": latitude, "lon": longitude, "format": "json",
        "zoom": 14, "accept-language": "en",
    }

    try:
        response = requests.get(NOMINATIM_URL, params=params, headers=HEADERS, timeout=10)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Error during reverse geocoding (%s, %s): %s", latitude, longitude, e)
        return None

    return data.get("display_name") or None
