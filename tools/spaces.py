"""
spaces.py — DigitalOcean Spaces Utility Wrapper
-----------------------------------------------

This module provides a simplified interface for interacting with
DigitalOcean Spaces (S3-compatible object storage) using Boto3.

Features:
* Connects to a specific Space using API credentials
* Uploads report photos as public-read objects
* Builds public URLs for stored photos
* Deletes objects, e.g. when a report is removed

Errors from botocore are re-raised as `StorageError` so the UI can show them.

Dependencies:
- boto3
- botocore
- config.settings

Environment / Settings:
- `SPACE_NAME`: Name of the DigitalOcean space (bucket)
- `REGION`: Region of the space (e.g., "nyc3")
- `ACCESS_KEY`: Spaces API key
- `SECRET_KEY`: Spaces API secret
- `SPACES_ENDPOINT`: Endpoint URL, defaults to the region endpoint
"""

import logging

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from config.settings import SPACE_NAME, REGION, ACCESS_KEY, SECRET_KEY, SPACES_ENDPOINT
from core.exception import StorageError

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Boto3 Session Setup
# -------------------------------------------------------------------
session = boto3.session.Session()

client = session.client(
    "s3",
    region_name=REGION,
    endpoint_url=SPACES_ENDPOINT,
    aws_access_key_id=ACCESS_KEY,
    aws_secret_access_key=SECRET_KEY,
    config=Config(signature_version="s3v4")
)

# -------------------------------------------------------------------
# Core Utility Functions
# -------------------------------------------------------------------

def upload_bytes(remote_path, data, content_type="image/jpeg", public=True):
    """
    Uploads raw bytes to the specified key in the space.

    Args:
        remote_path (str): Destination key in the space
        data (bytes): Object body
        content_type (str): MIME type stored with the object
        public (bool): Make the object world-readable

    Returns:
        str: The key written
    """
    extra = {"ContentType": content_type}
    if public:
        extra["ACL"] = "public-read"
    try:
        client.put_object(Bucket=SPACE_NAME, Key=remote_path, Body=data, **extra)
    except (BotoCoreError, ClientError) as e:
        logger.error("Upload of %s failed: %s", remote_path, e)
        raise StorageError(f"Could not upload image: {e}") from e
    logger.info("Uploaded %s (%d bytes)", remote_path, len(data))
    return remote_path


def public_url(remote_path):
    """
    Public URL of an object uploaded with `public=True`.

    Args:
        remote_path (str): Object key

    Returns:
        str: https URL on the space's own host
    """
    endpoint = SPACES_ENDPOINT.rstrip("/")
    scheme, _, host = endpoint.partition("://")
    return f"{scheme}://{SPACE_NAME}.{host}/{remote_path}"


def delete_file(remote_path):
    """
    Deletes an object from the space.

    Args:
        remote_path (str): Object key to delete
    """
    try:
        client.delete_object(Bucket=SPACE_NAME, Key=remote_path)
    except (BotoCoreError, ClientError) as e:
        raise StorageError(f"Could not delete {remote_path}: {e}") from e


def key_from_public_url(url):
    """Inverse of `public_url`; None for URLs outside this space."""
    prefix = public_url("")
    if url and url.startswith(prefix):
        return url[len(prefix):]
    return None


def is_available():
    """True when the space answers a HEAD request with the configured credentials."""
    try:
        client.head_bucket(Bucket=SPACE_NAME)
        return True
    except (BotoCoreError, ClientError) as e:
        logger.warning("Spaces unavailable: %s", e)
        return False
