"""
settings.py — Central config for the Sentry Jamii wildlife reporting app

Precedence for config values:
1) Streamlit secrets (if available)
2) Environment variables
3) Sensible defaults

All local file paths derive from MEDIA_ROOT.
Secrets (Spaces keys, database credentials) should live in .streamlit/secrets.toml
for Streamlit, or in a .env file for scripts and tests.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

# --- Streamlit secrets (optional) ---
_ST_SECRETS = None
try:
    import streamlit as st  # noqa: F401
    _ST_SECRETS = getattr(st, "secrets", None)
except ImportError:
    _ST_SECRETS = None


# --- Helpers ---------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

def from_secrets_or_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return value from st.secrets[key] if available, else os.getenv(key), else default."""
    if _ST_SECRETS is not None:
        try:
            val = _ST_SECRETS.get(key, None)
            if val is not None:
                return str(val)
        except Exception:
            # No secrets.toml present
            pass
    return os.getenv(key, default)

def as_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse common truthy strings to bool."""
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "t", "yes", "y", "on"}

def as_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


def resolve_path(raw: str | Path, *, base: Path = PROJECT_ROOT) -> Path:
    """
    Resolve a filesystem path. If absolute or starts with ~, respect it.
    If relative, resolve under `base`.
    """
    p = Path(raw).expanduser()
    return p if p.is_absolute() else (base / p)

def ensure_dirs(*paths: Path) -> None:
    for p in paths:
        p.mkdir(parents=True, exist_ok=True)


# --- Core Paths ------------------------------------------------------------

MEDIA_ROOT = resolve_path(from_secrets_or_env("MEDIA_ROOT", "media"))

OFFLINE_QUEUE_FILE = resolve_path(
    from_secrets_or_env("OFFLINE_QUEUE_FILE", "offline_reports.json"), base=MEDIA_ROOT
)

ensure_dirs(MEDIA_ROOT, OFFLINE_QUEUE_FILE.parent)


# --- Environment / Services -----------------------------------------------

ENVIRONMENT  = from_secrets_or_env("ENV", "development")
DEBUG        = as_bool(from_secrets_or_env("DEBUG", "false"), default=False)
LOG_LEVEL    = from_secrets_or_env("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")

DATABASE_URL = from_secrets_or_env("DATABASE_URL", f"sqlite:///{MEDIA_ROOT / 'sentry_jamii.db'}")

# OpenStreetMap / HTTP
NOMINATIM_URL = from_secrets_or_env("NOMINATIM_URL", "https://nominatim.openstreetmap.org/reverse")
USER_AGENT    = from_secrets_or_env("USER_AGENT", "SentryJamii/1.0 (example@example.com)")
HEADERS       = {"User-Agent": USER_AGENT}

# Spaces (S3-compatible object storage for report images)
SPACE_NAME      = from_secrets_or_env("SPACE_NAME", "sentry-jamii")
REGION          = from_secrets_or_env("REGION", "nyc3")
ACCESS_KEY      = from_secrets_or_env("ACCESS_KEY")
SECRET_KEY      = from_secrets_or_env("SECRET_KEY")
SPACES_ENDPOINT = from_secrets_or_env("SPACES_ENDPOINT", f"https://{REGION}.digitaloceanspaces.com")
IMAGE_PREFIX    = from_secrets_or_env("IMAGE_PREFIX", "wildlife-images")

# Location fallback when the photo carries no GPS (Nairobi)
DEFAULT_LATITUDE  = as_float(from_secrets_or_env("DEFAULT_LATITUDE"), -1.2921)
DEFAULT_LONGITUDE = as_float(from_secrets_or_env("DEFAULT_LONGITUDE"), 36.8219)

# Screen timings (seconds)
SPLASH_SECONDS         = as_float(from_secrets_or_env("SPLASH_SECONDS"), 3.0)
COMPLETE_RESET_SECONDS = as_float(from_secrets_or_env("COMPLETE_RESET_SECONDS"), 3.0)
ANALYSIS_DELAY_SECONDS = as_float(from_secrets_or_env("ANALYSIS_DELAY_SECONDS"), 0.0)
