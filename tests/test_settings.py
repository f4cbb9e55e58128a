# pylint: disable=missing-module-docstring,missing-function-docstring
from pathlib import Path

from config import settings
from config.settings import as_bool, as_float, from_secrets_or_env, resolve_path


def test_as_bool():
    assert as_bool("Yes")
    assert as_bool(" on ")
    assert not as_bool("0")
    assert as_bool(None, default=True)


def test_numeric_parsers_fall_back():
    assert as_float("2.5", 1.0) == 2.5
    assert as_float("abc", 1.0) == 1.0
    assert as_float(None, 1.0) == 1.0


def test_resolve_path(tmp_path):
    assert resolve_path("queue.json", base=tmp_path) == tmp_path / "queue.json"
    assert resolve_path(tmp_path / "abs.json") == tmp_path / "abs.json"
    assert resolve_path("~/x").is_absolute()


def test_env_lookup(monkeypatch):
    monkeypatch.setenv("SENTRY_JAMII_TEST_KEY", "value")
    assert from_secrets_or_env("SENTRY_JAMII_TEST_KEY") == "value"
    assert from_secrets_or_env("SENTRY_JAMII_MISSING_KEY", "fallback") == "fallback"


def test_defaults_under_test_environment():
    assert settings.OFFLINE_QUEUE_FILE.parent == settings.MEDIA_ROOT
    assert settings.SPACES_ENDPOINT == "https://nyc3.digitaloceanspaces.com"
    assert settings.IMAGE_PREFIX == "wildlife-images"
    assert (settings.DEFAULT_LATITUDE, settings.DEFAULT_LONGITUDE) == (-1.2921, 36.8219)
    assert isinstance(settings.MEDIA_ROOT, Path)
