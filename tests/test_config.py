import pytest
from pydantic import ValidationError

from guessing_game.config import Settings, load_settings


def test_defaults():
    settings = load_settings()
    assert settings.entropy_source == "/dev/urandom"
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GUESS_ENTROPY_SOURCE", "os")
    monkeypatch.setenv("GUESS_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.entropy_source == "os"
    assert settings.log_level == "DEBUG"


def test_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_empty_entropy_source():
    with pytest.raises(ValidationError):
        Settings(entropy_source="")
