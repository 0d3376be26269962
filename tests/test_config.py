"""Tests for settings and chunk options."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tts_chunker.config import PROJECT_ROOT, Settings, get_settings
from tts_chunker.schemas.chunk_options import ChunkOptions, get_default_chunk_options


def test_settings_defaults() -> None:
    settings = get_settings()

    assert settings.chunk_boost == 2
    assert settings.chunk_minimum_words == 4
    assert settings.chunk_maximum_words == 12
    assert settings.preserve_clusters is True
    assert settings.read_size == 4096
    assert settings.logging_settings_path == PROJECT_ROOT / "logging_settings.conf"


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TTS_CHUNK_MINIMUM_WORDS", "6")
    monkeypatch.setenv("TTS_CHUNK_PRESERVE_CLUSTERS", "false")
    monkeypatch.setenv("LOGGING_SETTINGS_PATH", "/tmp/chunker-logging.conf")

    settings = get_settings()

    assert settings.chunk_minimum_words == 6
    assert settings.preserve_clusters is False
    assert settings.logging_settings_path == Path("/tmp/chunker-logging.conf")


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_settings_reject_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("TTS_CHUNK_READ_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_chunk_options_from_settings() -> None:
    settings = Settings(chunk_boost=1, chunk_maximum_words=20)

    assert settings.chunk_options() == ChunkOptions(boost=1, maximum_words=20)


def test_chunk_options_defaults() -> None:
    options = get_default_chunk_options()

    assert options.boost == 2
    assert options.minimum_words == 4
    assert options.maximum_words == 12
    assert options.preserve_clusters is True


def test_chunk_options_are_frozen() -> None:
    options = ChunkOptions()
    with pytest.raises(ValidationError):
        options.boost = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "field, value",
    [("boost", -1), ("minimum_words", -1), ("maximum_words", 0)],
)
def test_chunk_options_validation(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        ChunkOptions(**{field: value})
