"""Process-wide configuration using environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas.chunk_options import ChunkOptions

# Resolve the project root once so that `.env` is discovered regardless of CWD
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Load configuration from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    chunk_boost: int = Field(
        default=2,
        ge=0,
        validation_alias=AliasChoices("TTS_CHUNK_BOOST", "chunk_boost"),
    )
    chunk_minimum_words: int = Field(
        default=4,
        ge=0,
        validation_alias=AliasChoices(
            "TTS_CHUNK_MINIMUM_WORDS",
            "chunk_minimum_words",
        ),
    )
    chunk_maximum_words: int = Field(
        default=12,
        ge=1,
        validation_alias=AliasChoices(
            "TTS_CHUNK_MAXIMUM_WORDS",
            "chunk_maximum_words",
        ),
    )
    preserve_clusters: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "TTS_CHUNK_PRESERVE_CLUSTERS",
            "preserve_clusters",
        ),
    )

    # Bytes requested per read() from reader-like sources
    read_size: int = Field(
        default=4096,
        ge=1,
        validation_alias=AliasChoices("TTS_CHUNK_READ_SIZE", "read_size"),
    )

    logging_settings_path: Path = Field(
        default_factory=lambda: PROJECT_ROOT / "logging_settings.conf",
        validation_alias=AliasChoices(
            "LOGGING_SETTINGS_PATH",
            "logging_settings_path",
        ),
    )

    def chunk_options(self) -> ChunkOptions:
        return ChunkOptions(
            boost=self.chunk_boost,
            minimum_words=self.chunk_minimum_words,
            maximum_words=self.chunk_maximum_words,
            preserve_clusters=self.preserve_clusters,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()  # pyright: ignore[reportCallIssue]


__all__ = ["PROJECT_ROOT", "Settings", "get_settings"]
