"""Helpers for parsing the simple logging settings file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import get_settings

_LEVEL_MAP: dict[str, int | None] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "off": None,
}

_DEFAULT_KEYS = ("terminal", "segmenter", "pipeline")
_DEFAULT_LEVEL = "info"

_ROOT_LOGGER = "tts_chunker"
_AREA_LOGGERS = {
    "segmenter": "tts_chunker.services.tts",
    "pipeline": "tts_chunker.services.text_segmenter",
}
_HANDLER_NAME = "tts_chunker.console"
# Above CRITICAL, so nothing gets through
_SILENT = logging.CRITICAL + 10


@dataclass(frozen=True)
class LoggingSettings:
    terminal_level: int | None
    segmenter_level: int | None
    pipeline_level: int | None


def _normalize_level(value: str) -> str:
    return value.strip().lower()


def _resolve_level(value: str) -> int | None:
    return _LEVEL_MAP.get(_normalize_level(value), _LEVEL_MAP[_DEFAULT_LEVEL])


def parse_logging_settings(path: Path) -> LoggingSettings:
    """Parse the human-readable logging settings file."""

    levels: dict[str, int | None] = {
        key: _LEVEL_MAP[_DEFAULT_LEVEL] for key in _DEFAULT_KEYS
    }

    if path.exists():
        for raw_line in path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = (part.strip() for part in line.split("=", 1))
            normalized_key = key.lower()
            if normalized_key in _DEFAULT_KEYS:
                levels[normalized_key] = _resolve_level(value)

    return LoggingSettings(
        terminal_level=levels["terminal"],
        segmenter_level=levels["segmenter"],
        pipeline_level=levels["pipeline"],
    )


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """
    Apply logging settings to the ``tts_chunker`` logger tree.

    Attaches a single console handler for the terminal level (calling this
    again replaces it) and sets per-area levels. An area set to ``off`` is
    silenced.

    Returns:
        The package root logger
    """
    root = logging.getLogger(_ROOT_LOGGER)

    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()

    if settings.terminal_level is not None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(settings.terminal_level)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(console_handler)

    area_levels = {
        "segmenter": settings.segmenter_level,
        "pipeline": settings.pipeline_level,
    }
    enabled = [level for level in area_levels.values() if level is not None]
    root.setLevel(min(enabled) if enabled else _SILENT)

    for area, logger_name in _AREA_LOGGERS.items():
        level = area_levels[area]
        logging.getLogger(logger_name).setLevel(_SILENT if level is None else level)

    return root


def load_logging_settings(path: Path | None = None) -> LoggingSettings:
    """Parse the configured logging settings file and apply it."""
    if path is None:
        path = get_settings().logging_settings_path
    settings = parse_logging_settings(path)
    configure_logging(settings)
    return settings


__all__ = [
    "LoggingSettings",
    "configure_logging",
    "load_logging_settings",
    "parse_logging_settings",
]
