import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tts_chunker.config import get_settings  # noqa: E402

_ENV_VARS = (
    "TTS_CHUNK_BOOST",
    "TTS_CHUNK_MINIMUM_WORDS",
    "TTS_CHUNK_MAXIMUM_WORDS",
    "TTS_CHUNK_PRESERVE_CLUSTERS",
    "TTS_CHUNK_READ_SIZE",
    "LOGGING_SETTINGS_PATH",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep the process environment from leaking into chunking defaults."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
