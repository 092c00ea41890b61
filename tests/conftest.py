import io
from pathlib import Path

import pytest

from gzipkit.core.config import Settings, get_settings
from gzipkit.core.logging import configure_logging
from gzipkit.services.compression_service import CompressionService

_ENV = (
    "GZIPKIT_CHUNK_SIZE",
    "GZIPKIT_FLUSH_EACH_CHUNK",
    "GZIPKIT_EMBED_MTIME",
    "GZIPKIT_ROOT_DIR",
    "GZIPKIT_DEFAULT_LEVEL",
    "GZIPKIT_DEFAULT_EXTENSION",
    "GZIPKIT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def service():
    return CompressionService(Settings())


@pytest.fixture
def log_stream(monkeypatch):
    """توجيه مخرجات المسجل إلى ذاكرة مؤقتة لفحصها."""
    logger = configure_logging()
    stream = io.StringIO()
    for handler in logger.handlers:
        monkeypatch.setattr(handler, "stream", stream)
    return stream


@pytest.fixture
def make_file(tmp_path):
    def _make(name: str, data: bytes = b"hello gzip\n" * 50, directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _make
