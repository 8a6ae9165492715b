import os
from pathlib import Path

import pytest

os.environ.setdefault("CONFIG_DIR", "/nonexistent-config-dir")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from app.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    get_settings.cache_clear()
    return tmp_path
