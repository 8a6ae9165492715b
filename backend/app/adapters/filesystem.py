"""YAML configuration directory access."""

import logging
from pathlib import Path
from typing import Any

import yaml

from app.domain.errors import DirectoryReadError, FileParseError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def read_document(path: Path) -> Any:
    """Read and parse one YAML file, raising ``FileParseError`` on failure."""

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileParseError(f"failed to read {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FileParseError(f"failed to parse {path}: {exc}") from exc


def load_document(path: Path) -> Any:
    """Parse ``path``; a missing, unreadable, malformed or empty file yields ``{}``."""

    try:
        data = read_document(path)
    except FileParseError as exc:
        logger.warning("Error loading %s: %s", path, exc.message)
        return {}
    return data if data else {}


class DirectoryScanner:
    """Lists and loads the YAML files of one configuration directory."""

    def __init__(self, config_dir: str | Path) -> None:
        self.config_dir = Path(config_dir)

    def list_config_files(self) -> list[str]:
        try:
            entries = sorted(self.config_dir.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise DirectoryReadError(f"cannot list config directory {self.config_dir}: {exc}") from exc
        return [entry.name for entry in entries if entry.suffix.lower() in YAML_SUFFIXES]

    def load_document(self, filename: str) -> Any:
        return load_document(self.config_dir / filename)
