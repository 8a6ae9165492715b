"""Persisting new services to the YAML store."""

import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from app.adapters.filesystem import read_document
from app.domain.errors import DuplicateServiceError, FileParseError, ServiceValidationError, WriteError
from app.domain.models import Service, ServiceCreateRequest
from app.services.aggregator import normalize_tags

logger = logging.getLogger(__name__)

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _locks_guard:
        return _locks.setdefault(key, threading.Lock())


def build_service(payload: ServiceCreateRequest) -> Service:
    """Validate the request and fill defaults for description, icon and tags."""

    if not payload.name or not payload.url:
        raise ServiceValidationError("Fields name and url are required")
    try:
        return Service(
            name=payload.name,
            url=payload.url,
            description=payload.description or "",
            icon=payload.icon or None,
            tags=normalize_tags(payload.tags),
        )
    except ValidationError as exc:
        raise ServiceValidationError(f"invalid service: {exc.errors()[0]['msg']}") from exc


def _contains_name(entries: list[Any], name: str) -> bool:
    # Stored names may be YAML ints or floats; the request name is already text.
    for entry in entries:
        stored = entry.get("name") if isinstance(entry, dict) else None
        if stored is not None and str(stored) == name:
            return True
    return False


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )


class ServiceWriter:
    """Appends services to one YAML store file."""

    def __init__(self, store_path: str | Path) -> None:
        self.store_path = Path(store_path)

    def append(self, payload: ServiceCreateRequest) -> Service:
        service = build_service(payload)
        record = service.model_dump()

        with _lock_for(self.store_path):
            document = self._load_store()
            entries = document.get("services") if isinstance(document, dict) else document
            if isinstance(entries, list):
                if _contains_name(entries, service.name):
                    logger.info("rejected duplicate service %r for %s", service.name, self.store_path)
                    raise DuplicateServiceError(f'Service with name "{service.name}" already exists')
                entries.append(record)
                document = {"services": entries} if isinstance(document, list) else document
            else:
                document = {"services": [record]}
            self._save_store(document)

        logger.info('service "%s" added to %s', service.name, self.store_path)
        return service

    def _load_store(self) -> dict[str, Any] | list[Any]:
        if not self.store_path.exists():
            return {"services": []}
        try:
            data = read_document(self.store_path)
        except FileParseError as exc:
            logger.warning("store %s is unreadable, starting a new one: %s", self.store_path, exc.message)
            return {"services": []}
        if not isinstance(data, (dict, list)) or not data:
            return {"services": []}
        return data

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self.store_path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _save_store(self, document: dict[str, Any] | list[Any]) -> None:
        try:
            text = dump_yaml(document)
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.store_path.name}.", suffix=".tmp", dir=self.store_path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(text)
                os.chmod(tmp_name, self._target_mode())
                os.replace(tmp_name, self.store_path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, yaml.YAMLError) as exc:
            raise WriteError(f"failed to write {self.store_path}: {exc}") from exc
