"""Aggregation of scanned YAML documents into the dashboard view."""

import logging
from typing import Any

from app.adapters.filesystem import DirectoryScanner
from app.domain.documents import DocumentKind, as_mapping, kind_of, sequence_under
from app.domain.models import DEFAULT_SERVICE_NAME, DEFAULT_SERVICE_URL, AggregatedView

logger = logging.getLogger(__name__)


def is_services_document(doc: Any) -> bool:
    """True for a non-empty list or a mapping whose ``services`` key holds a list.

    A mapping keyed by service names is deliberately not detected here; see
    ``extract_services`` for how such documents are read once classified.
    """

    return kind_of(doc) == DocumentKind.sequence or sequence_under(doc, "services") is not None


def extract_services(doc: Any) -> list[Any]:
    """Return the raw service entries of a services document."""

    kind = kind_of(doc)
    if kind == DocumentKind.sequence:
        return doc
    if kind != DocumentKind.mapping:
        return []
    services = sequence_under(doc, "services")
    if services is not None:
        return services
    return [_named_entry(key, value) for key, value in doc.items()]


def extract_groups(doc: Any) -> list[Any]:
    """Derive display groups from the groups document.

    Accepts a list of groups, a mapping with a ``groups`` list, or a mapping
    of group name to either a list of items (a category bucket) or a mapping
    of settings (a named group).
    """

    kind = kind_of(doc)
    if kind == DocumentKind.sequence:
        return doc
    if kind != DocumentKind.mapping:
        return []
    groups = sequence_under(doc, "groups")
    if groups is not None:
        return groups

    derived = []
    for key, value in doc.items():
        if isinstance(value, list):
            derived.append({"category": key, "items": value})
        else:
            derived.append(_named_entry(key, value))
    return derived


def normalize_tags(tags: Any) -> list[Any]:
    if isinstance(tags, list):
        return tags
    return [tags] if tags else []


def normalize_service(raw: Any) -> dict[str, Any]:
    """Fill missing or falsy canonical fields and keep every other field."""

    source = as_mapping(raw)
    service = {
        "name": source.get("name") or DEFAULT_SERVICE_NAME,
        "url": source.get("url") or DEFAULT_SERVICE_URL,
        "description": source.get("description") or "",
        "icon": source.get("icon") or None,
        "tags": normalize_tags(source.get("tags")),
    }
    for key, value in source.items():
        if key not in service:
            service[key] = value
    return service


def is_valid_group(group: Any) -> bool:
    return isinstance(group, dict) and bool(group.get("name") or group.get("category"))


def _named_entry(key: Any, value: Any) -> dict[Any, Any]:
    entry = {"name": key}
    entry.update(as_mapping(value))
    return entry


class ServiceAggregator:
    """Builds the services/groups view from one configuration directory."""

    def __init__(self, scanner: DirectoryScanner, groups_filename: str = "config.yaml") -> None:
        self.scanner = scanner
        self.groups_filename = groups_filename

    def build_view(self) -> AggregatedView:
        filenames = self.scanner.list_config_files()

        raw_services: list[Any] = []
        groups_doc: Any = {}
        for filename in filenames:
            doc = self.scanner.load_document(filename)
            if is_services_document(doc):
                raw_services.extend(extract_services(doc))
            elif filename == self.groups_filename:
                groups_doc = doc

        services = [s for s in (normalize_service(raw) for raw in raw_services) if s["name"]]
        groups = [g for g in extract_groups(groups_doc) if is_valid_group(g)]
        logger.debug(
            "aggregated %d files into %d services and %d groups",
            len(filenames),
            len(services),
            len(groups),
        )
        return AggregatedView(services=services, groups=groups)
