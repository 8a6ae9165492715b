import logging

import pytest

from app.adapters.filesystem import DirectoryScanner, load_document, read_document
from app.domain.errors import DirectoryReadError, FileParseError


def write_yaml(directory, name: str, text: str):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_list_config_files_keeps_yaml_extensions_case_insensitively(tmp_path) -> None:
    for name in ["b.yml", "a.yaml", "C.YAML", "notes.txt", "d.yaml.bak", "README"]:
        (tmp_path / name).write_text("", encoding="utf-8")

    assert DirectoryScanner(tmp_path).list_config_files() == ["C.YAML", "a.yaml", "b.yml"]


def test_list_config_files_raises_for_missing_directory(tmp_path) -> None:
    scanner = DirectoryScanner(tmp_path / "missing")
    with pytest.raises(DirectoryReadError) as exc_info:
        scanner.list_config_files()
    assert exc_info.value.status_code == 500
    assert "missing" in exc_info.value.message


def test_load_document_returns_empty_mapping_for_malformed_yaml(tmp_path, caplog) -> None:
    path = write_yaml(tmp_path, "broken.yaml", "services: [unclosed\n")

    with caplog.at_level(logging.WARNING, logger="app.adapters.filesystem"):
        assert load_document(path) == {}
    assert "broken.yaml" in caplog.text


def test_load_document_returns_empty_mapping_for_empty_and_missing_files(tmp_path) -> None:
    empty = write_yaml(tmp_path, "empty.yaml", "   \n")
    assert load_document(empty) == {}
    assert load_document(tmp_path / "absent.yaml") == {}


def test_read_document_raises_file_parse_error(tmp_path) -> None:
    path = write_yaml(tmp_path, "bad.yml", "key: [1, 2")
    with pytest.raises(FileParseError):
        read_document(path)


def test_scanner_loads_documents_relative_to_its_directory(tmp_path) -> None:
    write_yaml(tmp_path, "apps.yaml", "- name: web\n  url: http://web\n")
    assert DirectoryScanner(tmp_path).load_document("apps.yaml") == [{"name": "web", "url": "http://web"}]
