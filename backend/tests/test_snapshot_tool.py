import json

from tooling.snapshot_view import main, snapshot


def test_snapshot_builds_json_ready_view(tmp_path) -> None:
    (tmp_path / "apps.yaml").write_text("services:\n  - name: web\n    since: 2024-01-01\n", encoding="utf-8")

    result = snapshot(tmp_path)

    assert result["services"][0]["name"] == "web"
    assert result["services"][0]["since"] == "2024-01-01"
    assert result["groups"] == []


def test_main_writes_output_file(tmp_path) -> None:
    (tmp_path / "apps.yaml").write_text("- name: web\n", encoding="utf-8")
    out = tmp_path / "snapshot.json"

    assert main([str(tmp_path), "--output", str(out)]) == 0
    assert json.loads(out.read_text(encoding="utf-8"))["services"][0]["url"] == "#"


def test_main_reports_unreadable_directory(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing")]) == 1
    assert "missing" in capsys.readouterr().err
