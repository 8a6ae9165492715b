"""Offline snapshot of the aggregated services/groups view."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from app.adapters.filesystem import DirectoryScanner
from app.config import get_settings
from app.domain.errors import DirectoryReadError
from app.services.aggregator import ServiceAggregator


def snapshot(config_dir: str | Path, groups_filename: str = "config.yaml") -> dict:
    aggregator = ServiceAggregator(DirectoryScanner(config_dir), groups_filename=groups_filename)
    return aggregator.build_view().model_dump(mode="json")


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Print the dashboard view built from a config directory.")
    parser.add_argument("config_dir", nargs="?", default=settings.config_dir)
    parser.add_argument("--output", help="write the JSON snapshot to this file instead of stdout")
    args = parser.parse_args(argv)

    try:
        result = snapshot(args.config_dir, settings.groups_filename)
    except DirectoryReadError as exc:
        print(exc.message, file=sys.stderr)
        return 1

    text = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
