#!/usr/bin/env python3
"""
One-off import: CSV file -> database. Deletes every existing person row first.

Usage:
  python scripts/import_csv.py --yes [--csv Data/sample-input.csv]

The database is taken from DATABASE_URL, the color table from COLOR_MAPPING.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make person_api importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from person_api.core.config import get_settings
from person_api.core.logging_config import setup_logging
from person_api.db.session import create_tables
from person_api.domain.colors import ColorTable
from person_api.repositories.csv_repository import CsvPersonRepository
from person_api.services.importer import CsvToDbImporter


def main() -> None:
    ap = argparse.ArgumentParser(description="Import persons from the CSV file into the database")
    ap.add_argument("--csv", help="CSV file (default: CSV_PATH or Data/sample-input.csv)")
    ap.add_argument("--yes", action="store_true", help="confirm that existing database rows are deleted")
    args = ap.parse_args()

    if not args.yes:
        raise SystemExit("Refusing to run without --yes: the import deletes all persons in the database")

    settings = get_settings()
    setup_logging(settings.log_level)
    csv_path = Path(args.csv) if args.csv else settings.csv_path
    if not csv_path.exists():
        raise SystemExit(f"CSV file not found: {csv_path}")

    create_tables()
    repo = CsvPersonRepository(ColorTable(settings.color_mapping), csv_path)
    count = CsvToDbImporter(repo).import_all()
    print(f"OK: {count} persons imported from {csv_path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
