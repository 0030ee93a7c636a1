#!/usr/bin/env python
"""Utility CLI for managing the sketch catalog."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from config.sketch_defaults import DEFAULT_SKETCH_SOURCE
from services.errors import NameValidationError, PersistenceUnavailable
from services.name_validation import validate_sketch_name
from services.sketch_service import SketchStore
from utils.error_handling import handle_worker_error
from utils.formatting import format_count, format_created


def _store(args: argparse.Namespace) -> SketchStore:
    return SketchStore(Path(args.data_dir) if args.data_dir else None)


def cmd_list(args: argparse.Namespace) -> int:
    sketches = _store(args).list_projects()
    print(format_count(len(sketches)))
    for sketch in sketches:
        print(f"- {sketch.name} | {format_created(sketch.creation_date)}")
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    store = _store(args)
    existing = [sketch.name for sketch in store.list_projects()]
    try:
        name = validate_sketch_name(args.name, existing)
    except NameValidationError as exc:
        print(exc.message)
        if exc.suggested_name != args.name:
            print(f"Suggested name: {exc.suggested_name}")
        return 1

    store.create_project(name, DEFAULT_SKETCH_SOURCE)
    print(f"Created sketch '{name}' at {store.source_path(name)}.")
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    if not args.force:
        confirm = input(
            f"Delete sketch '{args.name}' from catalog and disk? [y/N]: "
        ).strip().lower()
        if confirm not in {"y", "yes"}:
            print("Aborted.")
            return 1

    if not _store(args).delete_project(args.name):
        print(f"No sketch named '{args.name}' in the catalog.")
        return 1
    print(f"Deleted sketch '{args.name}'.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sketch catalog tooling.")
    parser.add_argument("--data-dir", help="Override the data directory.")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List catalogued sketches.")
    list_parser.set_defaults(func=cmd_list)

    create_parser = subparsers.add_parser("create", help="Create a sketch with the default source.")
    create_parser.add_argument("--name", required=True, help="Sketch name.")
    create_parser.set_defaults(func=cmd_create)

    delete_parser = subparsers.add_parser("delete", help="Delete a sketch.")
    delete_parser.add_argument("--name", required=True, help="Sketch name to delete.")
    delete_parser.add_argument(
        "--force",
        action="store_true",
        help="Skip confirmation prompt.",
    )
    delete_parser.set_defaults(func=cmd_delete)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    try:
        return args.func(args)
    except PersistenceUnavailable as exc:
        message = handle_worker_error(exc, f"Sketch {args.command} failed", getattr(args, "name", ""))
        print(f"Error: {message}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
