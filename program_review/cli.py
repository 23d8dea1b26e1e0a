#!/usr/bin/env python3
"""
Program Review CLI — column plan, spreadsheet export, and API server.

USAGE:
  python -m program_review.cli columns                          # Planned column order
  python -m program_review.cli columns --csv data/Final.csv

  python -m program_review.cli export                           # Write the xlsx export
  python -m program_review.cli export --output ./review.xlsx

  python -m program_review.cli serve                            # Start API server
  python -m program_review.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path

from program_review.config import DATASET_FILE, EXPORTS_FOLDER
from program_review.data.store import DataStore
from program_review.reports import grid_report


def _load(args) -> DataStore:
    return DataStore(Path(args.csv) if args.csv else DATASET_FILE).load()


def cmd_columns(args) -> int:
    """Print the planned column order."""
    store = _load(args)
    columns = grid_report.describe_columns(store.view)
    if not columns:
        print("  No columns — dataset missing or empty")
        return 1

    print(f"\nCOLUMNS ({len(columns)}):\n")
    print(f"{'#':<4}{'Field':<40}{'Header':<30}{'Type':<10}{'Align':<7}Flags")
    for i, c in enumerate(columns, 1):
        flags = []
        if c["pinned"]:
            flags.append("pinned")
        if c["sort"]:
            flags.append(f"sort:{c['sort']}")
        print(f"{i:<4}{c['field'][:38]:<40}{c['header_name'][:28]:<30}"
              f"{c['display_type']:<10}{c['align']:<7}{' '.join(flags)}")
    print()
    return 0


def cmd_export(args) -> int:
    """Write the grid to an xlsx file."""
    store = _load(args)
    if not store.view.columns:
        print("  Nothing to export — dataset missing or empty")
        return 1

    out = Path(args.output) if args.output else EXPORTS_FOLDER / f"Program_Review_{datetime.now():%Y-%m-%d}.xlsx"
    path = grid_report.generate_excel(store.view, out)
    print(f"\nExported {store.row_count():,} rows x {store.column_count()} columns to: {path}\n")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Program Review API on {args.host}:{args.port}...")
    uvicorn.run("program_review.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Program Review — academic program metrics grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # columns subcommand
    columns_parser = subparsers.add_parser("columns", help="Show the planned column order")
    columns_parser.add_argument("--csv", help=f"Dataset CSV (default {DATASET_FILE})")
    columns_parser.set_defaults(func=cmd_columns)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export the grid to Excel")
    export_parser.add_argument("--csv", help=f"Dataset CSV (default {DATASET_FILE})")
    export_parser.add_argument("--output", help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address (default 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
