"""
CLI (Command Line Interface).

Quick terminal commands to inspect the student home page for a data file:

    studenthome show [--data dashboard.json] [--now 2026-10-19T12:00:00+00:00]
    studenthome json [--data dashboard.json] [--now ...]

The data file defaults to $STUDENTHOME_DATA, or data/dashboard.json inside
the package.

Note:
- Broken data files are reported and exit with code 1
- A session without a submission status is a bug in the data source and
  is NOT caught here
"""

from __future__ import annotations

import argparse
import html
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from studenthome.buttons import describe_actions
from studenthome.page import StudentHomePageData
from studenthome.storage import DashboardDataError, default_data_path, load_dashboard, parse_timestamp

DATA_ENV_VAR = "STUDENTHOME_DATA"

console = Console()


def _data_path(args: argparse.Namespace) -> Path:
    """
    Resolve the data file: --data, then $STUDENTHOME_DATA, then the package default.
    """
    if args.data:
        return Path(args.data)
    env_path = os.environ.get(DATA_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)
    return default_data_path()


def _build_page(args: argparse.Namespace) -> StudentHomePageData:
    now: Optional[datetime] = parse_timestamp(args.now) if args.now else None
    account, courses, submissions = load_dashboard(_data_path(args))
    return StudentHomePageData(account, courses, submissions, now=now)


def _cmd_show(page: StudentHomePageData) -> int:
    """
    Print one table per course with status and available actions.
    """
    if not page.course_tables:
        console.print("You are not enrolled in any courses.")
        return 0

    for table in page.course_tables:
        course = table.course
        title = f"[{course.id}] {course.name}".strip()
        if not table.rows:
            console.print(f"{escape(title)}: no feedback sessions.")
            continue

        t = Table(title=escape(title), box=box.SIMPLE, title_justify="left")
        t.add_column("#", justify="right")
        t.add_column("Session")
        t.add_column("Deadline")
        t.add_column("Status")
        t.add_column("Actions")

        for row in table.rows:
            t.add_row(
                str(row.index),
                escape(html.unescape(row.name)),
                row.end_time,
                row.status,
                escape(describe_actions(row.actions)),
            )
        console.print(t)

    return 0


def _cmd_json(page: StudentHomePageData) -> int:
    print(json.dumps(page.to_dict(), indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="studenthome", description="Student home page data")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data", type=str, default=None, help=f"Dashboard JSON file (default: ${DATA_ENV_VAR})")
    common.add_argument("--now", type=str, default=None, help="Evaluate session states at this ISO-8601 time")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", parents=[common], help="Show course tables in the terminal")
    sub.add_parser("json", parents=[common], help="Print the page view model as JSON")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, builds the page data, dispatches to the
    command handler and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        page = _build_page(args)
    except DashboardDataError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    if args.command == "show":
        raise SystemExit(_cmd_show(page))
    if args.command == "json":
        raise SystemExit(_cmd_json(page))

    raise SystemExit(2)
