"""Manual status check for a lot table and the bundled shuttle schedules.

Run from the repository root with:
  PYTHONPATH=src python scripts/status_check.py --lots lots.json

Optional arguments:
  --at 2024-03-04T06:35:00-05:00   evaluate a fixed instant instead of now
  --timezone America/New_York
  --verbose                        enable debug logging

The lot table is a JSON list of objects with id, name, category,
overnight_exempt, lat, lng and an optional polygon.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from pycampusparking import Client
from pycampusparking.const import DEFAULT_TIMEZONE
from pycampusparking.data.loader import build_parking_lot
from pycampusparking.exceptions import PyCampusParkingError
from pycampusparking.util import format_countdown


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--lots", type=Path, help="Path to a JSON lot table.")
    parser.add_argument("--at", help="ISO 8601 instant with offset.")
    parser.add_argument("--timezone", default=DEFAULT_TIMEZONE)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        instant = datetime.fromisoformat(args.at) if args.at else None
        client = Client(timezone=args.timezone)
        descriptor = client.describe(instant)
        transition = client.next_transition(instant)
        lots = []
        if args.lots is not None:
            raw = json.loads(args.lots.read_text(encoding="utf-8"))
            lots = [build_parking_lot(item) for item in raw]
        rows = client.list_lots(lots, instant)
        summaries = client.route_summaries(instant)
    except (OSError, ValueError, PyCampusParkingError) as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"Time: {descriptor.display} (day {descriptor.day_of_week})")
    print(f"Period: {client.period_label(instant)}")
    print(f"Next: {transition.label} in {format_countdown(transition.minutes_until)}")
    print(f"Lots: {len(rows)}")
    for lot, status, _ in rows:
        print(f"- {lot.name} | {status.color.value} | {status.label.value} | {status.reason}")
    print(f"Routes: {len(summaries)}")
    for summary in summaries:
        state = "running" if summary.running else "not running"
        if summary.next_departure is None:
            next_text = "no more departures today"
        else:
            next_text = f"next {summary.next_departure} ({format_countdown(summary.minutes_until or 0)})"
        print(f"- {summary.name} | {state} | {next_text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
