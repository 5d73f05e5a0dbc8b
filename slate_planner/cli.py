# cli.py
import argparse
import datetime as _dt
import sys
from typing import List, Optional

import pandas as pd

from . import config
from .allocator import allocate
from .normalizer import normalize
from .priority import PRIORITY_MODES, filter_by_surgeon
from .timing import hhmm_from_minutes, timed_schedule


def parse_date(value: str) -> _dt.date:
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        raise ValueError(f"Could not parse date '{value}' (expected YYYY-MM-DD)")
    return ts.date()


def planning_dates(explicit: List[str], start: Optional[str], days: int) -> List[_dt.date]:
    if explicit:
        return [parse_date(v) for v in explicit]
    if days <= 0:
        raise ValueError("--days must be at least 1")
    first = parse_date(start) if start else _dt.date.today()
    return [first + _dt.timedelta(days=k) for k in range(days)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slate-planner",
        description="Build risk-weighted operating slates from a waitlist CSV.",
    )
    parser.add_argument("waitlist", help="Waitlist CSV file (UTF-8, header row).")
    parser.add_argument("--date", action="append", default=[], help="Slate date YYYY-MM-DD (repeatable, in order).")
    parser.add_argument("--start", default=None, help="First date when --date is not given (default: today).")
    parser.add_argument("--days", type=int, default=config.DEFAULT_DAYS, help="Consecutive days to plan from --start.")
    parser.add_argument("--surgeon", default=None, help="Only plan cases for this surgeon id.")
    parser.add_argument("--priority", choices=PRIORITY_MODES, default=config.PRIORITY_MODE,
                        help="Display order within each slate.")
    parser.add_argument("--secret", default=config.CASE_ID_SECRET,
                        help="Secret for pseudonymous case ids (empty: use display labels).")
    parser.add_argument("--out", default=None, help="Write the timed schedule to this CSV path.")
    return parser


def run(args: argparse.Namespace) -> int:
    with open(args.waitlist, "r", encoding="utf-8-sig") as f:
        text = f.read()

    cases, warnings = normalize(text, case_id_secret=args.secret or None)
    for w in warnings:
        print(f"[Warning] {w}")

    cases = filter_by_surgeon(cases, args.surgeon)
    dates = planning_dates(args.date, args.start, args.days)
    results = allocate(cases, dates)

    print(f"{len(cases)} case(s) loaded; {len(results)} slate(s) built.")
    for n, res in enumerate(results, start=1):
        end = res.block_start_minutes + res.block_minutes
        print(
            f"  Slate {n} {res.slate_date}: {hhmm_from_minutes(res.block_start_minutes)}–{hhmm_from_minutes(end)}"
            f"  cases={len(res.selected)}  used={res.total_minutes:g}/{res.block_minutes} min"
            f" ({res.utilization_pct:.1f}%)  risk={res.total_risk_score:.2f}"
        )
    left = len(results[-1].remaining) if results else len(cases)
    print(f"{left} case(s) left on the waitlist.")

    if args.out:
        timed_schedule(results, args.priority).to_csv(args.out, index=False)
        print(f"Saved: {args.out}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
