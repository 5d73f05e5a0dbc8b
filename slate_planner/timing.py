# timing.py
from typing import List, Optional, Sequence

import pandas as pd

from .models import ScoredCase, SlateResult
from .normalizer import round_half_up
from .priority import sort_by_priority

TIMED_COLUMNS = [
    "Order", "Case ID", "Start", "End", "Start (min)", "End (min)", "Patient Type",
    "Procedure", "Benchmark (weeks)", "Time to Target (days)", "Duration (min)",
    "Surgeon", "Risk Score",
]


def hhmm_from_minutes(m: int) -> str:
    m = int(m)
    h = (m // 60) % 24
    mm = m % 60
    return f"{h:02d}:{mm:02d}"


def timed_slate(cases: Sequence[ScoredCase], block_start_minutes: int) -> pd.DataFrame:
    """Lay cases back-to-back from the block start, in the order given."""
    if not cases:
        return pd.DataFrame(columns=TIMED_COLUMNS)

    flag_names: List[str] = []
    for c in cases:
        for k in c.flags:
            if k not in flag_names:
                flag_names.append(k)

    rows = []
    elapsed = int(block_start_minutes)
    for order, c in enumerate(cases, start=1):
        start = elapsed
        end = start + round_half_up(c.estimated_duration_min)
        row = {
            "Order": order,
            "Case ID": c.case_id,
            "Start": hhmm_from_minutes(start),
            "End": hhmm_from_minutes(end),
            "Start (min)": start,
            "End (min)": end,
            "Patient Type": "Inpatient" if c.inpatient else "Day Case",
            "Procedure": c.procedure_name,
            "Benchmark (weeks)": c.benchmark_weeks,
            "Time to Target (days)": c.time_to_target_days,
            "Duration (min)": c.estimated_duration_min,
            "Surgeon": c.surgeon_id,
            "Risk Score": round(c.risk_score, 2),
        }
        for f in flag_names:
            row[f] = bool(c.flags.get(f, False))
        rows.append(row)
        elapsed = end

    return pd.DataFrame(rows, columns=TIMED_COLUMNS + flag_names)


def timed_schedule(results: Sequence[SlateResult], priority_mode: Optional[str] = None) -> pd.DataFrame:
    """One timed table for several slates, with 'Slate' (1-based) and 'Date' leading columns."""
    frames = []
    for n, res in enumerate(results, start=1):
        items = res.selected
        if priority_mode:
            items = sort_by_priority(items, priority_mode)
        df = timed_slate(items, res.block_start_minutes)
        df.insert(0, "Date", pd.to_datetime(res.slate_date).date() if res.slate_date is not None else None)
        df.insert(0, "Slate", n)
        frames.append(df)

    if not frames:
        return pd.DataFrame(columns=["Slate", "Date"] + TIMED_COLUMNS)
    return pd.concat(frames, ignore_index=True)
