# normalizer.py
import csv
import math
import re
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from .case_ids import hash_case_id
from .config import (
    BENCHMARK_COLUMNS,
    BENCHMARK_WEEKS,
    CASE_LABEL,
    DEFAULT_DURATION_MIN,
    DURATION_KEYWORDS,
    FLAG_COLUMNS,
    HEADER_ALIASES,
    ID_COLUMNS,
    TRUTHY,
    UNKNOWN_SURGEON,
    WAIT_COLUMNS,
)
from .models import CanonicalCase

TEMPLATE_ROWS = [
    "source_key,benchmark,time_to_target_days,estimated_duration_min,surgeon_id,procedure_name,osa,diabetes",
    "A123,2w,10,90,DR001,Laparoscopic Myomectomy,yes,no",
    "B456,6w,-4,120,DR001,Hysteroscopy,no,yes",
]

_NUMBER_TOKEN = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_DAYS_UNIT = re.compile(r"day|days|d$")


# =========================
# Cell helpers
# =========================
def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def to_number(value) -> float:
    """Keep digits, '-' and '.', then coerce; anything unparseable is NaN (never 0)."""
    if value is None or pd.isna(value):
        return np.nan
    cleaned = re.sub(r"[^0-9.\-]", "", str(value))
    if not cleaned:
        return np.nan
    num = pd.to_numeric(cleaned, errors="coerce")
    if pd.isna(num):
        return np.nan
    return float(num)


def parse_truthy(x) -> bool:
    if x is None or pd.isna(x):
        return False
    return str(x).strip().upper() in TRUTHY


def normalize_header(value: str) -> str:
    s = str(value).lstrip("\ufeff").strip().lower()
    s = re.sub(r"\s+", "_", s)
    return re.sub(r"[^a-z0-9_]", "", s)


def split_csv_line(line: str) -> List[str]:
    # one physical line at a time: a quote left open never swallows the next row;
    # a bare CR reads as a space
    return next(csv.reader([line.replace("\r", " ")]), [])


def parse_benchmark_weeks(value) -> Optional[int]:
    """
    '2w' -> 2, '6 weeks' -> 6, '42d' -> 6, '90' -> 12 (values > 26 are read as days).
    Snaps to the nearest benchmark class; ties go to the lower class.
    """
    if not value:
        return None
    s = re.sub(r"\s+", "", str(value).lower())
    m = _NUMBER_TOKEN.search(s)
    if not m:
        return None
    weeks = float(m.group(0))
    if _DAYS_UNIT.search(s) or weeks > 26:
        weeks = weeks / 7
    best = BENCHMARK_WEEKS[0]
    for cls in BENCHMARK_WEEKS[1:]:
        if abs(cls - weeks) < abs(best - weeks):
            best = cls
    return best


def infer_duration_from_procedure(name: str) -> float:
    s = (name or "").lower()
    for keyword, minutes in DURATION_KEYWORDS:
        if keyword in s:
            return float(minutes)
    return np.nan


def _first_present(record: Dict[str, str], columns: List[str]) -> str:
    for c in columns:
        v = record.get(c, "")
        if v:
            return v
    return ""


def derive_time_to_target(record: Dict[str, str], benchmark: int) -> float:
    """Explicit days, else benchmark minus days/weeks waited, else target weeks minus weeks waited."""
    ttt = to_number(record.get("time_to_target_days"))
    waiting_days = to_number(record.get("time_waiting_days"))
    waiting_weeks = to_number(record.get("time_waiting_weeks"))
    target_weeks = to_number(_first_present(record, ["target_time_weeks", "target_time"]))

    if pd.notna(ttt):
        days = ttt
    elif pd.notna(waiting_days):
        days = benchmark * 7 - waiting_days
    elif pd.notna(waiting_weeks):
        days = benchmark * 7 - waiting_weeks * 7
    elif pd.notna(target_weeks) and pd.notna(waiting_weeks):
        days = target_weeks * 7 - waiting_weeks * 7
    else:
        return np.nan
    return float(round_half_up(days))


def derive_duration(record: Dict[str, str]) -> float:
    dur = to_number(record.get("estimated_duration_min"))
    if pd.notna(dur) and math.isfinite(dur) and dur > 0:
        return float(dur)
    inferred = infer_duration_from_procedure(record.get("procedure_name", ""))
    if pd.notna(inferred):
        return inferred
    return float(DEFAULT_DURATION_MIN)


# =========================
# Main entry
# =========================
def normalize(raw_text: str, case_id_secret: Optional[str] = None) -> Tuple[List[CanonicalCase], List[str]]:
    """
    Parse waitlist CSV text into canonical cases.

    Row numbers (in warnings and synthesised keys) count non-blank lines,
    header = 1. Rows are skipped with a warning when the benchmark cannot be
    read or no time-to-target can be derived; blank rows vanish silently.
    """
    text = (raw_text or "").lstrip("\ufeff")
    lines = [ln.strip() for ln in re.split(r"\r?\n", text)]
    lines = [ln for ln in lines if ln]
    if not lines:
        return [], ["CSV is empty."]

    header = [HEADER_ALIASES.get(h, h) for h in (normalize_header(c) for c in split_csv_line(lines[0]))]

    cases: List[CanonicalCase] = []
    warnings: List[str] = []

    for i in range(1, len(lines)):
        row = split_csv_line(lines[i])
        if not row:
            continue
        record = {}
        for c, name in enumerate(header):
            record[name] = (row[c] if c < len(row) else "").strip()
        if all(v == "" for v in record.values()):
            continue

        raw_id = _first_present(record, ID_COLUMNS) or f"row-{i}"
        source_key = f"{CASE_LABEL} {raw_id}"

        benchmark_raw = _first_present(record, BENCHMARK_COLUMNS)
        if not benchmark_raw and not any(record.get(c) for c in WAIT_COLUMNS):
            continue
        benchmark = parse_benchmark_weeks(benchmark_raw)
        if benchmark is None:
            warnings.append(f"Row {i + 1}: unrecognized benchmark '{benchmark_raw}'.")
            continue

        ttt = derive_time_to_target(record, benchmark)
        duration = derive_duration(record)
        if pd.isna(ttt) or not math.isfinite(duration):
            warnings.append(f"Row {i + 1}: missing time-to-target or duration.")
            continue

        elos = to_number(record.get("elos"))
        flags = {k: parse_truthy(v) for k, v in record.items() if k in FLAG_COLUMNS}

        cases.append(CanonicalCase(
            case_id=hash_case_id(case_id_secret, source_key) if case_id_secret else source_key,
            source_key=source_key,
            benchmark_weeks=benchmark,
            time_to_target_days=int(ttt),
            estimated_duration_min=duration,
            surgeon_id=record.get("surgeon_id") or UNKNOWN_SURGEON,
            procedure_name=record.get("procedure_name", ""),
            inpatient=bool(pd.notna(elos) and elos >= 1),
            flags=flags,
        ))

    if not any(c in header for c in ID_COLUMNS):
        warnings.append("No source_key or case_num column found; generated row-based keys.")

    return cases, warnings


def csv_template() -> str:
    return "\n".join(TEMPLATE_ROWS)
