# models.py
import datetime as _dt
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

import pandas as pd

from .config import UNKNOWN_SURGEON


@dataclass(frozen=True, kw_only=True)
class CanonicalCase:
    case_id: str
    source_key: str
    benchmark_weeks: int
    time_to_target_days: int
    estimated_duration_min: float
    surgeon_id: str = UNKNOWN_SURGEON
    procedure_name: str = ""
    inpatient: bool = False
    # open mapping: only registered flags are filled by the normaliser
    flags: Dict[str, bool] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class ScoredCase(CanonicalCase):
    urgency_weight: int
    overdue_days: int
    risk_score: float
    value_score: float

    @classmethod
    def from_case(cls, case: CanonicalCase, **scores) -> "ScoredCase":
        """Copy the canonical fields of `case` (scored or not) and attach fresh scores."""
        base = {f.name: getattr(case, f.name) for f in fields(CanonicalCase)}
        base["flags"] = dict(case.flags)
        return cls(**base, **scores)


@dataclass
class SlateResult:
    slate_date: Optional[_dt.date]
    block_minutes: int
    block_start_minutes: int
    total_minutes: float = 0.0
    utilization_pct: float = 0.0
    total_risk_score: float = 0.0
    utilization_weight: float = 0.0
    selected: List[ScoredCase] = field(default_factory=list)
    remaining: List[ScoredCase] = field(default_factory=list)

    @property
    def selected_ids(self) -> List[str]:
        return [c.case_id for c in self.selected]

    def to_frame(self) -> pd.DataFrame:
        """Selected cases, in slate order, one row per case."""
        cols = [
            "case_id", "source_key", "benchmark_weeks", "time_to_target_days",
            "estimated_duration_min", "surgeon_id", "procedure_name", "inpatient",
            "urgency_weight", "overdue_days", "risk_score", "value_score",
        ]
        rows = [{c: getattr(item, c) for c in cols} for item in self.selected]
        return pd.DataFrame(rows, columns=cols)
