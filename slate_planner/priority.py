# priority.py
from typing import List, Optional, Sequence, TypeVar

from .config import BENCHMARK_WEEKS
from .models import CanonicalCase

PRIORITY_MODES = ("ttt", "urgency_then_ttt")

C = TypeVar("C", bound=CanonicalCase)


def _class_rank(benchmark_weeks: int) -> int:
    try:
        return BENCHMARK_WEEKS.index(benchmark_weeks)
    except ValueError:
        return len(BENCHMARK_WEEKS)


def sort_by_priority(cases: Sequence[C], mode: str = "urgency_then_ttt") -> List[C]:
    """
    Display ordering for a waitlist or slate; never changes which cases get picked.
      - 'ttt': soonest (or most overdue) time-to-target first
      - 'urgency_then_ttt': benchmark class (2w first), then time-to-target
    """
    if mode == "ttt":
        return sorted(cases, key=lambda c: c.time_to_target_days)
    if mode == "urgency_then_ttt":
        return sorted(cases, key=lambda c: (_class_rank(c.benchmark_weeks), c.time_to_target_days))
    raise ValueError(f"Unknown priority mode '{mode}' (expected one of: {', '.join(PRIORITY_MODES)})")


def surgeons(cases: Sequence[CanonicalCase]) -> List[str]:
    return sorted({c.surgeon_id for c in cases})


def filter_by_surgeon(cases: Sequence[C], surgeon_id: Optional[str]) -> List[C]:
    if not surgeon_id:
        return list(cases)
    return [c for c in cases if c.surgeon_id == surgeon_id]
