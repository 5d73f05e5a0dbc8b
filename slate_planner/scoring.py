# scoring.py
from typing import Iterable, List, Sequence, Tuple

from .config import DEFAULT_URGENCY_WEIGHT, OVERDUE_SCALE_DAYS, URGENCY_WEIGHTS
from .models import CanonicalCase, ScoredCase


def urgency_weight(benchmark_weeks: int) -> int:
    return URGENCY_WEIGHTS.get(benchmark_weeks, DEFAULT_URGENCY_WEIGHT)


def risk_score(case: CanonicalCase) -> float:
    overdue = max(0, -case.time_to_target_days)
    return urgency_weight(case.benchmark_weeks) * (1 + overdue / OVERDUE_SCALE_DAYS)


def utilization_weight(risks: Iterable[float], block_minutes: int) -> float:
    """Pool risk per block minute; falls back to 1/block for a risk-free (or empty) pool."""
    total = sum(risks)
    return total / block_minutes if total > 0 else 1 / block_minutes


def score_with_weight(cases: Sequence[CanonicalCase], block_minutes: int) -> Tuple[List[ScoredCase], float]:
    """Score a candidate pool for one block; returns the cases and the pass's utilisation weight."""
    base = []
    for c in cases:
        base.append((c, urgency_weight(c.benchmark_weeks), max(0, -c.time_to_target_days), risk_score(c)))

    weight = utilization_weight((r for *_, r in base), block_minutes)
    scored = [
        ScoredCase.from_case(
            c,
            urgency_weight=uw,
            overdue_days=overdue,
            risk_score=risk,
            value_score=risk + weight * c.estimated_duration_min,
        )
        for c, uw, overdue, risk in base
    ]
    return scored, weight


def score(cases: Sequence[CanonicalCase], block_minutes: int) -> List[ScoredCase]:
    return score_with_weight(cases, block_minutes)[0]
