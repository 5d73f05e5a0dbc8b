# optimizer.py
from typing import List, Sequence

import numpy as np

from .blocks import resolve_block
from .models import CanonicalCase, ScoredCase, SlateResult
from .normalizer import round_half_up
from .scoring import score_with_weight


# =========================
# 0/1 knapsack
# =========================
def knapsack_select(weights: Sequence[int], values: Sequence[float], capacity: int) -> List[int]:
    """
    Indices (ascending) of a value-maximising subset with total weight <= capacity.

    keep[i, w] records that item i strictly improved the best value at capacity w;
    on equal values the earlier item's solution stands. Items heavier than the
    capacity (or with negative weight) are never taken.
    """
    n = len(weights)
    if n == 0 or capacity < 0:
        return []

    dp = np.zeros(capacity + 1, dtype=float)
    keep = np.zeros((n, capacity + 1), dtype=bool)

    for i in range(n):
        wt = int(weights[i])
        if wt < 0 or wt > capacity:
            continue
        # candidates read the previous row only, so each item is used at most once
        cand = dp[: capacity + 1 - wt] + float(values[i])
        improved = cand > dp[wt:]
        keep[i, wt:] = improved
        dp[wt:] = np.where(improved, cand, dp[wt:])

    chosen = []
    w = capacity
    for i in range(n - 1, -1, -1):
        if keep[i, w]:
            chosen.append(i)
            w -= int(weights[i])
    return sorted(chosen)


def slate_order(cases: Sequence[ScoredCase]) -> List[ScoredCase]:
    # highest risk first, then most overdue
    return sorted(cases, key=lambda c: (-c.risk_score, c.time_to_target_days))


# =========================
# One day
# =========================
def optimize_day(cases: Sequence[CanonicalCase], slate_date) -> SlateResult:
    block, start = resolve_block(slate_date)
    scored, util_weight = score_with_weight(cases, block)

    durations = [round_half_up(c.estimated_duration_min) for c in scored]
    values = [c.value_score for c in scored]
    picked = set(knapsack_select(durations, values, block))

    selected = slate_order([c for i, c in enumerate(scored) if i in picked])
    remaining = [c for i, c in enumerate(scored) if i not in picked]

    total_minutes = sum(c.estimated_duration_min for c in selected)
    return SlateResult(
        slate_date=slate_date,
        block_minutes=block,
        block_start_minutes=start,
        total_minutes=total_minutes,
        utilization_pct=(total_minutes / block * 100) if block > 0 else 0.0,
        total_risk_score=sum(c.risk_score for c in selected),
        utilization_weight=util_weight,
        selected=selected,
        remaining=remaining,
    )
