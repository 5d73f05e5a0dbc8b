# allocator.py
from typing import List, Sequence

from .blocks import block_minutes
from .models import CanonicalCase, SlateResult
from .optimizer import optimize_day
from .scoring import score


def allocate(cases: Sequence[CanonicalCase], dates: Sequence) -> List[SlateResult]:
    """
    Fill one slate per date, in order, from a single waitlist.

    Stops at the first date that selects nothing (later dates are not tried)
    or once the pool is empty. The last slate's `remaining` is the leftover
    pool rescored against the last processed date's block.
    """
    results: List[SlateResult] = []
    pool = list(cases)
    last_date = None

    for d in dates:
        if not pool:
            break
        result = optimize_day(pool, d)
        if not result.selected:
            break
        results.append(result)
        last_date = d
        taken = set(result.selected_ids)
        pool = [c for c in pool if c.case_id not in taken]

    if results:
        results[-1].remaining = score(pool, block_minutes(last_date))
    return results


def allocate_repeated(cases: Sequence[CanonicalCase], slate_date, max_slates: int) -> List[SlateResult]:
    """Up to `max_slates` consecutive slates all planned against the same date's block."""
    if max_slates <= 0:
        return []
    return allocate(cases, [slate_date] * int(max_slates))
