# blocks.py
from typing import Tuple

import pandas as pd

from .config import (
    DEFAULT_BLOCK_MINUTES,
    DEFAULT_BLOCK_START,
    REDUCED_BLOCK_MINUTES,
    REDUCED_BLOCK_START,
    REDUCED_OCCURRENCES,
    REDUCED_WEEKDAY,
)


def weekday_occurrence(d) -> int:
    """1-based count of d's weekday from the 1st of its month up to and including d."""
    ts = pd.Timestamp(d)
    return (int(ts.day) - 1) // 7 + 1


def is_reduced_day(d) -> bool:
    ts = pd.Timestamp(d)
    return ts.weekday() == REDUCED_WEEKDAY and weekday_occurrence(ts) in REDUCED_OCCURRENCES


def resolve_block(d) -> Tuple[int, int]:
    """
    Return (block_minutes, block_start_minutes) for a calendar day.
    - Default: 08:00–16:00 (480 minutes from minute 480).
    - 2nd/4th Tuesday of the month: 09:00–16:00 (420 minutes from minute 540).
    """
    if is_reduced_day(d):
        return REDUCED_BLOCK_MINUTES, REDUCED_BLOCK_START
    return DEFAULT_BLOCK_MINUTES, DEFAULT_BLOCK_START


def block_minutes(d) -> int:
    return resolve_block(d)[0]


def block_start_minutes(d) -> int:
    return resolve_block(d)[1]
