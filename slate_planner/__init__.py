from .allocator import allocate, allocate_repeated
from .blocks import block_minutes, block_start_minutes, resolve_block
from .case_ids import hash_case_id
from .models import CanonicalCase, ScoredCase, SlateResult
from .normalizer import csv_template, normalize
from .optimizer import knapsack_select, optimize_day
from .priority import PRIORITY_MODES, filter_by_surgeon, sort_by_priority, surgeons
from .scoring import score, score_with_weight
from .timing import hhmm_from_minutes, timed_schedule, timed_slate

__all__ = [
    "CanonicalCase", "ScoredCase", "SlateResult",
    "resolve_block", "block_minutes", "block_start_minutes",
    "normalize", "csv_template", "hash_case_id",
    "score", "score_with_weight",
    "knapsack_select", "optimize_day",
    "allocate", "allocate_repeated",
    "PRIORITY_MODES", "sort_by_priority", "surgeons", "filter_by_surgeon",
    "hhmm_from_minutes", "timed_slate", "timed_schedule",
]
