import datetime as _dt

import pytest

from slate_planner import CanonicalCase
from slate_planner.normalizer import csv_template

# October 2026: Tuesdays fall on the 6th, 13th, 20th and 27th
FIRST_TUESDAY = _dt.date(2026, 10, 6)
SECOND_TUESDAY = _dt.date(2026, 10, 13)


@pytest.fixture
def template_text() -> str:
    return csv_template()


def make_case(case_id: str, benchmark: int = 12, ttt: int = 10, duration: float = 60, **kw) -> CanonicalCase:
    return CanonicalCase(
        case_id=case_id,
        source_key=case_id,
        benchmark_weeks=benchmark,
        time_to_target_days=ttt,
        estimated_duration_min=duration,
        **kw,
    )
