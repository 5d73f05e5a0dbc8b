import pytest

from conftest import make_case
from slate_planner.scoring import risk_score, score, score_with_weight, urgency_weight, utilization_weight


@pytest.mark.parametrize("benchmark, weight", [(2, 5), (4, 4), (6, 3), (12, 2), (26, 1), (8, 1)])
def test_urgency_weight(benchmark, weight):
    assert urgency_weight(benchmark) == weight


def test_risk_grows_with_overdue_days_only():
    assert risk_score(make_case("A", benchmark=2, ttt=10)) == 5
    assert risk_score(make_case("A", benchmark=2, ttt=0)) == 5
    assert risk_score(make_case("A", benchmark=6, ttt=-4)) == pytest.approx(3.857142857)
    assert risk_score(make_case("A", benchmark=12, ttt=-14)) == pytest.approx(4)


def test_utilization_weight_falls_back_for_empty_pool():
    assert utilization_weight([], 480) == pytest.approx(1 / 480)
    assert utilization_weight([0.0, 0.0], 420) == pytest.approx(1 / 420)
    assert utilization_weight([5, 3], 480) == pytest.approx(8 / 480)


def test_score_attaches_components():
    cases = [make_case("A", benchmark=2, ttt=10, duration=90), make_case("B", benchmark=6, ttt=-4, duration=120)]
    scored, weight = score_with_weight(cases, 480)

    assert weight == pytest.approx((5 + 3.857142857) / 480)
    a, b = scored
    assert (a.urgency_weight, a.overdue_days, a.risk_score) == (5, 0, 5)
    assert (b.urgency_weight, b.overdue_days) == (3, 4)
    assert a.value_score == pytest.approx(5 + weight * 90)
    assert b.value_score == pytest.approx(b.risk_score + weight * 120)


def test_score_keeps_canonical_fields_and_order():
    cases = [make_case(f"C{i}", surgeon_id="DR7", flags={"osa": True}) for i in range(3)]
    scored = score(cases, 480)
    assert [s.case_id for s in scored] == ["C0", "C1", "C2"]
    assert all(s.surgeon_id == "DR7" and s.flags == {"osa": True} for s in scored)


def test_rescoring_a_scored_case_replaces_scores():
    first = score([make_case("A", duration=100)], 480)
    again = score(first, 420)
    assert again[0].value_score == pytest.approx(2 + 2 / 420 * 100)


def test_score_empty():
    assert score_with_weight([], 480) == ([], pytest.approx(1 / 480))


def test_scored_flags_are_not_shared_with_source_case():
    case = make_case("A", flags={"osa": True})
    first, second = score([case], 480)[0], score([case], 420)[0]
    first.flags["osa"] = False
    assert case.flags == {"osa": True}
    assert second.flags == {"osa": True}
    assert first.flags is not case.flags
