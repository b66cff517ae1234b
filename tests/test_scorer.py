import pytest

from matching.scorer import ScoringEngine, score_components, score_from_ratio, skill_coverage, verdict_for
from schemas import Verdict


@pytest.mark.parametrize("score,verdict", [
    (100, Verdict.HIGH),
    (80, Verdict.HIGH),
    (79, Verdict.MEDIUM),
    (60, Verdict.MEDIUM),
    (59, Verdict.LOW),
    (0, Verdict.LOW),
])
def test_verdict_boundaries(score, verdict):
    assert verdict_for(score) == verdict


def test_coverage_with_no_required_skills():
    assert skill_coverage([], []) == 0.0
    assert ScoringEngine().score([], []) == 0


def test_half_up_rounding():
    assert score_from_ratio(1 / 8) == 13
    assert score_from_ratio(2 / 3) == 67
    assert score_from_ratio(0.5) == 50


def test_score_is_clamped():
    assert score_from_ratio(1.5) == 100
    assert score_from_ratio(-0.2) == 0


def test_evaluate_example():
    score, verdict = ScoringEngine().evaluate(["react", "aws"], ["node.js", "docker"])
    assert score == 50
    assert verdict == Verdict.LOW


def test_evaluate_full_match():
    assert ScoringEngine().evaluate(["python"], []) == (100, Verdict.HIGH)


def test_score_components():
    comps = score_components(["python", "redis", "docker"], ["kubernetes"])
    assert comps == {"matched": 3, "missing": 1, "coverage": 0.75, "final": 75}
