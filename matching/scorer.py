from typing import Dict, Sequence
import math

from schemas import Verdict

HIGH_THRESHOLD = 80
MEDIUM_THRESHOLD = 60


def skill_coverage(matched: Sequence[str], missing: Sequence[str]) -> float:
    # Denominator floors at 1 so a job naming no known skill scores 0, not an error
    return len(matched) / max(len(matched) + len(missing), 1)


def score_from_ratio(ratio: float) -> int:
    # Half-up rounding: 12.5 -> 13
    score = int(math.floor(ratio * 100 + 0.5))
    return max(0, min(100, score))


def verdict_for(score: int) -> Verdict:
    if score >= HIGH_THRESHOLD:
        return Verdict.HIGH
    if score >= MEDIUM_THRESHOLD:
        return Verdict.MEDIUM
    return Verdict.LOW


def score_components(matched: Sequence[str], missing: Sequence[str]) -> Dict[str, float]:
    ratio = skill_coverage(matched, missing)
    return {
        "matched": len(matched),
        "missing": len(missing),
        "coverage": ratio,
        "final": score_from_ratio(ratio),
    }


class ScoringEngine:
    """Deterministic score and verdict from a matched/missing partition.

    Only skill coverage counts. Experience and education are reported next to
    the score but carry no weight.
    """

    def score(self, matched: Sequence[str], missing: Sequence[str]) -> int:
        return score_from_ratio(skill_coverage(matched, missing))

    def verdict(self, score: int) -> Verdict:
        return verdict_for(score)

    def evaluate(self, matched: Sequence[str], missing: Sequence[str]):
        score = self.score(matched, missing)
        return score, verdict_for(score)
