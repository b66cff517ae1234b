from typing import List, Sequence

GAP_RECOMMENDATIONS = [
    "Highlight relevant project experience in portfolio",
    "Consider adding industry certifications",
]

STRONG_MATCH_RECOMMENDATIONS = [
    "Excellent skill match - focus on showcasing project outcomes",
    "Consider highlighting leadership and team collaboration experience",
    "Strong technical background - emphasize problem-solving achievements",
]

MAX_NAMED_GAPS = 2


class RecommendationGenerator:
    """Fixed-order suggestions that depend only on whether skills are missing."""

    def generate(self, missing: Sequence[str]) -> List[str]:
        if not missing:
            return list(STRONG_MATCH_RECOMMENDATIONS)

        named = ", ".join(missing[:MAX_NAMED_GAPS])
        return [f"Consider developing skills in: {named}"] + GAP_RECOMMENDATIONS
