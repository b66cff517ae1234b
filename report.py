import math
from typing import List, Optional, Sequence

import pandas as pd

from schemas import AnalysisRecord, BatchStats, Verdict

CSV_COLUMNS = [
    "rank", "id", "candidate_name", "file_name", "score", "verdict",
    "matched_skills", "missing_skills", "experience", "education",
    "recommendations", "needs_review", "analysis_timestamp",
]


def batch_stats(records: Sequence[AnalysisRecord]) -> BatchStats:
    """Per-verdict counts and the rounded average score of a finished batch."""
    if not records:
        return BatchStats()

    scores = pd.Series([r.score for r in records], dtype="int64")
    verdicts = pd.Series([r.verdict.value for r in records]).value_counts()
    return BatchStats(
        total=len(records),
        high=int(verdicts.get(Verdict.HIGH.value, 0)),
        medium=int(verdicts.get(Verdict.MEDIUM.value, 0)),
        low=int(verdicts.get(Verdict.LOW.value, 0)),
        average_score=int(math.floor(scores.mean() + 0.5)),
        needs_review=sum(1 for r in records if r.needs_review),
    )


def filter_records(
    records: Sequence[AnalysisRecord],
    verdict: Optional[Verdict] = None,
    min_score: Optional[int] = None,
) -> List[AnalysisRecord]:
    """Keep records matching the verdict and score floor, order unchanged."""
    kept = []
    for r in records:
        if verdict is not None and r.verdict != verdict:
            continue
        if min_score is not None and r.score < min_score:
            continue
        kept.append(r)
    return kept


def records_frame(records: Sequence[AnalysisRecord]) -> pd.DataFrame:
    rows = []
    for rank, r in enumerate(records, start=1):
        rows.append({
            "rank": rank,
            "id": r.id,
            "candidate_name": r.candidate_name,
            "file_name": r.file_name,
            "score": r.score,
            "verdict": r.verdict.value,
            "matched_skills": "; ".join(r.matched_skills),
            "missing_skills": "; ".join(r.missing_skills),
            "experience": r.experience,
            "education": r.education,
            "recommendations": "; ".join(r.recommendations),
            "needs_review": r.needs_review,
            "analysis_timestamp": r.analysis_timestamp.isoformat(),
        })
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def to_csv(records: Sequence[AnalysisRecord]) -> str:
    return records_frame(records).to_csv(index=False)
