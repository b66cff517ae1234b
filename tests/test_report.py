import io

import pandas as pd

from report import CSV_COLUMNS, batch_stats, filter_records, records_frame, to_csv
from schemas import BatchStats, ResumeIn, Verdict

JOB = "Python Docker Redis Kubernetes"


def _records(analyzer):
    return analyzer.run(JOB, [
        ResumeIn(file_name="alice.pdf", text="Alice Walker\nPython Docker Redis"),
        ResumeIn(file_name="bob.pdf", text="Bob Stone\nPython Docker Redis Kubernetes"),
        ResumeIn(file_name="dan.pdf", text=""),
        ResumeIn(file_name="erin.pdf", text="Erin Hale\nPython only"),
    ])


def test_batch_stats(analyzer):
    stats = batch_stats(_records(analyzer))
    # scores 100, 75, 65, 25 -> mean 66.25
    assert stats == BatchStats(total=4, high=1, medium=2, low=1, average_score=66, needs_review=1)


def test_batch_stats_empty():
    assert batch_stats([]) == BatchStats()


def test_average_rounds_half_up(analyzer):
    records = analyzer.run(JOB, [
        ResumeIn(file_name="a.txt", text="Python"),
        ResumeIn(file_name="b.txt", text="Erin Hale\nnothing listed"),
    ])
    # scores 25 and 0 -> 12.5
    assert batch_stats(records).average_score == 13


def test_filter_records(analyzer):
    records = _records(analyzer)
    assert [r.file_name for r in filter_records(records, verdict=Verdict.MEDIUM)] == ["alice.pdf", "dan.pdf"]
    assert [r.file_name for r in filter_records(records, min_score=70)] == ["bob.pdf", "alice.pdf"]
    assert filter_records(records) == records


def test_records_frame(analyzer):
    frame = records_frame(_records(analyzer))
    assert list(frame.columns) == CSV_COLUMNS
    assert list(frame["rank"]) == [1, 2, 3, 4]
    assert frame.iloc[1]["missing_skills"] == "kubernetes"
    assert frame.iloc[1]["matched_skills"] == "python; redis; docker"


def test_to_csv(analyzer):
    frame = pd.read_csv(io.StringIO(to_csv(_records(analyzer))))
    assert list(frame["file_name"]) == ["bob.pdf", "alice.pdf", "dan.pdf", "erin.pdf"]
    assert list(frame["verdict"]) == ["High", "Medium", "Medium", "Low"]


def test_records_frame_empty():
    assert list(records_frame([]).columns) == CSV_COLUMNS
