import re
import time
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import config
from errors import ExtractionFault
from parsers.extract import TextExtractor
from schemas import AnalysisRecord, ResumeIn, Verdict
from .recommend import RecommendationGenerator
from .scorer import ScoringEngine, score_components
from .skills import SkillMatcher
from .vocabulary import SkillDictionary

logger = logging.getLogger(__name__)

FALLBACK_MATCHED = ["Basic qualifications assumed"]
FALLBACK_MISSING = ["Manual review needed"]
FALLBACK_RECOMMENDATIONS = ["Manual review recommended", "Verify qualifications directly"]
FALLBACK_EXPERIENCE = "Experience details need verification"
FALLBACK_EDUCATION = "Education details need verification"

DOCUMENT_SUFFIX = re.compile(r'\.(pdf|docx?|txt)$', re.IGNORECASE)


class BatchState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Ok:
    record: AnalysisRecord


@dataclass(frozen=True)
class Err:
    fault: ExtractionFault


Result = Union[Ok, Err]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def name_from_file(file_name: str, record_id: int) -> str:
    """Readable candidate label for resumes whose text could not be used."""
    base = DOCUMENT_SUFFIX.sub('', file_name or '')
    base = re.sub(r'[-_]+', ' ', base)
    base = re.sub(r'\s+', ' ', base).strip()
    return base or f"Candidate {record_id}"


class BatchAnalyzer:
    """Runs every resume of a batch through extraction, matching and scoring.

    A failure in one resume never aborts the batch: it is turned into a
    fallback record flagged for manual review. Output is sorted by score
    (highest first), equal scores by input order.
    """

    def __init__(
        self,
        dictionary: Optional[SkillDictionary] = None,
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None,
        fallback_score: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.matcher = SkillMatcher(dictionary)
        self.extractor = TextExtractor()
        self.engine = ScoringEngine()
        self.recommender = RecommendationGenerator()

        self.max_workers = max(1, max_workers if max_workers is not None else config.max_workers())
        self.timeout = config.check_timeout(timeout) if timeout is not None else config.batch_timeout()
        self.fallback_score = (
            config.check_fallback_score(fallback_score) if fallback_score is not None else config.fallback_score()
        )
        self.clock = clock or _utcnow

        self.state = BatchState.IDLE
        self.required_skills: Tuple[str, ...] = ()

    def analyze_resume(self, record_id: int, resume: ResumeIn, required: Sequence[str]) -> AnalysisRecord:
        if resume.decode_error:
            raise ExtractionFault(resume.file_name, resume.decode_error)

        candidate = self.matcher.candidate_skills(resume.text, resume.file_name)
        profile = self.extractor.extract(resume.text)
        matched, missing = self.matcher.partition(required, candidate)
        score, verdict = self.engine.evaluate(matched, missing)
        logger.debug(f"Scored {resume.file_name}: {score_components(matched, missing)}")

        return AnalysisRecord(
            id=record_id,
            candidate_name=profile.name,
            file_name=resume.file_name,
            score=score,
            verdict=verdict,
            analysis_timestamp=self.clock(),
            matched_skills=list(matched),
            missing_skills=list(missing),
            recommendations=self.recommender.generate(missing),
            experience=profile.experience,
            education=profile.education,
        )

    def fallback_record(self, record_id: int, resume: ResumeIn) -> AnalysisRecord:
        return AnalysisRecord(
            id=record_id,
            candidate_name=name_from_file(resume.file_name, record_id),
            file_name=resume.file_name,
            score=self.fallback_score,
            verdict=Verdict.MEDIUM,
            analysis_timestamp=self.clock(),
            matched_skills=list(FALLBACK_MATCHED),
            missing_skills=list(FALLBACK_MISSING),
            recommendations=list(FALLBACK_RECOMMENDATIONS),
            experience=FALLBACK_EXPERIENCE,
            education=FALLBACK_EDUCATION,
            needs_review=True,
        )

    def _attempt(self, record_id: int, resume: ResumeIn, required: Sequence[str]) -> Result:
        try:
            return Ok(self.analyze_resume(record_id, resume, required))
        except ExtractionFault as e:
            logger.warning(f"Falling back to manual review for {e}")
            return Err(e)
        except Exception as e:
            logger.error(f"Unexpected error analyzing {resume.file_name}: {e}", exc_info=True)
            return Err(ExtractionFault(resume.file_name, f"unexpected error: {e}"))

    def _resolve(self, record_id: int, resume: ResumeIn, result: Result) -> AnalysisRecord:
        if isinstance(result, Ok):
            return result.record
        return self.fallback_record(record_id, resume)

    def _run_sequential(self, resumes: Sequence[ResumeIn], required: Sequence[str]) -> Dict[int, Result]:
        return {
            index + 1: self._attempt(index + 1, resume, required)
            for index, resume in enumerate(resumes)
        }

    def _run_pooled(self, resumes: Sequence[ResumeIn], required: Sequence[str]) -> Dict[int, Result]:
        results: Dict[int, Result] = {}
        pool = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="resume")
        try:
            futures = {
                pool.submit(self._attempt, index + 1, resume, required): index + 1
                for index, resume in enumerate(resumes)
            }
            done, not_done = wait(futures, timeout=self.timeout)
            for future in done:
                results[futures[future]] = future.result()
            for future in not_done:
                future.cancel()
                record_id = futures[future]
                results[record_id] = Err(
                    ExtractionFault(resumes[record_id - 1].file_name, "analysis did not finish within the batch time budget")
                )
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        return results

    def run(self, job_description: str, resumes: Sequence[ResumeIn]) -> List[AnalysisRecord]:
        """
        Analyze a batch of resumes against one job description

        Args:
            job_description: Job description text
            resumes: Decoded resumes, in upload order

        Returns:
            One record per resume, sorted by score descending then id ascending
        """
        self.state = BatchState.RUNNING
        started = time.monotonic()
        logger.info(f"Starting batch of {len(resumes)} resume(s) with {self.max_workers} worker(s)")

        self.required_skills = self.matcher.required_skills(job_description)
        logger.info(f"Required skills: {', '.join(self.required_skills) or '-'}")

        # A time budget needs worker threads so that a running item can be abandoned
        if self.timeout is None and (self.max_workers == 1 or len(resumes) <= 1):
            results = self._run_sequential(resumes, self.required_skills)
        else:
            results = self._run_pooled(resumes, self.required_skills)

        records = [
            self._resolve(index + 1, resume, results[index + 1])
            for index, resume in enumerate(resumes)
        ]
        records.sort(key=lambda r: (-r.score, r.id))

        self.state = BatchState.COMPLETED
        review = sum(1 for r in records if r.needs_review)
        logger.info(
            f"Batch completed: {len(records)} record(s), {review} flagged for review, "
            f"{time.monotonic() - started:.2f}s"
        )
        return records


def analyze_batch(job_description: str, resumes: Sequence[Union[ResumeIn, dict]], **kwargs) -> List[AnalysisRecord]:
    """Convenience entry point: analyze one batch with a fresh analyzer."""
    items = [r if isinstance(r, ResumeIn) else ResumeIn.model_validate(r) for r in resumes]
    return BatchAnalyzer(**kwargs).run(job_description, items)
