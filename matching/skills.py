import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from errors import ExtractionFault
from .vocabulary import SkillDictionary, get_dictionary

logger = logging.getLogger(__name__)


class SkillPartition(NamedTuple):
    matched: Tuple[str, ...]
    missing: Tuple[str, ...]


class SkillMatcher:
    """Detects vocabulary terms in text by case-insensitive substring containment."""

    def __init__(self, dictionary: Optional[SkillDictionary] = None):
        self.dictionary = dictionary or get_dictionary()

    def _find(self, text: str) -> Tuple[str, ...]:
        lowered = text.lower()
        return tuple(term for term in self.dictionary.terms() if term in lowered)

    def required_skills(self, job_text: str) -> Tuple[str, ...]:
        """Vocabulary terms named in the job description, in vocabulary order."""
        required = self._find(job_text or "")
        if not required:
            logger.warning("Job description mentions no known skill; every candidate will score 0")
        return required

    def candidate_skills(self, resume_text: str, file_name: Optional[str] = None) -> Tuple[str, ...]:
        if resume_text is None or not resume_text.strip():
            raise ExtractionFault(file_name, "resume text is empty")
        return self._find(resume_text)

    @staticmethod
    def partition(required: Sequence[str], candidate: Sequence[str]) -> SkillPartition:
        have = set(candidate)
        matched = tuple(s for s in required if s in have)
        missing = tuple(s for s in required if s not in have)
        return SkillPartition(matched, missing)
