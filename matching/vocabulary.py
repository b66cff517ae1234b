import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import config
from errors import ConfigurationFault

logger = logging.getLogger(__name__)

# Category -> terms. Category order and term order define vocabulary order.
DEFAULT_VOCABULARY: Dict[str, List[str]] = {
    'javascript_ecosystem': [
        'javascript', 'typescript', 'react', 'angular', 'vue', 'node.js', 'express'
    ],
    'programming_languages': [
        'python', 'java', 'c++', 'c#', 'go', 'rust', 'php', 'ruby'
    ],
    'frontend': [
        'html', 'css', 'sass', 'less', 'tailwind', 'bootstrap'
    ],
    'databases': [
        'mongodb', 'mysql', 'postgresql', 'sqlite', 'redis'
    ],
    'cloud_devops': [
        'aws', 'azure', 'gcp', 'docker', 'kubernetes', 'terraform'
    ],
    'version_control_ci': [
        'git', 'github', 'gitlab', 'jenkins', 'ci/cd'
    ],
    'data_ml': [
        'machine learning', 'ai', 'tensorflow', 'pytorch', 'pandas', 'numpy'
    ],
    'design': [
        'figma', 'sketch', 'photoshop', 'illustrator'
    ],
    'process_tools': [
        'agile', 'scrum', 'jira', 'confluence'
    ],
}


class SkillDictionary:
    """Fixed, ordered vocabulary of known skill terms.

    Terms are stored lowercase and stripped. A term listed twice keeps its
    first position and first category. There are no mutation operations.
    """

    def __init__(self, categories: Mapping[str, Sequence[str]]):
        if not isinstance(categories, Mapping) or not categories:
            raise ConfigurationFault("Skill vocabulary must be a non-empty mapping of category -> terms")

        self._category: Dict[str, str] = {}
        for category, terms in categories.items():
            if not isinstance(category, str) or not category.strip():
                raise ConfigurationFault(f"Invalid skill category name: {category!r}")
            if isinstance(terms, str) or not isinstance(terms, Sequence) or not terms:
                raise ConfigurationFault(f"Category {category!r} must list at least one term")
            for term in terms:
                normalized = self.normalize(term)
                if normalized in self._category:
                    logger.debug(f"Duplicate skill term ignored: {normalized}")
                    continue
                self._category[normalized] = category

        self._terms: Tuple[str, ...] = tuple(self._category)

    @staticmethod
    def normalize(term) -> str:
        if not isinstance(term, str):
            raise ConfigurationFault(f"Skill term must be a string, got {type(term).__name__}")
        normalized = term.strip().lower()
        if not normalized:
            raise ConfigurationFault("Skill term must not be empty")
        return normalized

    @classmethod
    def from_json(cls, path: str) -> "SkillDictionary":
        """Load a vocabulary file shaped like ``{"category": ["term", ...]}``."""
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigurationFault(f"Unable to load skill vocabulary from {path}: {e}") from e
        return cls(payload)

    def terms(self) -> Tuple[str, ...]:
        return self._terms

    def category_of(self, term: str) -> Optional[str]:
        return self._category.get(term.strip().lower())

    def categorized(self, terms: Iterable[str]) -> Dict[str, List[str]]:
        """Group terms by category, in vocabulary order. Unknown terms are skipped."""
        wanted = {t.strip().lower() for t in terms}
        grouped: Dict[str, List[str]] = {}
        for term in self._terms:
            if term in wanted:
                grouped.setdefault(self._category[term], []).append(term)
        return grouped

    def __contains__(self, term) -> bool:
        return isinstance(term, str) and term.strip().lower() in self._category

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)


@lru_cache(maxsize=1)
def get_dictionary() -> SkillDictionary:
    """Process-wide vocabulary, built on first use."""
    path = config.vocabulary_path()
    if path:
        logger.info(f"Loading skill vocabulary from {path}")
        dictionary = SkillDictionary.from_json(path)
    else:
        dictionary = SkillDictionary(DEFAULT_VOCABULARY)
    logger.info(f"Skill vocabulary ready with {len(dictionary)} terms")
    return dictionary
