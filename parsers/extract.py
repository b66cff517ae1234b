import re
import logging
from typing import List

from schemas import ExtractedProfile

logger = logging.getLogger(__name__)

UNKNOWN_CANDIDATE = "Unknown Candidate"
EXPERIENCE_NOT_SPECIFIED = "Experience details not clearly specified"
EXPERIENCE_AVAILABLE = "Professional experience available"
EDUCATION_NOT_SPECIFIED = "Education details not clearly specified"

NAME_SCAN_LINES = 10
EDUCATION_MAX_CHARS = 100


class TextExtractor:
    """Heuristic extraction of candidate name, experience and education.

    Everything here is best-effort: the rules look at line shape and a few
    keywords, so a resume with an unusual layout gets a sentinel (or a wrong
    guess) rather than an error. None of the methods raise on empty or
    malformed input.
    """

    # Lines carrying these are document titles, not names
    TITLE_WORDS = ('resume', 'curriculum vitae', 'cv')
    # Section headings that look like names ("Contact Details", "Profile Summary")
    HEADER_WORDS = ('contact', 'phone', 'email', 'address', 'objective', 'summary', 'profile')
    NAME_PATTERN = re.compile(r'^[A-Z][a-zA-Z\s]{2,49}$')

    EXPERIENCE_PATTERNS = [
        re.compile(r'(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)', re.IGNORECASE),
        re.compile(r'experience[:\s]*(\d+)\+?\s*years?', re.IGNORECASE),
        re.compile(r'(\d+)\+?\s*years?\s*in', re.IGNORECASE),
    ]
    EXPERIENCE_SECTION_HINTS = ('work experience', 'professional experience', 'employment')

    EDUCATION_KEYWORDS = ('education', 'academic', 'qualification', 'degree', 'university', 'college', 'institute')
    EDUCATION_STOP_WORDS = ('experience', 'skills')

    @staticmethod
    def _non_blank_lines(text: str) -> List[str]:
        return [line.strip() for line in (text or "").splitlines() if line.strip()]

    def extract_name(self, text: str) -> str:
        """
        Guess the candidate name from the top of the resume

        Args:
            text: Raw resume text

        Returns:
            First line that looks like a 2-4 word name, else the first
            non-blank line, else ``"Unknown Candidate"``
        """
        lines = self._non_blank_lines(text)

        for line in lines[:NAME_SCAN_LINES]:
            lowered = line.lower()
            if len(line) < 3 or any(word in lowered for word in self.TITLE_WORDS):
                continue

            words = line.split()
            if not 2 <= len(words) <= 4 or not self.NAME_PATTERN.match(line):
                continue

            if any(header in lowered for header in self.HEADER_WORDS):
                continue
            return line

        return lines[0] if lines else UNKNOWN_CANDIDATE

    def extract_experience(self, text: str) -> str:
        """Summarize years of experience, or note that a work history exists"""
        text = text or ""
        for pattern in self.EXPERIENCE_PATTERNS:
            match = pattern.search(text)
            if match:
                return f"{match.group(1)}+ years experience"

        lowered = text.lower()
        if any(hint in lowered for hint in self.EXPERIENCE_SECTION_HINTS):
            return EXPERIENCE_AVAILABLE

        return EXPERIENCE_NOT_SPECIFIED

    def extract_education(self, text: str) -> str:
        """
        Collect the lines following the first education-looking line

        The keyword line itself is treated as a heading. Collection stops at
        the first line mentioning experience or skills, or once the summary
        grows past 100 characters.
        """
        collected = ""
        in_section = False

        for line in (text or "").splitlines():
            stripped = line.strip()
            lowered = line.lower()

            if not in_section:
                if any(keyword in lowered for keyword in self.EDUCATION_KEYWORDS):
                    in_section = True
                continue

            if not stripped:
                continue
            if any(word in lowered for word in self.EDUCATION_STOP_WORDS):
                break

            collected += stripped + " "
            if len(collected) > EDUCATION_MAX_CHARS:
                break

        return collected.strip() or EDUCATION_NOT_SPECIFIED

    def extract(self, text: str) -> ExtractedProfile:
        profile = ExtractedProfile(
            name=self.extract_name(text),
            experience=self.extract_experience(text),
            education=self.extract_education(text),
        )
        logger.debug(f"Extracted profile: {profile.name!r}, {profile.experience!r}")
        return profile
