from typing import Optional


class ResumeMatcherError(Exception):
    """Base class for all analyzer errors."""


class ExtractionFault(ResumeMatcherError):
    """Resume text could not be used for analysis.

    Raised per resume and recovered by the batch analyzer, which substitutes
    a fallback record flagged for manual review.
    """

    def __init__(self, file_name: Optional[str], reason: str):
        self.file_name = file_name
        self.reason = reason
        label = file_name or "<unnamed>"
        super().__init__(f"{label}: {reason}")


class ConfigurationFault(ResumeMatcherError):
    """Malformed vocabulary or settings. Fatal, the batch cannot run."""
