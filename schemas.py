from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Verdict(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# One resume as handed over by the ingestion layer
class ResumeIn(BaseModel):
    file_name: str
    text: str = ""
    decode_error: Optional[str] = None


# Signals pulled out of resume text
class ExtractedProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    experience: str
    education: str


# Result for a single resume, immutable once built
class AnalysisRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    candidate_name: str = Field(min_length=1)
    file_name: str
    score: int = Field(ge=0, le=100)
    verdict: Verdict
    analysis_timestamp: datetime
    matched_skills: List[str] = []
    missing_skills: List[str] = []
    recommendations: List[str] = Field(min_length=1)
    experience: str
    education: str
    needs_review: bool = False


# Batch input
class BatchRequest(BaseModel):
    job_description: str
    resumes: List[ResumeIn] = []


# Aggregates derived by the caller from a finished batch
class BatchStats(BaseModel):
    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    average_score: int = 0
    needs_review: int = 0


class BatchResponse(BaseModel):
    required_skills: List[str] = []
    records: List[AnalysisRecord] = []
    stats: BatchStats
