"""
Entity records shared by every Storage implementation.

Records are pydantic models with snake_case attributes and camelCase JSON
aliases. The ``Insert*`` models carry only caller-supplied fields; ids and
``created`` timestamps are always assigned by the store.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class EntityModel(BaseModel):
    """Base for all records: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- Users ---

class InsertUser(EntityModel):
    username: str
    password: str


class User(InsertUser):
    id: int


# --- Resumes ---

class InsertResume(EntityModel):
    filename: str
    file_size: int = Field(ge=0)
    file_type: str
    content: str
    analyzed_data: Optional[Dict[str, Any]] = None
    session_id: Optional[str] = None


class Resume(InsertResume):
    id: int
    created: datetime


# --- Job descriptions ---

class InsertJobDescription(EntityModel):
    title: str
    description: str
    analyzed_data: Optional[Dict[str, Any]] = None


class JobDescription(InsertJobDescription):
    id: int
    created: datetime


# --- Analysis results ---

class MatchedSkill(EntityModel):
    skill: str
    match_percentage: float = Field(ge=0, le=100)


class InsertAnalysisResult(EntityModel):
    resume_id: int
    job_description_id: int
    match_percentage: float = Field(ge=0, le=100)
    matched_skills: List[MatchedSkill] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    candidate_strengths: List[str] = Field(default_factory=list)
    candidate_weaknesses: List[str] = Field(default_factory=list)

    @field_validator("match_percentage")
    @classmethod
    def round_match_percentage(cls, value: float) -> float:
        # Stored as NUMERIC(5, 2)
        return round(value, 2)


class AnalysisResult(InsertAnalysisResult):
    id: int
    created: datetime


# --- Interview questions ---

class InsertInterviewQuestions(EntityModel):
    resume_id: int
    job_description_id: int
    technical_questions: List[str] = Field(default_factory=list)
    experience_questions: List[str] = Field(default_factory=list)
    skill_gap_questions: List[str] = Field(default_factory=list)
    inclusion_questions: List[str] = Field(default_factory=list)


class InterviewQuestions(InsertInterviewQuestions):
    id: int
    created: datetime


# --- Composite ---

class ResumeWithAnalysis(EntityModel):
    """Independent lookups for one (resume, job description) pair; any part may be None."""
    resume: Optional[Resume] = None
    analysis: Optional[AnalysisResult] = None
    questions: Optional[InterviewQuestions] = None


def latest(records: List[Any]) -> Optional[Any]:
    """Return the most recently created record, ties broken by highest id."""
    if not records:
        return None
    return max(records, key=lambda r: (r.created, r.id))
