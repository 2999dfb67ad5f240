#!/usr/bin/env python3
"""
Analysis endpoints - match resumes to job descriptions and generate
interview questions.
"""

import logging
from typing import Tuple

from fastapi import APIRouter, Depends

from core.analysis import AnalysisProvider
from storage import Storage, AnalysisResult, InterviewQuestions, ResumeWithAnalysis
from ..dependencies import get_storage, get_analysis_provider
from ..services.analysis_service import AnalysisService
from ..utils import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


def get_analysis_service(
    storage: Storage = Depends(get_storage),
    provider: AnalysisProvider = Depends(get_analysis_provider)
) -> AnalysisService:
    """Dependency to get analysis service."""
    return AnalysisService(storage, provider)


def _parse_pair(resume_id: str, job_description_id: str) -> Tuple[int, int]:
    return parse_id(resume_id, "resume_id"), parse_id(job_description_id, "job_description_id")


@router.post("/analyze/{resume_id}/{job_description_id}", response_model=AnalysisResult, status_code=201)
def analyze(
    resume_id: str,
    job_description_id: str,
    service: AnalysisService = Depends(get_analysis_service)
):
    """
    Match a resume against a job description and store the result.

    Each call stores a new result; the newest one is the current match.
    """
    return service.analyze(*_parse_pair(resume_id, job_description_id))


@router.get("/analyze/{resume_id}/{job_description_id}", response_model=ResumeWithAnalysis)
def get_analysis(
    resume_id: str,
    job_description_id: str,
    service: AnalysisService = Depends(get_analysis_service)
):
    """
    Get the resume with the latest analysis and interview questions for the pair.

    ``analysis`` and ``questions`` are null when none exist yet.
    """
    return service.get_analysis(*_parse_pair(resume_id, job_description_id))


@router.post(
    "/interview-questions/{resume_id}/{job_description_id}",
    response_model=InterviewQuestions,
    status_code=201
)
def generate_interview_questions(
    resume_id: str,
    job_description_id: str,
    service: AnalysisService = Depends(get_analysis_service)
):
    """
    Generate interview questions for the pair.

    Uses the latest analysis, computing one first when the pair has none.
    """
    return service.generate_interview_questions(*_parse_pair(resume_id, job_description_id))


@router.get("/interview-questions/{resume_id}/{job_description_id}", response_model=InterviewQuestions)
def get_interview_questions(
    resume_id: str,
    job_description_id: str,
    service: AnalysisService = Depends(get_analysis_service)
):
    """Get the latest interview questions for the pair."""
    return service.get_interview_questions(*_parse_pair(resume_id, job_description_id))
