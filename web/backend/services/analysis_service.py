#!/usr/bin/env python3
"""
Analysis service - matches resumes against job descriptions and generates
interview questions.
"""

import logging
from typing import Tuple

from pydantic import ValidationError

from core.analysis import AnalysisProvider, AnalysisProviderError
from storage import (
    Storage,
    Resume,
    JobDescription,
    AnalysisResult,
    InsertAnalysisResult,
    InterviewQuestions,
    InsertInterviewQuestions,
    ResumeWithAnalysis,
)
from ..exceptions import (
    ResumeNotFoundException,
    JobDescriptionNotFoundException,
    InterviewQuestionsNotFoundException,
)

logger = logging.getLogger(__name__)


class AnalysisService:
    """Service for analysis results and interview questions."""

    def __init__(self, storage: Storage, provider: AnalysisProvider):
        self.storage = storage
        self.provider = provider

    def _load_pair(self, resume_id: int, job_description_id: int) -> Tuple[Resume, JobDescription]:
        """
        Fetch both records, analysing either one on the spot if it has no analysis yet.

        Raises:
            ResumeNotFoundException: If the resume does not exist.
            JobDescriptionNotFoundException: If the job description does not exist.
        """
        resume = self.storage.get_resume(resume_id)
        if resume is None:
            raise ResumeNotFoundException(f"Resume {resume_id} not found")

        job_description = self.storage.get_job_description(job_description_id)
        if job_description is None:
            raise JobDescriptionNotFoundException(f"Job description {job_description_id} not found")

        if resume.analyzed_data is None:
            resume = self.storage.update_resume_analysis(
                resume_id, self.provider.analyze_resume(resume.content)
            ) or resume

        if job_description.analyzed_data is None:
            job_description = self.storage.update_job_description_analysis(
                job_description_id,
                self.provider.analyze_job_description(job_description.title, job_description.description)
            ) or job_description

        return resume, job_description

    def analyze(self, resume_id: int, job_description_id: int) -> AnalysisResult:
        """Compute and store a new analysis result for the pair."""
        resume, job_description = self._load_pair(resume_id, job_description_id)
        return self._create_analysis(resume, job_description)

    def _create_analysis(self, resume: Resume, job_description: JobDescription) -> AnalysisResult:
        match = self.provider.compute_match(resume.analyzed_data or {}, job_description.analyzed_data or {})

        try:
            payload = InsertAnalysisResult(
                resume_id=resume.id,
                job_description_id=job_description.id,
                **match
            )
        except ValidationError as e:
            raise AnalysisProviderError(f"Match result has an invalid shape: {e.error_count()} errors") from e

        result = self.storage.create_analysis_result(payload)
        logger.info(
            f"Resume {resume.id} matches job description {job_description.id} "
            f"at {result.match_percentage:.0f}%"
        )
        return result

    def get_analysis(self, resume_id: int, job_description_id: int) -> ResumeWithAnalysis:
        """
        Resume plus latest analysis and questions for the pair.

        Raises:
            ResumeNotFoundException: If the resume does not exist.
        """
        composite = self.storage.get_resume_with_latest_analysis_and_questions(resume_id, job_description_id)
        if composite.resume is None:
            raise ResumeNotFoundException(f"Resume {resume_id} not found")
        return composite

    def generate_interview_questions(self, resume_id: int, job_description_id: int) -> InterviewQuestions:
        """Generate and store interview questions, computing the match first if none exists."""
        resume, job_description = self._load_pair(resume_id, job_description_id)

        analysis = self.storage.get_analysis_result_by_resume_and_job(resume_id, job_description_id)
        if analysis is None:
            analysis = self._create_analysis(resume, job_description)

        questions = self.provider.generate_interview_questions(
            resume.analyzed_data or {},
            job_description.analyzed_data or {},
            analysis.model_dump(by_alias=True, mode="json"),
        )

        try:
            payload = InsertInterviewQuestions(
                resume_id=resume_id,
                job_description_id=job_description_id,
                **questions
            )
        except ValidationError as e:
            raise AnalysisProviderError(f"Interview questions have an invalid shape: {e.error_count()} errors") from e

        record = self.storage.create_interview_questions(payload)
        logger.info(f"Generated interview questions {record.id} for resume {resume_id} / job {job_description_id}")
        return record

    def get_interview_questions(self, resume_id: int, job_description_id: int) -> InterviewQuestions:
        """
        Raises:
            InterviewQuestionsNotFoundException: If no questions exist for the pair.
        """
        questions = self.storage.get_interview_question_by_resume_and_job(resume_id, job_description_id)
        if questions is None:
            raise InterviewQuestionsNotFoundException(
                f"No interview questions for resume {resume_id} and job description {job_description_id}"
            )
        return questions
