"""Service layer for the API routers."""

from .resume_service import ResumeService
from .job_description_service import JobDescriptionService
from .analysis_service import AnalysisService

__all__ = [
    'ResumeService',
    'JobDescriptionService',
    'AnalysisService',
]
