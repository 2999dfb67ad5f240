#!/usr/bin/env python3
"""
Job description service - business logic for job description operations.
"""

import logging
from typing import List, Optional

from core.analysis import AnalysisProvider
from storage import Storage, JobDescription, InsertJobDescription
from ..exceptions import JobDescriptionNotFoundException
from ..models.requests import JobDescriptionCreate
from ..models.responses import JobDescriptionDetail

logger = logging.getLogger(__name__)


class JobDescriptionService:
    """Service for managing job descriptions."""

    def __init__(self, storage: Storage, provider: Optional[AnalysisProvider] = None):
        self.storage = storage
        self.provider = provider

    def list_job_descriptions(self) -> List[JobDescription]:
        return self.storage.get_job_descriptions()

    def get_job_description_detail(self, job_description_id: int) -> JobDescriptionDetail:
        """
        Get a job description with its analysis attached.

        Args:
            job_description_id: The job description ID.

        Returns:
            Job description detail; ``analysis`` is None when not analysed yet.

        Raises:
            JobDescriptionNotFoundException: If the job description does not exist.
        """
        job_description = self.storage.get_job_description(job_description_id)
        if job_description is None:
            raise JobDescriptionNotFoundException(f"Job description {job_description_id} not found")
        return JobDescriptionDetail.from_entity(job_description)

    def create_job_description(self, request: JobDescriptionCreate) -> JobDescriptionDetail:
        job_description = self.storage.create_job_description(InsertJobDescription(
            title=request.title,
            description=request.description,
        ))

        if self.provider is not None:
            analysis = self.provider.analyze_job_description(job_description.title, job_description.description)
            job_description = self.storage.update_job_description_analysis(
                job_description.id, analysis
            ) or job_description
            logger.info(
                f"Analysed job description {job_description.id}: "
                f"bias={analysis.get('biasAnalysis', {}).get('hasBias')}"
            )

        return JobDescriptionDetail.from_entity(job_description)
