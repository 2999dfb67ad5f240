import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select

from database.models import JobDescription
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobDescriptionRepository(BaseRepository):
    def get_by_id(self, job_description_id: int) -> Optional[JobDescription]:
        return self.db.get(JobDescription, job_description_id)

    def exists(self, job_description_id: int) -> bool:
        stmt = select(JobDescription.id).where(JobDescription.id == job_description_id)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def list_job_descriptions(self) -> List[JobDescription]:
        stmt = select(JobDescription).order_by(JobDescription.id)
        return self.db.execute(stmt).scalars().all()

    def create_job_description(self, data: Dict[str, Any]) -> JobDescription:
        job_description = JobDescription(
            title=data['title'],
            description=data['description'],
            analyzed_data=data.get('analyzed_data'),
        )
        return self.add(job_description)

    def update_analysis(self, job_description_id: int, analysis: Dict[str, Any]) -> Optional[JobDescription]:
        job_description = self.get_by_id(job_description_id)
        if job_description is None:
            return None

        job_description.analyzed_data = analysis
        self.db.flush()
        logger.info(f"Updated analysis for job description {job_description_id}")
        return job_description
