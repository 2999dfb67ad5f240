import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select

from database.models import Resume
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ResumeRepository(BaseRepository):
    def get_by_id(self, resume_id: int) -> Optional[Resume]:
        return self.db.get(Resume, resume_id)

    def exists(self, resume_id: int) -> bool:
        stmt = select(Resume.id).where(Resume.id == resume_id)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def list_resumes(self, session_id: Optional[str] = None) -> List[Resume]:
        """List resumes in insertion order.

        Args:
            session_id: Optional exact-match filter on the session tag

        Returns:
            List of Resume rows ordered by id
        """
        stmt = select(Resume)

        if session_id is not None:
            stmt = stmt.where(Resume.session_id == session_id)

        stmt = stmt.order_by(Resume.id)
        return self.db.execute(stmt).scalars().all()

    def create_resume(self, data: Dict[str, Any]) -> Resume:
        resume = Resume(
            filename=data['filename'],
            file_size=data['file_size'],
            file_type=data['file_type'],
            content=data['content'],
            analyzed_data=data.get('analyzed_data'),
            session_id=data.get('session_id'),
        )
        return self.add(resume)

    def update_analysis(self, resume_id: int, analysis: Dict[str, Any]) -> Optional[Resume]:
        resume = self.get_by_id(resume_id)
        if resume is None:
            return None

        resume.analyzed_data = analysis
        self.db.flush()
        logger.info(f"Updated analysis for resume {resume_id}")
        return resume
