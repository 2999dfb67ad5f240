from typing import List, Optional, Dict, Any, Type

from sqlalchemy import select

from database.models import AnalysisResult, InterviewQuestions
from database.repositories.base import BaseRepository


class _PairedRecordRepository(BaseRepository):
    """Lookups shared by records that reference a resume / job description pair."""
    model: Type = None

    def get_by_id(self, record_id: int):
        return self.db.get(self.model, record_id)

    def list_by_resume(self, resume_id: int) -> List[Any]:
        stmt = select(self.model).where(
            self.model.resume_id == resume_id
        ).order_by(self.model.id)
        return self.db.execute(stmt).scalars().all()

    def list_by_job_description(self, job_description_id: int) -> List[Any]:
        stmt = select(self.model).where(
            self.model.job_description_id == job_description_id
        ).order_by(self.model.id)
        return self.db.execute(stmt).scalars().all()

    def get_latest_for_pair(self, resume_id: int, job_description_id: int) -> Optional[Any]:
        """Most recently created record for the pair; ties on created go to the highest id."""
        stmt = select(self.model).where(
            self.model.resume_id == resume_id,
            self.model.job_description_id == job_description_id
        ).order_by(
            self.model.created.desc(),
            self.model.id.desc()
        ).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()


class AnalysisRepository(_PairedRecordRepository):
    model = AnalysisResult

    def create_analysis_result(self, data: Dict[str, Any]) -> AnalysisResult:
        result = AnalysisResult(
            resume_id=data['resume_id'],
            job_description_id=data['job_description_id'],
            match_percentage=data['match_percentage'],
            matched_skills=data.get('matched_skills', []),
            missing_skills=data.get('missing_skills', []),
            candidate_strengths=data.get('candidate_strengths', []),
            candidate_weaknesses=data.get('candidate_weaknesses', []),
        )
        return self.add(result)


class InterviewQuestionsRepository(_PairedRecordRepository):
    model = InterviewQuestions

    def create_interview_questions(self, data: Dict[str, Any]) -> InterviewQuestions:
        questions = InterviewQuestions(
            resume_id=data['resume_id'],
            job_description_id=data['job_description_id'],
            technical_questions=data.get('technical_questions', []),
            experience_questions=data.get('experience_questions', []),
            skill_gap_questions=data.get('skill_gap_questions', []),
            inclusion_questions=data.get('inclusion_questions', []),
        )
        return self.add(questions)
