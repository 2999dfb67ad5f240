from sqlalchemy import Column, TIMESTAMP, Integer, Numeric, ForeignKey, Index

from .base import Base, JSONType
from .resume import utcnow


class AnalysisResult(Base):
    """
    Match between a resume and a job description.

    Several results may exist for the same pair; the most recently created
    one is the current result. Rows are never updated.
    """
    __tablename__ = 'analysis_result'

    id = Column(Integer, primary_key=True, autoincrement=True)
    resume_id = Column(Integer, ForeignKey('resume.id'), nullable=False)
    job_description_id = Column(Integer, ForeignKey('job_description.id'), nullable=False)

    match_percentage = Column(Numeric(5, 2), nullable=False)  # 0-100
    matched_skills = Column(JSONType, nullable=False, default=list)  # [{skill, matchPercentage}]
    missing_skills = Column(JSONType, nullable=False, default=list)
    candidate_strengths = Column(JSONType, nullable=False, default=list)
    candidate_weaknesses = Column(JSONType, nullable=False, default=list)

    created = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_analysis_result_pair', 'resume_id', 'job_description_id'),
        Index('idx_analysis_result_job', 'job_description_id'),
    )


class InterviewQuestions(Base):
    """
    Interview questions generated for a resume / job description pair.
    """
    __tablename__ = 'interview_questions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    resume_id = Column(Integer, ForeignKey('resume.id'), nullable=False)
    job_description_id = Column(Integer, ForeignKey('job_description.id'), nullable=False)

    technical_questions = Column(JSONType, nullable=False, default=list)
    experience_questions = Column(JSONType, nullable=False, default=list)
    skill_gap_questions = Column(JSONType, nullable=False, default=list)
    inclusion_questions = Column(JSONType, nullable=False, default=list)

    created = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_interview_questions_pair', 'resume_id', 'job_description_id'),
        Index('idx_interview_questions_job', 'job_description_id'),
    )
