from sqlalchemy.orm import Session

from database.repositories import (
    UserRepository,
    ResumeRepository,
    JobDescriptionRepository,
    AnalysisRepository,
    InterviewQuestionsRepository,
)


class Repository:
    """All entity repositories bound to one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.resumes = ResumeRepository(db)
        self.job_descriptions = JobDescriptionRepository(db)
        self.analysis = AnalysisRepository(db)
        self.interview_questions = InterviewQuestionsRepository(db)
