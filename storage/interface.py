"""
Storage Interface - Abstract contract the API layer programs against.

Implementations: MemStorage (in-process) and DatabaseStorage (SQLAlchemy).
Lookups return None for unknown ids instead of raising; the only error an
implementation propagates for backend failure is StorageUnavailableError.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from storage.entities import (
    AnalysisResult,
    InsertAnalysisResult,
    InsertInterviewQuestions,
    InsertJobDescription,
    InsertResume,
    InsertUser,
    InterviewQuestions,
    JobDescription,
    Resume,
    ResumeWithAnalysis,
    User,
)


class Storage(ABC):
    """
    Abstract entity store for users, resumes, job descriptions,
    analysis results and interview questions.
    """

    # --- Users ---

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    def create_user(self, user: InsertUser) -> User:
        """Create a user. Raises DuplicateUsernameError if the username is taken."""
        pass

    # --- Resumes ---

    @abstractmethod
    def get_resume(self, resume_id: int) -> Optional[Resume]:
        pass

    @abstractmethod
    def get_resumes(self, session_id: Optional[str] = None) -> List[Resume]:
        """
        List resumes in insertion order.

        Args:
            session_id: When given, only resumes tagged with exactly this session.
        """
        pass

    @abstractmethod
    def create_resume(self, resume: InsertResume) -> Resume:
        pass

    @abstractmethod
    def update_resume_analysis(self, resume_id: int, analysis: Dict[str, Any]) -> Optional[Resume]:
        """Replace analyzed_data. Returns None without side effects if the resume does not exist."""
        pass

    # --- Job descriptions ---

    @abstractmethod
    def get_job_description(self, job_description_id: int) -> Optional[JobDescription]:
        pass

    @abstractmethod
    def get_job_descriptions(self) -> List[JobDescription]:
        pass

    @abstractmethod
    def create_job_description(self, job_description: InsertJobDescription) -> JobDescription:
        pass

    @abstractmethod
    def update_job_description_analysis(
        self,
        job_description_id: int,
        analysis: Dict[str, Any]
    ) -> Optional[JobDescription]:
        pass

    # --- Analysis results ---

    @abstractmethod
    def get_analysis_result(self, analysis_id: int) -> Optional[AnalysisResult]:
        pass

    @abstractmethod
    def get_analysis_results_by_resume_id(self, resume_id: int) -> List[AnalysisResult]:
        pass

    @abstractmethod
    def get_analysis_results_by_job_description_id(self, job_description_id: int) -> List[AnalysisResult]:
        pass

    @abstractmethod
    def get_analysis_result_by_resume_and_job(
        self,
        resume_id: int,
        job_description_id: int
    ) -> Optional[AnalysisResult]:
        """Latest analysis result for the pair, or None."""
        pass

    @abstractmethod
    def create_analysis_result(self, analysis_result: InsertAnalysisResult) -> AnalysisResult:
        """
        Store an analysis result.

        Raises:
            ReferenceNotFoundError: If the resume or job description does not exist.
        """
        pass

    # --- Interview questions ---

    @abstractmethod
    def get_interview_questions(self, questions_id: int) -> Optional[InterviewQuestions]:
        pass

    @abstractmethod
    def get_interview_questions_by_resume_id(self, resume_id: int) -> List[InterviewQuestions]:
        pass

    @abstractmethod
    def get_interview_questions_by_job_description_id(self, job_description_id: int) -> List[InterviewQuestions]:
        pass

    @abstractmethod
    def get_interview_question_by_resume_and_job(
        self,
        resume_id: int,
        job_description_id: int
    ) -> Optional[InterviewQuestions]:
        """Latest interview questions for the pair, or None."""
        pass

    @abstractmethod
    def create_interview_questions(self, questions: InsertInterviewQuestions) -> InterviewQuestions:
        """
        Store generated interview questions.

        Raises:
            ReferenceNotFoundError: If the resume or job description does not exist.
        """
        pass

    # --- Composite ---

    def get_resume_with_latest_analysis_and_questions(
        self,
        resume_id: int,
        job_description_id: int
    ) -> ResumeWithAnalysis:
        """
        Resolve the resume and the latest analysis and questions for the pair.

        Each part is looked up independently, so a resume with no analysis yet
        (or an analysis whose resume was never stored) is a valid result.
        """
        return ResumeWithAnalysis(
            resume=self.get_resume(resume_id),
            analysis=self.get_analysis_result_by_resume_and_job(resume_id, job_description_id),
            questions=self.get_interview_question_by_resume_and_job(resume_id, job_description_id),
        )
