"""
DatabaseStorage - Storage implementation backed by SQLAlchemy.

Each operation runs in its own unit of work and converts ORM rows into
entity records before the session closes, so no ORM state leaks to callers.
"""
import functools
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import sessionmaker

from database import models
from database.uow import storage_uow
from storage.entities import (
    AnalysisResult,
    InsertAnalysisResult,
    InsertInterviewQuestions,
    InsertJobDescription,
    InsertResume,
    InsertUser,
    InterviewQuestions,
    JobDescription,
    MatchedSkill,
    Resume,
    User,
)
from storage.errors import DuplicateUsernameError, ReferenceNotFoundError, StorageUnavailableError
from storage.interface import Storage

logger = logging.getLogger(__name__)

_UNAVAILABLE_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)


def _translate_errors(func):
    """Re-raise connectivity failures as StorageUnavailableError."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except _UNAVAILABLE_ERRORS as e:
            logger.error(f"Storage unavailable during {func.__name__}: {e}")
            raise StorageUnavailableError(f"Storage unavailable: {e.__class__.__name__}") from e
    return wrapper


# --- Row conversion ---

def _to_user(row: models.User) -> User:
    return User(id=row.id, username=row.username, password=row.password)


def _to_resume(row: models.Resume) -> Resume:
    return Resume(
        id=row.id,
        filename=row.filename,
        file_size=row.file_size,
        file_type=row.file_type,
        content=row.content,
        analyzed_data=row.analyzed_data,
        session_id=row.session_id,
        created=_utc(row.created),
    )


def _to_job_description(row: models.JobDescription) -> JobDescription:
    return JobDescription(
        id=row.id,
        title=row.title,
        description=row.description,
        analyzed_data=row.analyzed_data,
        created=_utc(row.created),
    )


def _to_analysis_result(row: models.AnalysisResult) -> AnalysisResult:
    return AnalysisResult(
        id=row.id,
        resume_id=row.resume_id,
        job_description_id=row.job_description_id,
        match_percentage=float(row.match_percentage),
        matched_skills=[MatchedSkill.model_validate(s) for s in (row.matched_skills or [])],
        missing_skills=list(row.missing_skills or []),
        candidate_strengths=list(row.candidate_strengths or []),
        candidate_weaknesses=list(row.candidate_weaknesses or []),
        created=_utc(row.created),
    )


def _to_interview_questions(row: models.InterviewQuestions) -> InterviewQuestions:
    return InterviewQuestions(
        id=row.id,
        resume_id=row.resume_id,
        job_description_id=row.job_description_id,
        technical_questions=list(row.technical_questions or []),
        experience_questions=list(row.experience_questions or []),
        skill_gap_questions=list(row.skill_gap_questions or []),
        inclusion_questions=list(row.inclusion_questions or []),
        created=_utc(row.created),
    )


def _utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; stored values are always UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Primary keys are 32-bit INTEGER columns; larger ids cannot exist
_MAX_ID = 2**31 - 1


def _valid_id(*ids: int) -> bool:
    return all(0 < i <= _MAX_ID for i in ids)


def _optional(row: Optional[Any], convert) -> Optional[Any]:
    return convert(row) if row is not None else None


class DatabaseStorage(Storage):
    """Storage backed by a relational database through SQLAlchemy sessions."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _uow(self):
        return storage_uow(self.session_factory)

    def _check_references(self, repo, resume_id: int, job_description_id: int) -> None:
        if not (_valid_id(resume_id) and repo.resumes.exists(resume_id)):
            raise ReferenceNotFoundError(f"Resume {resume_id} does not exist")
        if not (_valid_id(job_description_id) and repo.job_descriptions.exists(job_description_id)):
            raise ReferenceNotFoundError(f"Job description {job_description_id} does not exist")

    # --- Users ---

    @_translate_errors
    def get_user(self, user_id: int) -> Optional[User]:
        if not _valid_id(user_id):
            return None
        with self._uow() as repo:
            return _optional(repo.users.get_by_id(user_id), _to_user)

    @_translate_errors
    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._uow() as repo:
            return _optional(repo.users.get_by_username(username), _to_user)

    @_translate_errors
    def create_user(self, user: InsertUser) -> User:
        try:
            with self._uow() as repo:
                if repo.users.get_by_username(user.username) is not None:
                    raise DuplicateUsernameError(f"Username already exists: {user.username}")
                return _to_user(repo.users.create_user(user.username, user.password))
        except sa_exc.IntegrityError as e:
            raise DuplicateUsernameError(f"Username already exists: {user.username}") from e

    # --- Resumes ---

    @_translate_errors
    def get_resume(self, resume_id: int) -> Optional[Resume]:
        if not _valid_id(resume_id):
            return None
        with self._uow() as repo:
            return _optional(repo.resumes.get_by_id(resume_id), _to_resume)

    @_translate_errors
    def get_resumes(self, session_id: Optional[str] = None) -> List[Resume]:
        with self._uow() as repo:
            return [_to_resume(r) for r in repo.resumes.list_resumes(session_id)]

    @_translate_errors
    def create_resume(self, resume: InsertResume) -> Resume:
        with self._uow() as repo:
            record = _to_resume(repo.resumes.create_resume(resume.model_dump()))
        logger.info(f"Created resume {record.id} ({record.filename})")
        return record

    @_translate_errors
    def update_resume_analysis(self, resume_id: int, analysis: Dict[str, Any]) -> Optional[Resume]:
        if not _valid_id(resume_id):
            return None
        with self._uow() as repo:
            return _optional(repo.resumes.update_analysis(resume_id, analysis), _to_resume)

    # --- Job descriptions ---

    @_translate_errors
    def get_job_description(self, job_description_id: int) -> Optional[JobDescription]:
        if not _valid_id(job_description_id):
            return None
        with self._uow() as repo:
            return _optional(repo.job_descriptions.get_by_id(job_description_id), _to_job_description)

    @_translate_errors
    def get_job_descriptions(self) -> List[JobDescription]:
        with self._uow() as repo:
            return [_to_job_description(jd) for jd in repo.job_descriptions.list_job_descriptions()]

    @_translate_errors
    def create_job_description(self, job_description: InsertJobDescription) -> JobDescription:
        with self._uow() as repo:
            record = _to_job_description(
                repo.job_descriptions.create_job_description(job_description.model_dump())
            )
        logger.info(f"Created job description {record.id} ({record.title})")
        return record

    @_translate_errors
    def update_job_description_analysis(
        self,
        job_description_id: int,
        analysis: Dict[str, Any]
    ) -> Optional[JobDescription]:
        if not _valid_id(job_description_id):
            return None
        with self._uow() as repo:
            return _optional(
                repo.job_descriptions.update_analysis(job_description_id, analysis),
                _to_job_description
            )

    # --- Analysis results ---

    @_translate_errors
    def get_analysis_result(self, analysis_id: int) -> Optional[AnalysisResult]:
        if not _valid_id(analysis_id):
            return None
        with self._uow() as repo:
            return _optional(repo.analysis.get_by_id(analysis_id), _to_analysis_result)

    @_translate_errors
    def get_analysis_results_by_resume_id(self, resume_id: int) -> List[AnalysisResult]:
        if not _valid_id(resume_id):
            return []
        with self._uow() as repo:
            return [_to_analysis_result(a) for a in repo.analysis.list_by_resume(resume_id)]

    @_translate_errors
    def get_analysis_results_by_job_description_id(self, job_description_id: int) -> List[AnalysisResult]:
        if not _valid_id(job_description_id):
            return []
        with self._uow() as repo:
            return [_to_analysis_result(a) for a in repo.analysis.list_by_job_description(job_description_id)]

    @_translate_errors
    def get_analysis_result_by_resume_and_job(
        self,
        resume_id: int,
        job_description_id: int
    ) -> Optional[AnalysisResult]:
        if not _valid_id(resume_id, job_description_id):
            return None
        with self._uow() as repo:
            return _optional(
                repo.analysis.get_latest_for_pair(resume_id, job_description_id),
                _to_analysis_result
            )

    @_translate_errors
    def create_analysis_result(self, analysis_result: InsertAnalysisResult) -> AnalysisResult:
        with self._uow() as repo:
            self._check_references(repo, analysis_result.resume_id, analysis_result.job_description_id)
            record = _to_analysis_result(
                repo.analysis.create_analysis_result(analysis_result.model_dump())
            )
        logger.info(
            f"Created analysis result {record.id} for resume {record.resume_id} / "
            f"job description {record.job_description_id}"
        )
        return record

    # --- Interview questions ---

    @_translate_errors
    def get_interview_questions(self, questions_id: int) -> Optional[InterviewQuestions]:
        if not _valid_id(questions_id):
            return None
        with self._uow() as repo:
            return _optional(repo.interview_questions.get_by_id(questions_id), _to_interview_questions)

    @_translate_errors
    def get_interview_questions_by_resume_id(self, resume_id: int) -> List[InterviewQuestions]:
        if not _valid_id(resume_id):
            return []
        with self._uow() as repo:
            return [_to_interview_questions(q) for q in repo.interview_questions.list_by_resume(resume_id)]

    @_translate_errors
    def get_interview_questions_by_job_description_id(self, job_description_id: int) -> List[InterviewQuestions]:
        if not _valid_id(job_description_id):
            return []
        with self._uow() as repo:
            return [
                _to_interview_questions(q)
                for q in repo.interview_questions.list_by_job_description(job_description_id)
            ]

    @_translate_errors
    def get_interview_question_by_resume_and_job(
        self,
        resume_id: int,
        job_description_id: int
    ) -> Optional[InterviewQuestions]:
        if not _valid_id(resume_id, job_description_id):
            return None
        with self._uow() as repo:
            return _optional(
                repo.interview_questions.get_latest_for_pair(resume_id, job_description_id),
                _to_interview_questions
            )

    @_translate_errors
    def create_interview_questions(self, questions: InsertInterviewQuestions) -> InterviewQuestions:
        with self._uow() as repo:
            self._check_references(repo, questions.resume_id, questions.job_description_id)
            record = _to_interview_questions(
                repo.interview_questions.create_interview_questions(questions.model_dump())
            )
        logger.info(
            f"Created interview questions {record.id} for resume {record.resume_id} / "
            f"job description {record.job_description_id}"
        )
        return record
