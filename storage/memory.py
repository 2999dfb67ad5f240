import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, TypeVar

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
    User,
    latest,
)
from storage.errors import DuplicateUsernameError, ReferenceNotFoundError
from storage.interface import Storage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MemStorage(Storage):
    """
    In-process entity store.

    Records live in per-kind dicts keyed by id (dicts keep insertion order).
    A single lock serialises id assignment and mutation, and every record is
    deep-copied on the way in and out so callers never share state with the store.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[int, User] = {}
        self._resumes: Dict[int, Resume] = {}
        self._job_descriptions: Dict[int, JobDescription] = {}
        self._analysis_results: Dict[int, AnalysisResult] = {}
        self._interview_questions: Dict[int, InterviewQuestions] = {}
        self._next_ids = {
            "user": 1,
            "resume": 1,
            "job_description": 1,
            "analysis_result": 1,
            "interview_questions": 1,
        }

    def _assign_id(self, kind: str) -> int:
        # Caller must hold self._lock
        new_id = self._next_ids[kind]
        self._next_ids[kind] = new_id + 1
        return new_id

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _out(record: Optional[T]) -> Optional[T]:
        return record.model_copy(deep=True) if record is not None else None

    def _select(self, records: Dict[int, T], predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            return [r.model_copy(deep=True) for r in records.values() if predicate(r)]

    def _get(self, records: Dict[int, T], record_id: int) -> Optional[T]:
        with self._lock:
            return self._out(records.get(record_id))

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(self._users, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        matches = self._select(self._users, lambda u: u.username == username)
        return matches[0] if matches else None

    def create_user(self, user: InsertUser) -> User:
        with self._lock:
            if any(u.username == user.username for u in self._users.values()):
                raise DuplicateUsernameError(f"Username already exists: {user.username}")
            record = User(id=self._assign_id("user"), **user.model_dump())
            self._users[record.id] = record
            return self._out(record)

    # --- Resumes ---

    def get_resume(self, resume_id: int) -> Optional[Resume]:
        return self._get(self._resumes, resume_id)

    def get_resumes(self, session_id: Optional[str] = None) -> List[Resume]:
        if session_id is None:
            return self._select(self._resumes, lambda r: True)
        return self._select(self._resumes, lambda r: r.session_id == session_id)

    def create_resume(self, resume: InsertResume) -> Resume:
        data = copy.deepcopy(resume.model_dump())
        with self._lock:
            record = Resume(id=self._assign_id("resume"), created=self._now(), **data)
            self._resumes[record.id] = record
        logger.info(f"Created resume {record.id} ({record.filename})")
        return self._out(record)

    def update_resume_analysis(self, resume_id: int, analysis: Dict[str, Any]) -> Optional[Resume]:
        with self._lock:
            record = self._resumes.get(resume_id)
            if record is None:
                return None
            updated = record.model_copy(update={"analyzed_data": copy.deepcopy(analysis)})
            self._resumes[resume_id] = updated
            return self._out(updated)

    # --- Job descriptions ---

    def get_job_description(self, job_description_id: int) -> Optional[JobDescription]:
        return self._get(self._job_descriptions, job_description_id)

    def get_job_descriptions(self) -> List[JobDescription]:
        return self._select(self._job_descriptions, lambda jd: True)

    def create_job_description(self, job_description: InsertJobDescription) -> JobDescription:
        data = copy.deepcopy(job_description.model_dump())
        with self._lock:
            record = JobDescription(id=self._assign_id("job_description"), created=self._now(), **data)
            self._job_descriptions[record.id] = record
        logger.info(f"Created job description {record.id} ({record.title})")
        return self._out(record)

    def update_job_description_analysis(
        self,
        job_description_id: int,
        analysis: Dict[str, Any]
    ) -> Optional[JobDescription]:
        with self._lock:
            record = self._job_descriptions.get(job_description_id)
            if record is None:
                return None
            updated = record.model_copy(update={"analyzed_data": copy.deepcopy(analysis)})
            self._job_descriptions[job_description_id] = updated
            return self._out(updated)

    # --- Analysis results ---

    def _check_references(self, resume_id: int, job_description_id: int) -> None:
        # Caller must hold self._lock
        if resume_id not in self._resumes:
            raise ReferenceNotFoundError(f"Resume {resume_id} does not exist")
        if job_description_id not in self._job_descriptions:
            raise ReferenceNotFoundError(f"Job description {job_description_id} does not exist")

    def get_analysis_result(self, analysis_id: int) -> Optional[AnalysisResult]:
        return self._get(self._analysis_results, analysis_id)

    def get_analysis_results_by_resume_id(self, resume_id: int) -> List[AnalysisResult]:
        return self._select(self._analysis_results, lambda a: a.resume_id == resume_id)

    def get_analysis_results_by_job_description_id(self, job_description_id: int) -> List[AnalysisResult]:
        return self._select(self._analysis_results, lambda a: a.job_description_id == job_description_id)

    def get_analysis_result_by_resume_and_job(
        self,
        resume_id: int,
        job_description_id: int
    ) -> Optional[AnalysisResult]:
        return latest(self._select(
            self._analysis_results,
            lambda a: a.resume_id == resume_id and a.job_description_id == job_description_id
        ))

    def create_analysis_result(self, analysis_result: InsertAnalysisResult) -> AnalysisResult:
        data = copy.deepcopy(analysis_result.model_dump())
        with self._lock:
            self._check_references(analysis_result.resume_id, analysis_result.job_description_id)
            record = AnalysisResult(id=self._assign_id("analysis_result"), created=self._now(), **data)
            self._analysis_results[record.id] = record
        logger.info(
            f"Created analysis result {record.id} for resume {record.resume_id} / "
            f"job description {record.job_description_id}"
        )
        return self._out(record)

    # --- Interview questions ---

    def get_interview_questions(self, questions_id: int) -> Optional[InterviewQuestions]:
        return self._get(self._interview_questions, questions_id)

    def get_interview_questions_by_resume_id(self, resume_id: int) -> List[InterviewQuestions]:
        return self._select(self._interview_questions, lambda q: q.resume_id == resume_id)

    def get_interview_questions_by_job_description_id(self, job_description_id: int) -> List[InterviewQuestions]:
        return self._select(self._interview_questions, lambda q: q.job_description_id == job_description_id)

    def get_interview_question_by_resume_and_job(
        self,
        resume_id: int,
        job_description_id: int
    ) -> Optional[InterviewQuestions]:
        return latest(self._select(
            self._interview_questions,
            lambda q: q.resume_id == resume_id and q.job_description_id == job_description_id
        ))

    def create_interview_questions(self, questions: InsertInterviewQuestions) -> InterviewQuestions:
        data = copy.deepcopy(questions.model_dump())
        with self._lock:
            self._check_references(questions.resume_id, questions.job_description_id)
            record = InterviewQuestions(
                id=self._assign_id("interview_questions"),
                created=self._now(),
                **data
            )
            self._interview_questions[record.id] = record
        logger.info(
            f"Created interview questions {record.id} for resume {record.resume_id} / "
            f"job description {record.job_description_id}"
        )
        return self._out(record)
