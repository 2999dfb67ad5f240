from storage.entities import (
    User,
    InsertUser,
    Resume,
    InsertResume,
    JobDescription,
    InsertJobDescription,
    MatchedSkill,
    AnalysisResult,
    InsertAnalysisResult,
    InterviewQuestions,
    InsertInterviewQuestions,
    ResumeWithAnalysis,
)
from storage.errors import (
    StorageError,
    StorageUnavailableError,
    ReferenceNotFoundError,
    DuplicateUsernameError,
)
from storage.interface import Storage
from storage.memory import MemStorage

__all__ = [
    'User',
    'InsertUser',
    'Resume',
    'InsertResume',
    'JobDescription',
    'InsertJobDescription',
    'MatchedSkill',
    'AnalysisResult',
    'InsertAnalysisResult',
    'InterviewQuestions',
    'InsertInterviewQuestions',
    'ResumeWithAnalysis',
    'StorageError',
    'StorageUnavailableError',
    'ReferenceNotFoundError',
    'DuplicateUsernameError',
    'Storage',
    'MemStorage',
]
