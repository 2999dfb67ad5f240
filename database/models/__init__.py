from .base import Base, JSONType
from .user import User
from .resume import Resume
from .job_description import JobDescription
from .analysis import AnalysisResult, InterviewQuestions

__all__ = [
    'Base',
    'JSONType',
    'User',
    'Resume',
    'JobDescription',
    'AnalysisResult',
    'InterviewQuestions',
]
