from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.resume import ResumeRepository
from database.repositories.job_description import JobDescriptionRepository
from database.repositories.analysis import AnalysisRepository, InterviewQuestionsRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'ResumeRepository',
    'JobDescriptionRepository',
    'AnalysisRepository',
    'InterviewQuestionsRepository',
]
