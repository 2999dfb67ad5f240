from sqlalchemy import Column, Text, TIMESTAMP, Integer

from .base import Base, JSONType
from .resume import utcnow


class JobDescription(Base):
    """
    Job description submitted by an employer.

    analyzed_data ({skills, biasAnalysis}) is filled in after creation.
    """
    __tablename__ = 'job_description'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    analyzed_data = Column(JSONType, nullable=True)
    created = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
