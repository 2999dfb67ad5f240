from datetime import datetime, timezone

from sqlalchemy import Column, Text, TIMESTAMP, Integer, Index

from .base import Base, JSONType


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Resume(Base):
    """
    Uploaded resume with its extracted text.

    analyzed_data stays NULL until the resume analysis provider has run.
    session_id is an opaque client session tag, not a foreign key.
    """
    __tablename__ = 'resume'

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(Text, nullable=False)
    file_size = Column(Integer, nullable=False)
    file_type = Column(Text, nullable=False)
    content = Column(Text, nullable=False)

    analyzed_data = Column(JSONType, nullable=True)  # {skills, experience, education}
    session_id = Column(Text, nullable=True)

    created = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_resume_session', 'session_id'),
    )
