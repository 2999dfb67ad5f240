from sqlalchemy import Column, Integer, Text, Index

from .base import Base


class User(Base):
    """
    User account. Only the username and password hash are modelled.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)  # password hash

    __table_args__ = (
        Index('idx_users_username', 'username'),
    )
