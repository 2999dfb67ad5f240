from typing import TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, record: T) -> T:
        """Stage a new row and flush so the database assigns its id."""
        self.db.add(record)
        self.db.flush()
        return record
