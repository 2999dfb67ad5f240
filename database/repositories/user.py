from typing import Optional

from sqlalchemy import select

from database.models import User
from database.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_user(self, username: str, password: str) -> User:
        return self.add(User(username=username, password=password))
