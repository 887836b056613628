"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from craftstore.adapters.sqlalchemy_errors import translate_store_errors
from craftstore.domain.user import User
from craftstore.infra.db.models.user import UserRow
from craftstore.ports.user_repository import UserRepository


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def create_user(self, username: str, email: str, name: str) -> User:
        with translate_store_errors("create_user"):
            row = UserRow(username=username, email=email, name=name)
            self._session.add(row)
            self._session.flush()
            return self._to_domain(row)

    def get_user(self, user_id: int) -> User | None:
        with translate_store_errors("get_user"):
            row = self._session.get(UserRow, user_id)
            return self._to_domain(row) if row else None

    def get_user_by_username(self, username: str) -> User | None:
        with translate_store_errors("get_user_by_username"):
            query = select(UserRow).where(UserRow.username == username)
            row = self._session.execute(query).scalar_one_or_none()
            return self._to_domain(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        with translate_store_errors("get_user_by_email"):
            query = select(UserRow).where(func.lower(UserRow.email) == email.lower())
            row = self._session.execute(query).scalar_one_or_none()
            return self._to_domain(row) if row else None

    def _to_domain(self, row: UserRow) -> User:
        return User(id=row.id, username=row.username, email=row.email, name=row.name)
