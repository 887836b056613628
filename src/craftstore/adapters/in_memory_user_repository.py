from __future__ import annotations

from itertools import count
from threading import Lock

from craftstore.domain.user import User
from craftstore.ports.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._lock = Lock()
        self._users: dict[int, User] = {}
        self._ids = count(1)

    def create_user(self, username: str, email: str, name: str) -> User:
        with self._lock:
            user = User(id=next(self._ids), username=username, email=email, name=name)
            self._users[user.id] = user
        return user

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def get_user_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email.lower() == email.lower()), None)
