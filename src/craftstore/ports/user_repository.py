from __future__ import annotations

from abc import ABC, abstractmethod

from craftstore.domain.user import User


class UserRepository(ABC):
    @abstractmethod
    def create_user(self, username: str, email: str, name: str) -> User: ...

    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None: ...
