from __future__ import annotations

import pytest

from craftstore.adapters.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def test_create_and_lookup_user(repository: InMemoryUserRepository) -> None:
    user = repository.create_user(username="maker42", email="Maker42@Example.com", name="Ada")

    assert user.id == 1
    assert repository.get_user(1) == user
    assert repository.get_user_by_username("maker42") == user
    assert repository.get_user_by_username("MAKER42") is None


def test_email_lookup_ignores_case(repository: InMemoryUserRepository) -> None:
    user = repository.create_user(username="maker42", email="Maker42@Example.com", name="Ada")

    assert repository.get_user_by_email("maker42@example.com") == user


def test_unknown_user(repository: InMemoryUserRepository) -> None:
    assert repository.get_user(1) is None
    assert repository.get_user_by_email("nobody@example.com") is None
