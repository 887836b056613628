from __future__ import annotations

import logging
from dataclasses import dataclass

from craftstore.domain.errors import ConflictError, ValidationError
from craftstore.domain.user import User
from craftstore.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisterUserRequest:
    username: str
    email: str
    name: str


@dataclass(frozen=True, slots=True)
class RegisterUserResponse:
    user: User


class RegisterUser:
    """
    Create a user record that carts can be attached to.

    Raises:
        ValidationError: If a field is blank or the email has no '@'
        ConflictError: If the username or email is already registered
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        username = request.username.strip()
        email = request.email.strip()
        name = request.name.strip()

        errors = [
            {"field": field, "message": "Must not be blank", "code": "REQUIRED"}
            for field, value in (("username", username), ("email", email), ("name", name))
            if not value
        ]
        if email and "@" not in email:
            errors.append({"field": "email", "message": "Must be an email address", "code": "INVALID_EMAIL"})
        if errors:
            raise ValidationError(errors=errors)

        if self._users.get_user_by_username(username) is not None:
            raise ConflictError("Username already registered", field="username")
        if self._users.get_user_by_email(email) is not None:
            raise ConflictError("Email already registered", field="email")

        user = self._users.create_user(username=username, email=email, name=name)

        logger.info("User registered", extra={"user_id": user.id})
        return RegisterUserResponse(user=user)
