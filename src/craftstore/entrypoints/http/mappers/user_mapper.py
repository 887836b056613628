from __future__ import annotations

from craftstore.domain.user import User
from craftstore.entrypoints.http.dtos.user import RegisterUserRequestDTO, UserResponseDTO
from craftstore.use_cases.register_user import RegisterUserRequest


class UserMapper:
    @staticmethod
    def to_register_request(dto: RegisterUserRequestDTO) -> RegisterUserRequest:
        return RegisterUserRequest(username=dto.username, email=dto.email, name=dto.name)

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        return UserResponseDTO(id=user.id, username=user.username, email=user.email, name=user.name)
