from pydantic import BaseModel, Field


class RegisterUserRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=50, examples=["maker42"])
    email: str = Field(min_length=3, max_length=255, examples=["maker42@example.com"])
    name: str = Field(min_length=1, max_length=100, examples=["Ada Maker"])


class UserResponseDTO(BaseModel):
    id: int
    username: str
    email: str
    name: str
