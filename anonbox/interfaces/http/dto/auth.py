from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from anonbox.domain.users.entities import User


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)
    email: str | None = Field(default=None, max_length=255)

    @field_validator("email")
    @classmethod
    def _blank_email_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisteredUserDTO(BaseModel):
    id: int
    username: str
    slug: str

    @classmethod
    def from_user(cls, user: User) -> RegisteredUserDTO:
        return cls(id=user.id, username=user.username, slug=user.slug)


class LoginUserDTO(BaseModel):
    id: int
    username: str
    email: str | None
    slug: str


class LoginSuccessDTO(BaseModel):
    token: str
    user: LoginUserDTO

    @classmethod
    def build(cls, user: User, token: str) -> LoginSuccessDTO:
        return cls(
            token=token,
            user=LoginUserDTO(
                id=user.id, username=user.username, email=user.email, slug=user.slug
            ),
        )
