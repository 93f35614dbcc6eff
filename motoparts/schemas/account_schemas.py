from __future__ import annotations

from pydantic import Field

from .base import BaseSchema


class LoginDTO(BaseSchema):
    email: str
    password: str


class SignupDTO(BaseSchema):
    user_name: str = Field(alias="userName", min_length=3)
    email: str
    password: str


class UserRoleUpdateDTO(BaseSchema):
    # Backend expects the bare role name ("USER" or "ADMIN")
    roles: str = Field(pattern=r"^(USER|ADMIN)$")


class ExpenseDTO(BaseSchema):
    description: str = Field(min_length=1)
    amount: float = Field(gt=0)
    category: str = Field(min_length=1)
    date: str = Field(min_length=1)
