"""
Pydantic models for dashboard users and authentication.

``UserRecord`` carries the password hash and stays inside the service;
only ``UserRead`` is ever serialised.
"""

from typing import Literal

from pydantic import BaseModel, Field

from .base import CamelModel

Role = Literal["admin", "leader", "volunteer"]


class UserRead(CamelModel):
    id: str
    email: str = Field(..., examples=["admin@youthblossom.org"])
    name: str = Field(..., examples=["Admin User"])
    role: Role


class UserRecord(UserRead):
    password_hash: str


class LoginRequest(CamelModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=3)


class LoginResponse(BaseModel):
    # OAuth-style token fields keep their snake_case names.
    access_token: str
    # Same value as ``access_token``, under the name dashboard clients read.
    token: str
    token_type: str = "bearer"
    user: UserRead
