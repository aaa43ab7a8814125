"""Pydantic models for the static credential login."""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: Optional[str] = Field(None, examples=["coronelvivida"])
    password: Optional[str] = Field(None, examples=["educacao@2024"])


class SessionUser(BaseModel):
    username: str
    name: str
    role: str


class LoginResponse(BaseModel):
    success: bool
    message: str
    user: SessionUser
    token: str
