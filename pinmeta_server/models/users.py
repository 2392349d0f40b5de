"""Request/response models for signup, login, and the current user."""

from typing import List

from pydantic import BaseModel


class SignupRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    """User returned after signup, login, or /me. Never includes the password."""

    user_id: str
    username: str
    email: str
    preferences: List[str] = []
