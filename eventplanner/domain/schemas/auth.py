"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    message: str = "Login successful"
    access_token: str
    user: UserRead
