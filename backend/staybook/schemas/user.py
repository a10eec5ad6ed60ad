"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr
from datetime import datetime


class UserBase(BaseModel):
    """Base user schema."""
    name: str
    email: EmailStr


class UserCreate(UserBase):
    """Schema for registration."""
    password: str


class UserResponse(UserBase):
    """Schema for user response; never carries the password hash."""
    id: int

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    """Schema for a successful login; the token itself travels in a cookie."""
    success: bool = True
    user: UserResponse
