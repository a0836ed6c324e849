"""Pydantic schemas for registration, login and profiles."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class RegisterRequest(BaseModel):
    fullname: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=150)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("invalid email address")
        return value


class LoginRequest(BaseModel):
    email: str
    password: str


class SocialLinks(BaseModel):
    facebook: str = ""
    github: str = ""
    linkedin: str = ""


class UserSummary(BaseModel):
    user_id: int
    fullname: str
    email: str

    model_config = {"from_attributes": True}


class UserOut(UserSummary):
    avatar: Optional[str] = ""
    bio: Optional[str] = None
    cycle: Optional[int] = None
    location: Optional[str] = None
    joined_at: Optional[datetime] = None
    interests: Optional[str] = ""
    socials: SocialLinks

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    fullname: Optional[str] = None
    bio: Optional[str] = None
    cycle: Optional[int] = None
    location: Optional[str] = None
    interests: Optional[str] = None
    facebook: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None


class MessageOut(BaseModel):
    message: str


class LoginOut(BaseModel):
    success: bool
    user: UserSummary


class ProfileUpdateOut(BaseModel):
    success: bool
    user: UserOut
