"""Request/response contracts for comments."""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime


class CommentCreate(BaseModel):
    post_id: int
    author_id: int
    content: str = Field(..., max_length=5000)
    parent_id: Optional[int] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be empty")
        return value


class CommentAuthorOut(BaseModel):
    user_id: int
    fullname: str
    avatar: Optional[str] = ""

    model_config = {"from_attributes": True}


class CommentOut(BaseModel):
    comment_id: int
    post_id: int
    parent_id: Optional[int] = None
    content: str
    created_at: Optional[datetime] = None
    author: Optional[CommentAuthorOut] = None

    model_config = {"from_attributes": True}


class CommentNodeOut(CommentOut):
    replies: List["CommentNodeOut"] = []


CommentNodeOut.model_rebuild()


class CommentCreateOut(BaseModel):
    success: bool
    comment: CommentOut
