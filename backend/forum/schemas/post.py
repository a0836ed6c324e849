"""Request/response contracts for posts and the post feed."""

from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from forum.schemas.course import CourseOut


class FeedSort(str, Enum):
    newest = "newest"
    oldest = "oldest"
    popular = "popular"
    discussed = "discussed"


class AttachmentOut(BaseModel):
    original_name: str
    file_name: str
    path: str
    mime_type: Optional[str] = None

    model_config = {"from_attributes": True}


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    cycle: int
    course_code: str = Field(..., min_length=1)
    author_id: int


class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    content: Optional[str] = None
    author_id: str


class PostOut(BaseModel):
    post_id: int
    title: str
    content: str
    author_id: int
    course_id: int
    cycle: int
    views: int
    comments_count: int
    attachments: List[AttachmentOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PostMutationOut(BaseModel):
    success: bool
    message: Optional[str] = None
    post: PostOut


class FeedAuthorOut(BaseModel):
    user_id: int
    fullname: str
    email: str
    avatar: Optional[str] = ""


class FeedPostOut(BaseModel):
    post_id: int
    title: str
    content: str
    cycle: int
    course_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    views: int
    attachments: List[AttachmentOut] = []
    comments_count: int
    author_id: int
    author: FeedAuthorOut
    course_name: str
    course: Optional[CourseOut] = None


class ViewCountOut(BaseModel):
    post_id: int
    views: int
