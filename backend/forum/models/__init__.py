"""SQLAlchemy model package."""

from forum.models.user import User
from forum.models.course import Course
from forum.models.post import Post, PostAttachment
from forum.models.comment import Comment

__all__ = [
    "User",
    "Course",
    "Post", "PostAttachment",
    "Comment",
]
