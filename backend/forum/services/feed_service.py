"""Feed Service layer. Builds the post feed: literal search filter, closed sort modes, author/course join and a flat projection."""

from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from forum.config import settings
from forum.models.course import Course
from forum.models.post import Post
from forum.models.user import User
from forum.schemas.post import FeedSort

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text only ever matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def _sort_clauses(sort: FeedSort) -> tuple:
    if sort == FeedSort.oldest:
        return (Post.created_at.asc(), Post.post_id.asc())
    if sort == FeedSort.popular:
        return (Post.views.desc(), Post.created_at.desc(), Post.post_id.desc())
    if sort == FeedSort.discussed:
        return (Post.comments_count.desc(), Post.created_at.desc(), Post.post_id.desc())
    return (Post.created_at.desc(), Post.post_id.desc())


def _feed_query(db: Session):
    # inner join on author: posts whose author row is gone are not listed
    return (
        db.query(Post, User.fullname, User.email, User.avatar, Course)
        .join(User, User.user_id == Post.author_id)
        .outerjoin(Course, Course.course_id == Post.course_id)
        .options(selectinload(Post.attachments))
    )


def _attachment_view(attachment) -> dict:
    return {
        "original_name": attachment.original_name,
        "file_name": attachment.file_name,
        "path": attachment.path,
        "mime_type": attachment.mime_type,
    }


def _course_view(course: Optional[Course]) -> Optional[dict]:
    if course is None:
        return None
    return {
        "course_id": course.course_id,
        "code": course.code,
        "name": course.name,
        "cycle": course.cycle,
    }


def _project(post: Post, fullname: str, email: str, avatar: Optional[str], course: Optional[Course]) -> dict:
    return {
        "post_id": post.post_id,
        "title": post.title,
        "content": post.content,
        "cycle": post.cycle,
        "course_id": post.course_id,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "views": int(post.views or 0),
        "attachments": [_attachment_view(a) for a in post.attachments],
        "comments_count": int(post.comments_count or 0),
        "author_id": post.author_id,
        "author": {
            "user_id": post.author_id,
            "fullname": fullname,
            "email": email,
            "avatar": avatar or "",
        },
        "course_name": course.name if course is not None and course.name else settings.DEFAULT_COURSE_NAME,
        "course": _course_view(course),
    }


def _contains_text(column, text: str, dialect_name: str):
    if dialect_name == "sqlite":
        keyword = f"%{escape_like(text.casefold())}%"
        return func.casefold(column).like(keyword, escape=LIKE_ESCAPE)
    return column.ilike(f"%{escape_like(text)}%", escape=LIKE_ESCAPE)


def list_feed(db: Session, search: Optional[str] = None, sort: FeedSort = FeedSort.newest) -> List[dict]:
    query = _feed_query(db)
    if search and search.strip():
        text = search.strip()
        dialect_name = db.get_bind().dialect.name
        query = query.filter(
            or_(
                _contains_text(Post.title, text, dialect_name),
                _contains_text(Post.content, text, dialect_name),
            )
        )
    rows = query.order_by(*_sort_clauses(FeedSort(sort))).all()
    return [_project(*row) for row in rows]


def get_feed_entry(db: Session, post_id: int) -> dict:
    row = _feed_query(db).filter(Post.post_id == post_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Post not found")
    return _project(*row)
