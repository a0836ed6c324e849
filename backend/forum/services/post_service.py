"""Post Service layer. Handles post creation, owner-only edits and view counting."""

import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from forum.models.course import Course
from forum.models.post import Post
from forum.models.user import User
from forum.schemas.post import PostCreate, PostUpdate
from forum.services import attachment_service

logger = logging.getLogger(__name__)


def get_post(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.post_id == post_id).first()
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


def resolve_course(db: Session, course_code: str) -> Course:
    course = db.query(Course).filter(Course.code == course_code.strip()).first()
    if not course:
        raise HTTPException(status_code=400, detail="Course not found")
    return course


def _ensure_author_exists(db: Session, author_id: int):
    if not db.query(User.user_id).filter(User.user_id == author_id).first():
        raise HTTPException(status_code=404, detail="User not found")


def _commit_with_files(db: Session, stored: List[dict]):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        attachment_service.discard_attachments(stored)
        raise


async def create_post(db: Session, data: PostCreate, files: Optional[List[UploadFile]] = None) -> Post:
    course = resolve_course(db, data.course_code)
    _ensure_author_exists(db, data.author_id)
    stored = await attachment_service.store_attachments(files)

    post = Post(
        title=data.title,
        content=data.content,
        cycle=data.cycle,
        course_id=course.course_id,
        author_id=data.author_id,
    )
    post.attachments.extend(attachment_service.to_attachment_rows(stored))
    db.add(post)
    _commit_with_files(db, stored)
    db.refresh(post)
    logger.info("post %s created by user %s in course %s", post.post_id, post.author_id, course.code)
    return post


async def update_post(
    db: Session,
    post_id: int,
    data: PostUpdate,
    files: Optional[List[UploadFile]] = None,
) -> Post:
    post = get_post(db, post_id)
    if str(post.author_id) != str(data.author_id).strip():
        logger.warning("user %s denied edit of post %s", data.author_id, post_id)
        raise HTTPException(status_code=403, detail="You do not have permission to edit this post")

    stored = await attachment_service.store_attachments(files)
    if data.title and data.title.strip():
        post.title = data.title
    if data.content and data.content.strip():
        post.content = data.content
    if stored:
        post.attachments.extend(attachment_service.to_attachment_rows(stored))
        # onupdate only fires when a post column changes
        post.updated_at = func.now()
    _commit_with_files(db, stored)
    db.refresh(post)
    logger.info("post %s updated (%d new attachment(s))", post.post_id, len(stored))
    return post


def record_view(db: Session, post_id: int) -> int:
    get_post(db, post_id)
    db.query(Post).filter(Post.post_id == post_id).update(
        {"views": Post.views + 1},
        synchronize_session=False,
    )
    db.commit()
    views = db.query(Post.views).filter(Post.post_id == post_id).scalar()
    return int(views or 0)
