"""Posts API router. Feed listing, post create/edit with uploads, and per-post comments."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from forum.database import get_db
from forum.schemas.comment import CommentNodeOut, CommentOut
from forum.schemas.post import FeedPostOut, FeedSort, PostCreate, PostMutationOut, PostUpdate, ViewCountOut
from forum.services import comment_service, feed_service, post_service

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=List[FeedPostOut])
def list_posts(
    search: Optional[str] = Query(None, max_length=200),
    sort: FeedSort = FeedSort.newest,
    db: Session = Depends(get_db),
):
    return feed_service.list_feed(db, search=search, sort=sort)


@router.post("", response_model=PostMutationOut)
async def create_post(
    title: str = Form(..., min_length=1, max_length=200),
    content: str = Form(..., min_length=1),
    cycle: int = Form(...),
    course_code: str = Form(..., min_length=1),
    author_id: int = Form(...),
    files: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
):
    data = PostCreate(title=title, content=content, cycle=cycle, course_code=course_code, author_id=author_id)
    post = await post_service.create_post(db, data, files)
    return {"success": True, "message": "Post published", "post": post}


@router.get("/{post_id}", response_model=FeedPostOut)
def get_post(post_id: int, db: Session = Depends(get_db)):
    return feed_service.get_feed_entry(db, post_id)


@router.put("/{post_id}", response_model=PostMutationOut)
async def update_post(
    post_id: int,
    author_id: str = Form(...),
    title: Optional[str] = Form(None, max_length=200),
    content: Optional[str] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
):
    data = PostUpdate(title=title, content=content, author_id=author_id)
    post = await post_service.update_post(db, post_id, data, files)
    return {"success": True, "post": post}


@router.post("/{post_id}/views", response_model=ViewCountOut)
def record_view(post_id: int, db: Session = Depends(get_db)):
    views = post_service.record_view(db, post_id)
    return {"post_id": post_id, "views": views}


@router.get("/{post_id}/comments", response_model=List[CommentOut])
def list_comments(post_id: int, db: Session = Depends(get_db)):
    return comment_service.list_comments(db, post_id)


@router.get("/{post_id}/comments/tree", response_model=List[CommentNodeOut])
def list_comment_tree(post_id: int, db: Session = Depends(get_db)):
    comments = comment_service.list_comments(db, post_id)
    return comment_service.build_reply_tree(comments)
