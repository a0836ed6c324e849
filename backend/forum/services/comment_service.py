"""Comment Service layer. Creates and lists threaded comments and keeps Post.comments_count in step."""

import logging
from typing import Dict, List

from fastapi import HTTPException
from sqlalchemy.orm import Session, joinedload

from forum.models.comment import Comment
from forum.models.post import Post
from forum.models.user import User
from forum.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


def _ensure_post_exists(db: Session, post_id: int):
    if not db.query(Post.post_id).filter(Post.post_id == post_id).first():
        raise HTTPException(status_code=404, detail="Post not found")


def _ensure_parent_on_post(db: Session, parent_id: int, post_id: int):
    parent = db.query(Comment.comment_id, Comment.post_id).filter(Comment.comment_id == parent_id).first()
    if not parent:
        raise HTTPException(status_code=400, detail="Parent comment not found")
    if int(parent.post_id) != int(post_id):
        raise HTTPException(status_code=400, detail="Parent comment belongs to a different post")


def list_comments(db: Session, post_id: int) -> List[Comment]:
    _ensure_post_exists(db, post_id)
    return (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.comment_id.asc())
        .all()
    )


def create_comment(db: Session, data: CommentCreate) -> Comment:
    _ensure_post_exists(db, data.post_id)
    if not db.query(User.user_id).filter(User.user_id == data.author_id).first():
        raise HTTPException(status_code=404, detail="User not found")
    if data.parent_id is not None:
        _ensure_parent_on_post(db, data.parent_id, data.post_id)

    comment = Comment(
        post_id=data.post_id,
        author_id=data.author_id,
        content=data.content,
        parent_id=data.parent_id,
    )
    db.add(comment)
    # counter bump commits together with the insert
    db.query(Post).filter(Post.post_id == data.post_id).update(
        {"comments_count": Post.comments_count + 1},
        synchronize_session=False,
    )
    db.commit()
    db.refresh(comment)
    logger.info("comment %s added to post %s by user %s", comment.comment_id, comment.post_id, comment.author_id)
    return comment


def build_reply_tree(comments: List[Comment]) -> List[dict]:
    """Nest a flat, time-ordered comment list into reply trees.

    Replies whose parent is not in the list are treated as roots so nothing is lost.
    """
    nodes: Dict[int, dict] = {}
    for comment in comments:
        author = comment.author
        nodes[comment.comment_id] = {
            "comment_id": comment.comment_id,
            "post_id": comment.post_id,
            "parent_id": comment.parent_id,
            "content": comment.content,
            "created_at": comment.created_at,
            "author": (
                {"user_id": author.user_id, "fullname": author.fullname, "avatar": author.avatar or ""}
                if author is not None
                else None
            ),
            "replies": [],
        }

    roots: List[dict] = []
    for comment in comments:
        node = nodes[comment.comment_id]
        parent = nodes.get(comment.parent_id) if comment.parent_id is not None else None
        if parent is None:
            roots.append(node)
        else:
            parent["replies"].append(node)
    return roots
