"""Comments API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from forum.database import get_db
from forum.schemas.comment import CommentCreate, CommentCreateOut
from forum.services import comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.post("", response_model=CommentCreateOut)
def create_comment(data: CommentCreate, db: Session = Depends(get_db)):
    comment = comment_service.create_comment(db, data)
    return {"success": True, "comment": comment}
