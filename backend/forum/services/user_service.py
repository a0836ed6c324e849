"""User Service layer. Profile lookup and partial profile updates."""

from typing import Optional

from fastapi import HTTPException, UploadFile
from sqlalchemy.orm import Session

from forum.config import settings
from forum.models.user import User
from forum.schemas.user import ProfileUpdate
from forum.utils.helpers import save_upload

AVATAR_SUBFOLDER = "avatars"


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


async def update_profile(
    db: Session,
    user_id: int,
    data: ProfileUpdate,
    avatar: Optional[UploadFile] = None,
) -> User:
    user = get_user(db, user_id)
    payload = data.model_dump(exclude_none=True)
    if "fullname" in payload and not payload["fullname"].strip():
        payload.pop("fullname")
    if avatar is not None and avatar.filename:
        info = await save_upload(
            avatar,
            subfolder=AVATAR_SUBFOLDER,
            allowed_extensions=settings.ALLOWED_IMAGE_EXTENSIONS,
        )
        payload["avatar"] = info["path"]
    for k, v in payload.items():
        setattr(user, k, v)
    db.commit()
    db.refresh(user)
    return user
