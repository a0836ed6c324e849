"""Users API router. Profile read and update."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from forum.database import get_db
from forum.schemas.user import ProfileUpdate, ProfileUpdateOut, UserOut
from forum.services import user_service

router = APIRouter(prefix="/api/user", tags=["users"])


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=ProfileUpdateOut)
async def update_user(
    user_id: int,
    fullname: Optional[str] = Form(None, max_length=100),
    bio: Optional[str] = Form(None),
    cycle: Optional[int] = Form(None, ge=1),
    location: Optional[str] = Form(None),
    interests: Optional[str] = Form(None),
    facebook: Optional[str] = Form(None),
    github: Optional[str] = Form(None),
    linkedin: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    data = ProfileUpdate(
        fullname=fullname,
        bio=bio,
        cycle=cycle,
        location=location,
        interests=interests,
        facebook=facebook,
        github=github,
        linkedin=linkedin,
    )
    user = await user_service.update_profile(db, user_id, data, avatar)
    return {"success": True, "user": user}
