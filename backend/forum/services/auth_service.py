"""Auth Service layer. Registration and password login; no tokens or sessions are issued."""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from forum.models.user import User
from forum.schemas.user import RegisterRequest
from forum.utils.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "Email is already registered"


def _email_taken(db: Session, email: str) -> bool:
    return db.query(User.user_id).filter(User.email == email).first() is not None


def register_user(db: Session, data: RegisterRequest) -> User:
    if _email_taken(db, data.email):
        raise HTTPException(status_code=400, detail=DUPLICATE_EMAIL)
    user = User(
        fullname=data.fullname.strip(),
        email=data.email,
        password_hash=hash_password(data.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent registration won the unique index
        db.rollback()
        raise HTTPException(status_code=400, detail=DUPLICATE_EMAIL)
    db.refresh(user)
    logger.info("registered user %s", user.user_id)
    return user


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user:
        logger.info("login rejected: unknown email")
        return None
    if not verify_password(password, user.password_hash):
        logger.info("login rejected: wrong password for user %s", user.user_id)
        return None
    return user
