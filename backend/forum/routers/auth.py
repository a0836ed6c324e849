"""Auth API router. Validates requests and delegates to the auth service."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from forum.database import get_db
from forum.schemas.user import LoginOut, LoginRequest, MessageOut, RegisterRequest, UserSummary
from forum.services import auth_service

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=MessageOut)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    auth_service.register_user(db, request)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginOut, responses={401: {"description": "Invalid credentials"}})
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = auth_service.authenticate(db, request.email, request.password)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "message": "Invalid email or password"},
        )
    return LoginOut(success=True, user=UserSummary.model_validate(user))
