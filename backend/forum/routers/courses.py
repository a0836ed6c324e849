"""Courses API router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from forum.database import get_db
from forum.schemas.course import CourseOut
from forum.services import course_service

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=List[CourseOut])
def list_courses(cycle: int | None = Query(None, ge=1), db: Session = Depends(get_db)):
    return course_service.list_courses(db, cycle=cycle)
