"""Pydantic schemas for courses."""

from pydantic import BaseModel


class CourseOut(BaseModel):
    course_id: int
    code: str
    name: str
    cycle: int

    model_config = {"from_attributes": True}
