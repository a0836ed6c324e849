"""Course Service layer. Read-only access to the course catalogue."""

from typing import List, Optional

from sqlalchemy.orm import Session

from forum.models.course import Course


def list_courses(db: Session, cycle: Optional[int] = None) -> List[Course]:
    query = db.query(Course)
    if cycle is not None:
        query = query.filter(Course.cycle == cycle)
    return query.order_by(Course.cycle.asc(), Course.name.asc()).all()
