"""SQLAlchemy model for the static course catalogue."""

from sqlalchemy import Column, Integer, String, Index
from sqlalchemy.orm import relationship
from forum.database import Base


class Course(Base):
    __tablename__ = "course"

    course_id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(30), unique=True, nullable=False)  # e.g. IS-121
    name = Column(String(200), nullable=False)
    cycle = Column(Integer, nullable=False)

    posts = relationship("Post", back_populates="course")

    __table_args__ = (
        Index("idx_course_cycle_name", "cycle", "name"),
    )
