"""Seed the database with the course catalogue and a demo account."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from forum.database import SessionLocal, engine, Base
import forum.models  # noqa: F401

from forum.models.course import Course
from forum.models.user import User
from forum.utils.passwords import hash_password

COURSES = [
    ("IS-111", "Introduction to Programming", 1),
    ("IS-112", "Discrete Mathematics", 1),
    ("IS-113", "Calculus I", 1),
    ("IS-211", "Object-Oriented Programming", 2),
    ("IS-212", "Linear Algebra", 2),
    ("IS-121", "Algorithms", 3),
    ("IS-122", "Data Structures", 3),
    ("IS-123", "Databases I", 3),
    ("IS-221", "Operating Systems", 4),
    ("IS-222", "Computer Networks", 4),
    ("IS-321", "Software Engineering", 5),
    ("IS-322", "Web Development", 5),
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        existing_codes = {row[0] for row in db.query(Course.code).all()}
        new_courses = [
            Course(code=code, name=name, cycle=cycle)
            for code, name, cycle in COURSES
            if code not in existing_codes
        ]
        db.add_all(new_courses)

        if not db.query(User).filter(User.email == "demo@forum.local").first():
            db.add(User(fullname="Demo Student", email="demo@forum.local", password_hash=hash_password("demo1234")))

        db.commit()
        print(f"Seeded {len(new_courses)} course(s).")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
