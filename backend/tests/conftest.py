import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from forum.config import settings
from forum.database import Base, get_db
from forum.main import app
from forum.models.course import Course
from forum.models.user import User
from forum.utils.passwords import hash_password

TEST_DB_URL = "sqlite:///./test_forum.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    target.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    monkeypatch.setattr(settings, "PASSWORD_HASH_ITERATIONS", 1000)
    return target


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "ana": User(fullname="Ana", email="ana@x.com", password_hash=hash_password("secret", 1000)),
        "luis": User(fullname="Luis", email="luis@x.com", password_hash=hash_password("hunter2", 1000), avatar="uploads/avatars/luis.png"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_courses(db):
    courses = {
        "IS-121": Course(code="IS-121", name="Algorithms", cycle=3),
        "IS-122": Course(code="IS-122", name="Data Structures", cycle=3),
        "IS-111": Course(code="IS-111", name="Introduction to Programming", cycle=1),
    }
    for c in courses.values():
        db.add(c)
    db.commit()
    for c in courses.values():
        db.refresh(c)
    return courses


@pytest.fixture
def make_post(client):
    def _make_post(author, title="Post", content="Body", course_code="IS-121", cycle=3, files=None):
        resp = client.post(
            "/api/posts",
            data={
                "title": title,
                "content": content,
                "cycle": str(cycle),
                "course_code": course_code,
                "author_id": str(author.user_id),
            },
            files=files,
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["post"]

    return _make_post
