"""SQLAlchemy model for forum users."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from forum.config import settings
from forum.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    fullname = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(500), default="")
    bio = Column(Text, default=lambda: settings.DEFAULT_BIO)
    cycle = Column(Integer, default=1)
    location = Column(String(150), default=lambda: settings.DEFAULT_LOCATION)
    joined_at = Column(DateTime, server_default=func.now())
    interests = Column(Text, default="")
    facebook = Column(String(300), default="")
    github = Column(String(300), default="")
    linkedin = Column(String(300), default="")

    posts = relationship("Post", back_populates="author")
    comments = relationship("Comment", back_populates="author")

    @property
    def socials(self) -> dict:
        return {
            "facebook": self.facebook or "",
            "github": self.github or "",
            "linkedin": self.linkedin or "",
        }
