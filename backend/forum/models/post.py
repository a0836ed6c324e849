"""SQLAlchemy models for posts and their attachments."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from forum.database import Base


class Post(Base):
    __tablename__ = "post"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("course.course_id"), nullable=False)
    cycle = Column(Integer, nullable=False)
    views = Column(Integer, nullable=False, default=0)
    comments_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    author = relationship("User", back_populates="posts")
    course = relationship("Course", back_populates="posts")
    attachments = relationship(
        "PostAttachment",
        back_populates="post",
        order_by="PostAttachment.attachment_id",
        lazy="selectin",
        cascade="all, delete-orphan",
    )
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_post_created", "created_at"),
    )


class PostAttachment(Base):
    __tablename__ = "post_attachment"

    attachment_id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("post.post_id", ondelete="CASCADE"), nullable=False)
    original_name = Column(String(255), nullable=False)
    file_name = Column(String(400), unique=True, nullable=False)
    path = Column(String(500), nullable=False)
    mime_type = Column(String(150))

    post = relationship("Post", back_populates="attachments")

    __table_args__ = (
        Index("idx_post_attachment_post", "post_id"),
    )
