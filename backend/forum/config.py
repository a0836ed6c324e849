"""Centralized application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./forum.db"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    LOG_LEVEL: str = "INFO"

    # File upload
    MAX_UPLOAD_SIZE: int = 20 * 1024 * 1024  # 20 MB
    MAX_POST_FILES: int = 5
    ALLOWED_EXTENSIONS: List[str] = [
        "jpg", "jpeg", "png", "gif", "webp",
        "pdf", "ppt", "pptx", "xls", "xlsx", "csv",
        "doc", "docx", "txt", "md", "zip",
        "py", "java", "c", "cpp", "js", "sql",
    ]
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp"]
    UPLOAD_DIR: str = "uploads"

    # Defaults applied to new profiles and feed entries
    DEFAULT_COURSE_NAME: str = "General Course"
    DEFAULT_BIO: str = "UNAM student"
    DEFAULT_LOCATION: str = "Moquegua, Peru"

    PASSWORD_HASH_ITERATIONS: int = 260_000

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
