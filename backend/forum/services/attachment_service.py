"""Attachment handling for post uploads: validates a batch, stores it, and builds attachment rows."""

import logging
import os
from typing import List, Optional

from fastapi import HTTPException, UploadFile

from forum.config import settings
from forum.models.post import PostAttachment
from forum.utils.helpers import save_upload, validate_file

logger = logging.getLogger(__name__)

POST_SUBFOLDER = "posts"


def _real_files(files: Optional[List[UploadFile]]) -> List[UploadFile]:
    # browsers send an empty part when the file input is left blank
    return [f for f in (files or []) if f is not None and f.filename]


def _remove_stored(stored: List[dict]):
    for info in stored:
        rel_path = info["path"].replace("uploads/", "", 1).replace("/", os.sep)
        abs_path = os.path.join(settings.UPLOAD_DIR, rel_path)
        if os.path.exists(abs_path):
            os.remove(abs_path)


def validate_batch(files: Optional[List[UploadFile]]) -> List[UploadFile]:
    real = _real_files(files)
    if len(real) > settings.MAX_POST_FILES:
        raise HTTPException(
            status_code=400,
            detail=f"A post accepts at most {settings.MAX_POST_FILES} files",
        )
    for file in real:
        validate_file(file)
    return real


async def store_attachments(files: Optional[List[UploadFile]], subfolder: str = POST_SUBFOLDER) -> List[dict]:
    real = validate_batch(files)
    stored: List[dict] = []
    try:
        for file in real:
            stored.append(await save_upload(file, subfolder=subfolder))
    except Exception:
        _remove_stored(stored)
        raise
    if stored:
        logger.info("stored %d attachment(s) under %s", len(stored), subfolder)
    return stored


def discard_attachments(stored: List[dict]):
    _remove_stored(stored)


def to_attachment_rows(stored: List[dict]) -> List[PostAttachment]:
    return [
        PostAttachment(
            original_name=info["original_name"],
            file_name=info["file_name"],
            path=info["path"],
            mime_type=info.get("mime_type"),
        )
        for info in stored
    ]
