import os
import time
import uuid
from typing import Iterable, Optional

from fastapi import UploadFile, HTTPException
from forum.config import settings


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def validate_file(file: UploadFile, allowed_extensions: Optional[Iterable[str]] = None) -> None:
    allowed = {ext.lower() for ext in (allowed_extensions or settings.ALLOWED_EXTENSIONS)}
    if not file.filename:
        raise HTTPException(status_code=400, detail="Uploaded file has no name")
    ext = file_extension(file.filename)
    if ext not in allowed:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{ext}' not allowed. Allowed: {', '.join(sorted(allowed))}",
        )


def storage_name(original_name: str) -> str:
    # millisecond prefix plus a short token keeps names unique within the same tick
    base = os.path.basename(original_name.replace("\\", "/")).replace(" ", "_")
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{base}"


async def save_upload(
    file: UploadFile,
    subfolder: str = "",
    allowed_extensions: Optional[Iterable[str]] = None,
) -> dict:
    validate_file(file, allowed_extensions)
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File exceeds {limit_mb} MB limit")

    folder = os.path.join(settings.UPLOAD_DIR, subfolder)
    os.makedirs(folder, exist_ok=True)

    filename = storage_name(file.filename)
    path = os.path.join(folder, filename)

    with open(path, "wb") as f:
        f.write(content)

    public_path = "/".join(part for part in ("uploads", subfolder, filename) if part)
    return {
        "original_name": file.filename,
        "file_name": filename,
        "path": public_path.replace("\\", "/"),
        "mime_type": file.content_type,
        "size": len(content),
    }
