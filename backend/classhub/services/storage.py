from __future__ import annotations

import logging
import time
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

logger = logging.getLogger(__name__)


def stored_filename(original_name: str | None) -> str:
    """Millisecond timestamp plus the original extension.

    A short random suffix keeps two uploads in the same millisecond apart.
    """
    # Sanitize filename to prevent path traversal
    safe_name = Path(original_name or "upload.bin").name
    suffix = Path(safe_name).suffix
    return f"{int(time.time() * 1000)}-{uuid4().hex[:8]}{suffix}"


def save_upload(file: UploadFile, directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    storage_path = directory / stored_filename(file.filename)
    content = file.file.read()
    storage_path.write_bytes(content)
    logger.info("Stored upload %s (%d bytes) at %s", file.filename, len(content), storage_path)
    return storage_path
