from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, Request, UploadFile, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from classhub.core.errors import FieldValidationError, persistence_guard
from classhub.core.settings import settings
from classhub.db.session import get_db
from classhub.models.comment import Comment
from classhub.models.file_upload import FileUpload
from classhub.schemas.comment import CommentCreate, CommentRead, CommentWithAuthor
from classhub.schemas.file_upload import FileUploadDetail, FileUploadRead, FileUploadResponse
from classhub.services.storage import save_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/classrooms", tags=["files"])


@router.post("/upload", response_model=FileUploadResponse, status_code=status.HTTP_201_CREATED)
def upload_file(
    request: Request,
    file: Optional[UploadFile] = File(default=None),
    file_type: Optional[str] = Form(default=None, alias="fileType"),
    user_id: int = Form(..., alias="userId", gt=0),
    class_id: int = Form(..., alias="classId", gt=0),
    file_name: Optional[str] = Form(default=None, alias="fileName"),
    db: Session = Depends(get_db),
) -> FileUploadResponse:
    """Store a class file under /public and record where it can be fetched."""
    if file is None:
        raise FieldValidationError("file", "No file uploaded")

    with persistence_guard(db, "Failed to save file metadata"):
        storage_path = save_upload(file, settings.ensure_public_dir())
        file_url = str(request.url_for("public", path=storage_path.name))
        upload = FileUpload(
            file_path=file_url,
            file_type=file_type or file.content_type,
            user_id=user_id,
            class_id=class_id,
            file_name=file_name or file.filename,
        )
        db.add(upload)
        db.commit()
        db.refresh(upload)

    return FileUploadResponse(
        message="File uploaded successfully",
        file_upload=FileUploadRead.model_validate(upload),
    )


@router.get("/{class_id}/files", response_model=List[FileUploadDetail])
def list_files(
    class_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[FileUploadDetail]:
    query = (
        select(FileUpload)
        .where(FileUpload.class_id == class_id)
        .options(
            selectinload(FileUpload.user),
            selectinload(FileUpload.classroom),
            selectinload(FileUpload.comments).selectinload(Comment.author),
        )
        .order_by(FileUpload.id.asc())
        .execution_options(populate_existing=True)
    )
    with persistence_guard(db, "Failed to fetch files"):
        files = db.execute(query).scalars().all()
        return [FileUploadDetail.model_validate(upload) for upload in files]


@router.post(
    "/{class_id}/files/{file_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def add_file_comment(
    comment_in: CommentCreate,
    class_id: int = Path(..., gt=0),
    file_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> CommentRead:
    with persistence_guard(db, "Failed to add comment"):
        comment = Comment(content=comment_in.content, file_id=file_id, author_id=comment_in.author_id)
        db.add(comment)
        db.commit()
        db.refresh(comment)
    return CommentRead.model_validate(comment)


@router.get("/files/{file_id}/comments", response_model=List[CommentWithAuthor])
def list_file_comments(
    file_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[CommentWithAuthor]:
    query = (
        select(Comment)
        .where(Comment.file_id == file_id)
        .options(selectinload(Comment.author))
        .order_by(Comment.id.asc())
    )
    with persistence_guard(db, "Failed to fetch comments"):
        comments = db.execute(query).scalars().all()
        return [CommentWithAuthor.model_validate(comment) for comment in comments]
