from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, Field

from classhub.schemas.base import ORMModel
from classhub.schemas.classroom import ClassRoomRead
from classhub.schemas.comment import CommentWithAuthor
from classhub.schemas.user import UserRead


class FileUploadRead(ORMModel):
    id: int
    file_path: str
    file_type: Optional[str] = None
    file_name: Optional[str] = None
    user_id: int
    class_id: int
    created_at: datetime


class FileUploadDetail(FileUploadRead):
    user: UserRead
    classroom: ClassRoomRead = Field(validation_alias=AliasChoices("classroom", "class"), serialization_alias="class")
    comments: List[CommentWithAuthor] = []


class FileUploadResponse(ORMModel):
    message: str
    file_upload: FileUploadRead
