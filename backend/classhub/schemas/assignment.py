from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from classhub.schemas.base import ORMModel
from classhub.schemas.file_upload import FileUploadRead
from classhub.schemas.user import UserRead


class AssignmentCreate(ORMModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    created_by: int = Field(..., gt=0)
    file_id: Optional[int] = Field(default=None, gt=0)


class AssignmentRead(ORMModel):
    id: int
    title: str
    description: Optional[str] = None
    class_id: int
    created_by: int
    file_id: Optional[int] = None
    created_at: datetime


class AssignmentAssignmentToRead(ORMModel):
    id: int
    assignment_id: int
    user_id: int
    assigned_at: datetime


class SubmissionRead(ORMModel):
    id: int
    assignment_id: int
    user_id: int
    file_name: str
    file_path: str
    grade: int
    created_at: datetime


class SubmissionWithUser(SubmissionRead):
    user: UserRead


class AssignmentDetail(AssignmentRead):
    """An assignment as seen by one user: only that user's links and submissions."""

    assigned_to: List[AssignmentAssignmentToRead] = []
    submissions: List[SubmissionRead] = []
    file: Optional[FileUploadRead] = None


class AssignmentCreateResponse(ORMModel):
    message: str
    assignment: AssignmentRead


class SubmissionResponse(ORMModel):
    message: str
    submission: SubmissionRead
