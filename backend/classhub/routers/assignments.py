from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile, status
from sqlalchemy.orm import Session

from classhub.core.errors import FieldValidationError, persistence_guard
from classhub.core.settings import settings
from classhub.db.session import get_db
from classhub.schemas.assignment import (
    AssignmentCreate,
    AssignmentCreateResponse,
    AssignmentDetail,
    AssignmentRead,
    SubmissionRead,
    SubmissionResponse,
    SubmissionWithUser,
)
from classhub.services import assignments as assignment_service
from classhub.services.storage import save_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/classrooms", tags=["assignments"])


@router.post(
    "/{class_id}/assignments",
    response_model=AssignmentCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_assignment(
    assignment_in: AssignmentCreate,
    class_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> AssignmentCreateResponse:
    """Create an assignment and assign it to every other class member in one transaction."""
    with persistence_guard(db, "Failed to create assignment"):
        assignment = assignment_service.create_assignment(
            db,
            class_id=class_id,
            title=assignment_in.title,
            description=assignment_in.description,
            created_by=assignment_in.created_by,
            file_id=assignment_in.file_id,
        )
        db.commit()
        db.refresh(assignment)
    return AssignmentCreateResponse(
        message="Assignment created and assigned successfully",
        assignment=AssignmentRead.model_validate(assignment),
    )


@router.get("/{class_id}/{user_id}/assignments", response_model=List[AssignmentDetail])
def list_assignments(
    class_id: int = Path(..., gt=0),
    user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[AssignmentDetail]:
    with persistence_guard(db, "Failed to fetch assignments"):
        assignments = assignment_service.list_assignments_for_user(db, class_id=class_id, user_id=user_id)
        return [AssignmentDetail.model_validate(assignment) for assignment in assignments]


@router.post("/{assignment_id}/submit", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def submit_assignment(
    assignment_id: int = Path(..., gt=0),
    file: Optional[UploadFile] = File(default=None),
    user_id: int = Form(..., alias="userId", gt=0),
    db: Session = Depends(get_db),
) -> SubmissionResponse:
    if file is None:
        raise FieldValidationError("file", "No file uploaded")

    with persistence_guard(db, "Failed to submit assignment"):
        storage_path = save_upload(file, settings.ensure_submissions_dir())
        submission = assignment_service.create_submission(
            db,
            assignment_id=assignment_id,
            user_id=user_id,
            file_name=file.filename or storage_path.name,
            storage_path=storage_path,
        )
        db.commit()
        db.refresh(submission)
    logger.info("User %s submitted assignment %s", user_id, assignment_id)
    return SubmissionResponse(
        message="Assignment submitted successfully",
        submission=SubmissionRead.model_validate(submission),
    )


@router.get("/{assignment_id}/submissions", response_model=List[SubmissionWithUser])
def list_submissions(
    assignment_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[SubmissionWithUser]:
    with persistence_guard(db, "Failed to fetch submissions"):
        submissions = assignment_service.list_submissions(db, assignment_id)
        return [SubmissionWithUser.model_validate(submission) for submission in submissions]
