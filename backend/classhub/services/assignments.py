from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from classhub.models.assignment import Assignment
from classhub.models.assignment_assignee import AssignmentAssignmentTo
from classhub.models.classroom import ClassMember
from classhub.models.submission import Submission

logger = logging.getLogger(__name__)


def assignee_ids_for_class(db: Session, *, class_id: int, exclude_user_id: int) -> List[int]:
    query = (
        select(ClassMember.user_id)
        .where(ClassMember.class_id == class_id, ClassMember.user_id != exclude_user_id)
        .order_by(ClassMember.id.asc())
    )
    return list(db.execute(query).scalars().all())


def create_assignment(
    db: Session,
    *,
    class_id: int,
    title: str,
    description: Optional[str],
    created_by: int,
    file_id: Optional[int] = None,
) -> Assignment:
    """Add an assignment and assign it to every other member of the class.

    One AssignmentAssignmentTo row per membership row; the caller commits both in one transaction.
    """
    assignment = Assignment(
        title=title,
        description=description,
        class_id=class_id,
        created_by=created_by,
        file_id=file_id,
    )
    db.add(assignment)
    db.flush()

    user_ids = assignee_ids_for_class(db, class_id=class_id, exclude_user_id=created_by)
    db.add_all(AssignmentAssignmentTo(assignment_id=assignment.id, user_id=user_id) for user_id in user_ids)
    db.flush()
    logger.info("Assignment %s assigned to %d members of class %s", assignment.id, len(user_ids), class_id)
    return assignment


def list_assignments_for_user(db: Session, *, class_id: int, user_id: int) -> List[Assignment]:
    """Assignments of a class with assignment links and submissions narrowed to one user."""
    query = (
        select(Assignment)
        .where(Assignment.class_id == class_id)
        .options(
            selectinload(Assignment.assigned_to.and_(AssignmentAssignmentTo.user_id == user_id)),
            selectinload(Assignment.submissions.and_(Submission.user_id == user_id)),
            joinedload(Assignment.file),
        )
        .order_by(Assignment.id.asc())
        # The filtered collections must replace anything already loaded in this session
        .execution_options(populate_existing=True)
    )
    return list(db.execute(query).scalars().unique().all())


def create_submission(
    db: Session,
    *,
    assignment_id: int,
    user_id: int,
    file_name: str,
    storage_path: Path,
) -> Submission:
    submission = Submission(
        assignment_id=assignment_id,
        user_id=user_id,
        file_name=file_name,
        file_path=str(storage_path),
    )
    db.add(submission)
    db.flush()
    return submission


def list_submissions(db: Session, assignment_id: int) -> List[Submission]:
    query = (
        select(Submission)
        .where(Submission.assignment_id == assignment_id)
        .options(selectinload(Submission.user))
        .order_by(Submission.id.asc())
    )
    return list(db.execute(query).scalars().all())
