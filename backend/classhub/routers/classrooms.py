from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from classhub.core.errors import persistence_guard
from classhub.db.session import get_db
from classhub.schemas.base import MessageResponse
from classhub.schemas.classroom import (
    ClassMemberCreate,
    ClassMemberRead,
    ClassMemberWithUser,
    ClassRoomCreate,
    ClassRoomRead,
    ClassRoomWithMembers,
    MemberRoleUpdate,
)
from classhub.schemas.user import UserRead
from classhub.services import classrooms as classroom_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/classrooms", tags=["classrooms"])


@router.post("", response_model=ClassRoomRead, status_code=status.HTTP_201_CREATED)
def create_classroom(
    classroom_in: ClassRoomCreate,
    db: Session = Depends(get_db),
) -> ClassRoomRead:
    """Create a classroom; the creator joins it as ADMIN."""
    with persistence_guard(db, "Failed to create class"):
        classroom = classroom_service.create_classroom(
            db,
            name=classroom_in.name,
            description=classroom_in.description,
            creator_id=classroom_in.creator_id,
        )
        db.commit()
        db.refresh(classroom)
    logger.info("Classroom %s created by user %s", classroom.id, classroom.created_by)
    return ClassRoomRead.model_validate(classroom)


@router.post("/{class_id}/add-member", response_model=ClassMemberRead, status_code=status.HTTP_201_CREATED)
def add_member(
    member_in: ClassMemberCreate,
    class_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> ClassMemberRead:
    with persistence_guard(db, "Failed to add member"):
        member = classroom_service.add_member(
            db,
            class_id=class_id,
            user_id=member_in.user_id,
            role=member_in.role,
        )
        db.commit()
        db.refresh(member)
    return ClassMemberRead.model_validate(member)


@router.get("/{class_id}/members", response_model=List[ClassMemberWithUser])
def list_members(
    class_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[ClassMemberWithUser]:
    with persistence_guard(db, "Failed to fetch members"):
        members = classroom_service.list_members(db, class_id)
        return [ClassMemberWithUser.model_validate(member) for member in members]


@router.get("/{class_id}/available-members/{current_user_id}", response_model=List[UserRead])
def list_available_members(
    class_id: int = Path(..., gt=0),
    current_user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[UserRead]:
    with persistence_guard(db, "Failed to fetch available users"):
        users = classroom_service.list_available_members(
            db, class_id=class_id, current_user_id=current_user_id
        )
        return [UserRead.model_validate(user) for user in users]


@router.get("/{user_id}/classes", response_model=List[ClassRoomWithMembers])
def list_user_classes(
    user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[ClassRoomWithMembers]:
    with persistence_guard(db, "Failed to fetch classes"):
        classes = classroom_service.list_user_classes(db, user_id)
        return [ClassRoomWithMembers.model_validate(classroom) for classroom in classes]


@router.put("/{class_id}/update-member-role", response_model=MessageResponse)
def update_member_role(
    payload: MemberRoleUpdate,
    class_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> MessageResponse:
    with persistence_guard(db, "Failed to update role"):
        matched = classroom_service.update_member_role(
            db, class_id=class_id, user_id=payload.user_id, role=payload.role
        )
        if matched == 0:
            db.rollback()
        else:
            db.commit()
    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    logger.info("Role of user %s in class %s set to %s", payload.user_id, class_id, payload.role.value)
    return MessageResponse(message="Role updated successfully")
