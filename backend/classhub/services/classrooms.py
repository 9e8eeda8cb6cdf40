from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from classhub.models.classroom import ClassMember, ClassRoom
from classhub.models.enums import Role
from classhub.models.user import User


def create_classroom(db: Session, *, name: str, description: Optional[str], creator_id: int) -> ClassRoom:
    """Add a classroom and its creator's ADMIN membership to the session.

    Both rows are flushed together; the caller commits once so neither exists without the other.
    """
    classroom = ClassRoom(name=name, description=description, created_by=creator_id)
    classroom.members.append(ClassMember(user_id=creator_id, role=Role.ADMIN))
    db.add(classroom)
    db.flush()
    return classroom


def add_member(db: Session, *, class_id: int, user_id: int, role: Optional[Role] = None) -> ClassMember:
    member = ClassMember(class_id=class_id, user_id=user_id, role=role or Role.NORMAL)
    db.add(member)
    db.flush()
    return member


def list_members(db: Session, class_id: int) -> List[ClassMember]:
    query = (
        select(ClassMember)
        .where(ClassMember.class_id == class_id)
        .options(selectinload(ClassMember.user))
        .order_by(ClassMember.id.asc())
    )
    return list(db.execute(query).scalars().all())


def update_member_role(db: Session, *, class_id: int, user_id: int, role: Role) -> int:
    """Set the role on every matching membership row and return how many matched."""
    result = db.execute(
        update(ClassMember)
        .where(ClassMember.class_id == class_id, ClassMember.user_id == user_id)
        .values(role=role)
        .execution_options(synchronize_session="evaluate")
    )
    return result.rowcount or 0


def list_user_classes(db: Session, user_id: int) -> List[ClassRoom]:
    query = (
        select(ClassRoom)
        .where(ClassRoom.members.any(ClassMember.user_id == user_id))
        .options(selectinload(ClassRoom.members).selectinload(ClassMember.user))
        .order_by(ClassRoom.id.asc())
        .execution_options(populate_existing=True)
    )
    return list(db.execute(query).scalars().all())


def list_available_members(db: Session, *, class_id: int, current_user_id: int) -> List[User]:
    """Users who could be added to the class: everyone but the caller and existing members."""
    member_ids = select(ClassMember.user_id).where(ClassMember.class_id == class_id)
    query = (
        select(User)
        .where(User.id != current_user_id, User.id.not_in(member_ids))
        .order_by(User.id.asc())
    )
    return list(db.execute(query).scalars().all())
