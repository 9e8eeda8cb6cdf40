from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from classhub.models.enums import Role
from classhub.schemas.base import ORMModel
from classhub.schemas.user import UserRead


class ClassRoomCreate(ORMModel):
    name: str = Field(..., min_length=1, max_length=255, description="Class name")
    description: str = Field(..., min_length=1, description="Short description")
    creator_id: int = Field(..., gt=0, description="User creating the class; becomes its ADMIN")


class ClassRoomRead(ORMModel):
    id: int
    name: str
    description: Optional[str] = None
    created_by: int
    created_at: datetime


class ClassMemberCreate(ORMModel):
    user_id: int = Field(..., gt=0)
    role: Optional[Role] = Field(default=None, description="Defaults to NORMAL")


class ClassMemberRead(ORMModel):
    id: int
    user_id: int
    class_id: int
    role: Role


class ClassMemberWithUser(ClassMemberRead):
    user: UserRead


class ClassRoomWithMembers(ClassRoomRead):
    members: List[ClassMemberWithUser] = []


class MemberRoleUpdate(ORMModel):
    user_id: int = Field(..., gt=0)
    role: Role
