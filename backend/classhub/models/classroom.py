from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin
from classhub.models.enums import Role

if TYPE_CHECKING:
    from classhub.models.assignment import Assignment
    from classhub.models.file_upload import FileUpload
    from classhub.models.post import Post
    from classhub.models.user import User


class ClassRoom(IDMixin, CreatedAtMixin, Base):
    __tablename__ = "classrooms"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_by: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    creator: Mapped["User"] = relationship(back_populates="classrooms_created")
    members: Mapped[List["ClassMember"]] = relationship(back_populates="classroom", order_by="ClassMember.id")
    posts: Mapped[List["Post"]] = relationship(back_populates="classroom")
    files: Mapped[List["FileUpload"]] = relationship(back_populates="classroom")
    assignments: Mapped[List["Assignment"]] = relationship(back_populates="classroom")


class ClassMember(IDMixin, Base):
    # (user_id, class_id) is deliberately not unique; duplicate rows are tolerated.
    __tablename__ = "class_members"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    class_id: Mapped[int] = mapped_column(ForeignKey("classrooms.id"), nullable=False, index=True)
    role: Mapped[Role] = mapped_column(
        SQLEnum(Role, name="role"),
        default=Role.NORMAL,
        server_default=Role.NORMAL.value,
        nullable=False,
    )

    user: Mapped["User"] = relationship(back_populates="memberships")
    classroom: Mapped["ClassRoom"] = relationship(back_populates="members")
