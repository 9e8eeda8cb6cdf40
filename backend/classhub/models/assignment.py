from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin

if TYPE_CHECKING:
    from classhub.models.assignment_assignee import AssignmentAssignmentTo
    from classhub.models.classroom import ClassRoom
    from classhub.models.file_upload import FileUpload
    from classhub.models.submission import Submission
    from classhub.models.user import User


class Assignment(IDMixin, CreatedAtMixin, Base):
    __tablename__ = "assignments"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    class_id: Mapped[int] = mapped_column(ForeignKey("classrooms.id"), nullable=False, index=True)
    created_by: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    file_id: Mapped[Optional[int]] = mapped_column(ForeignKey("file_uploads.id"), nullable=True)

    classroom: Mapped["ClassRoom"] = relationship(back_populates="assignments")
    creator: Mapped["User"] = relationship(back_populates="assignments_created")
    file: Mapped[Optional["FileUpload"]] = relationship()
    assigned_to: Mapped[List["AssignmentAssignmentTo"]] = relationship(
        back_populates="assignment", order_by="AssignmentAssignmentTo.id"
    )
    submissions: Mapped[List["Submission"]] = relationship(
        back_populates="assignment", order_by="Submission.id"
    )
