from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, IDMixin, utcnow

if TYPE_CHECKING:
    from classhub.models.assignment import Assignment
    from classhub.models.user import User


class AssignmentAssignmentTo(IDMixin, Base):
    """Links an assignment to one member it was handed out to."""

    __tablename__ = "assignment_assignment_to"

    assignment_id: Mapped[int] = mapped_column(ForeignKey("assignments.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    assignment: Mapped["Assignment"] = relationship(back_populates="assigned_to")
    user: Mapped["User"] = relationship(back_populates="assignment_links")
