from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin

if TYPE_CHECKING:
    from classhub.models.assignment import Assignment
    from classhub.models.user import User


class Submission(IDMixin, CreatedAtMixin, Base):
    __tablename__ = "submissions"

    assignment_id: Mapped[int] = mapped_column(ForeignKey("assignments.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # On-disk location of the stored upload
    file_path: Mapped[str] = mapped_column(String(1000), nullable=False)
    grade: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)

    assignment: Mapped["Assignment"] = relationship(back_populates="submissions")
    user: Mapped["User"] = relationship(back_populates="submissions")
