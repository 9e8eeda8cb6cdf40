from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin

if TYPE_CHECKING:
    from classhub.models.classroom import ClassRoom
    from classhub.models.comment import Comment
    from classhub.models.user import User


class FileUpload(IDMixin, CreatedAtMixin, Base):
    __tablename__ = "file_uploads"

    # Absolute URL under /public, built from the request that uploaded it
    file_path: Mapped[str] = mapped_column(String(1000), nullable=False)
    file_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    file_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    class_id: Mapped[int] = mapped_column(ForeignKey("classrooms.id"), nullable=False, index=True)

    user: Mapped["User"] = relationship(back_populates="file_uploads")
    classroom: Mapped["ClassRoom"] = relationship(back_populates="files")
    comments: Mapped[List["Comment"]] = relationship(back_populates="file", order_by="Comment.id")
