from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin

if TYPE_CHECKING:
    from classhub.models.file_upload import FileUpload
    from classhub.models.post import Post
    from classhub.models.user import User


class Comment(IDMixin, CreatedAtMixin, Base):
    """A comment on an uploaded file or on a post; exactly one target is set."""

    __tablename__ = "comments"

    content: Mapped[str] = mapped_column(Text, nullable=False)
    file_id: Mapped[Optional[int]] = mapped_column(ForeignKey("file_uploads.id"), nullable=True, index=True)
    post_id: Mapped[Optional[int]] = mapped_column(ForeignKey("posts.id"), nullable=True, index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    file: Mapped[Optional["FileUpload"]] = relationship(back_populates="comments")
    post: Mapped[Optional["Post"]] = relationship(back_populates="comments")
    author: Mapped["User"] = relationship(back_populates="comments")
