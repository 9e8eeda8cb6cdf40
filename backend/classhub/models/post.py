from __future__ import annotations

from typing import TYPE_CHECKING, List

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin
from classhub.models.enums import PostType

if TYPE_CHECKING:
    from classhub.models.classroom import ClassRoom
    from classhub.models.comment import Comment
    from classhub.models.user import User


class Post(IDMixin, CreatedAtMixin, Base):
    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    class_room_id: Mapped[int] = mapped_column(ForeignKey("classrooms.id"), nullable=False, index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    post_type: Mapped[PostType] = mapped_column(SQLEnum(PostType, name="posttype"), nullable=False)

    classroom: Mapped["ClassRoom"] = relationship(back_populates="posts")
    author: Mapped["User"] = relationship(back_populates="posts")
    comments: Mapped[List["Comment"]] = relationship(back_populates="post", order_by="Comment.id")
