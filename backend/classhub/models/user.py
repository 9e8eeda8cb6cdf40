from __future__ import annotations

from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classhub.db.base import Base, CreatedAtMixin, IDMixin

if TYPE_CHECKING:
    from classhub.models.assignment import Assignment
    from classhub.models.assignment_assignee import AssignmentAssignmentTo
    from classhub.models.classroom import ClassMember, ClassRoom
    from classhub.models.comment import Comment
    from classhub.models.file_upload import FileUpload
    from classhub.models.post import Post
    from classhub.models.submission import Submission


class User(IDMixin, CreatedAtMixin, Base):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    classrooms_created: Mapped[List["ClassRoom"]] = relationship(back_populates="creator")
    memberships: Mapped[List["ClassMember"]] = relationship(back_populates="user")
    posts: Mapped[List["Post"]] = relationship(back_populates="author")
    comments: Mapped[List["Comment"]] = relationship(back_populates="author")
    file_uploads: Mapped[List["FileUpload"]] = relationship(back_populates="user")
    assignments_created: Mapped[List["Assignment"]] = relationship(back_populates="creator")
    assignment_links: Mapped[List["AssignmentAssignmentTo"]] = relationship(back_populates="user")
    submissions: Mapped[List["Submission"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User {self.email}>"
