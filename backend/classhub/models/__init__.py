"""Import all models so SQLAlchemy metadata is fully registered."""

from classhub.db.base import Base

from classhub.models.assignment import Assignment
from classhub.models.assignment_assignee import AssignmentAssignmentTo
from classhub.models.classroom import ClassMember, ClassRoom
from classhub.models.comment import Comment
from classhub.models.enums import PostType, Role
from classhub.models.file_upload import FileUpload
from classhub.models.post import Post
from classhub.models.submission import Submission
from classhub.models.user import User

__all__ = [
    "Base",
    "Assignment",
    "AssignmentAssignmentTo",
    "ClassMember",
    "ClassRoom",
    "Comment",
    "FileUpload",
    "Post",
    "PostType",
    "Role",
    "Submission",
    "User",
]
