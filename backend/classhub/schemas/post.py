from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import Field

from classhub.models.enums import PostType
from classhub.schemas.base import ORMModel
from classhub.schemas.comment import CommentRead
from classhub.schemas.user import UserRead


class PostCreate(ORMModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    class_room_id: int = Field(..., gt=0)
    author_id: int = Field(..., gt=0)
    post_type: PostType


class PostRead(ORMModel):
    id: int
    title: str
    content: str
    class_room_id: int
    author_id: int
    post_type: PostType
    created_at: datetime


class PostDetail(PostRead):
    author: UserRead
    comments: List[CommentRead] = []
