from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from classhub.schemas.base import ORMModel
from classhub.schemas.user import UserRead


class CommentCreate(ORMModel):
    content: str = Field(..., min_length=1, max_length=5000)
    author_id: int = Field(..., gt=0)


class CommentRead(ORMModel):
    id: int
    content: str
    file_id: Optional[int] = None
    post_id: Optional[int] = None
    author_id: int
    created_at: datetime


class CommentWithAuthor(CommentRead):
    author: UserRead
