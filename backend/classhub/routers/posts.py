from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from classhub.core.errors import persistence_guard
from classhub.db.session import get_db
from classhub.models.comment import Comment
from classhub.models.post import Post
from classhub.schemas.comment import CommentCreate, CommentRead
from classhub.schemas.post import PostCreate, PostDetail, PostRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
) -> PostRead:
    with persistence_guard(db, "Failed to create post"):
        post = Post(
            title=post_in.title,
            content=post_in.content,
            class_room_id=post_in.class_room_id,
            author_id=post_in.author_id,
            post_type=post_in.post_type,
        )
        db.add(post)
        db.commit()
        db.refresh(post)
    return PostRead.model_validate(post)


@router.get("/{class_room_id}/posts", response_model=List[PostDetail])
def list_posts(
    class_room_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> List[PostDetail]:
    """Posts of a classroom with their author and comments."""
    query = (
        select(Post)
        .where(Post.class_room_id == class_room_id)
        .options(selectinload(Post.author), selectinload(Post.comments))
        .order_by(Post.id.asc())
        .execution_options(populate_existing=True)
    )
    with persistence_guard(db, "Failed to fetch posts"):
        posts = db.execute(query).scalars().all()
        return [PostDetail.model_validate(post) for post in posts]


@router.post("/{post_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def add_post_comment(
    comment_in: CommentCreate,
    post_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> CommentRead:
    with persistence_guard(db, "Failed to add comment"):
        comment = Comment(content=comment_in.content, post_id=post_id, author_id=comment_in.author_id)
        db.add(comment)
        db.commit()
        db.refresh(comment)
    return CommentRead.model_validate(comment)
