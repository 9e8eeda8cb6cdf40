from __future__ import annotations

import argparse
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

import classhub.models  # noqa: F401
from classhub.core.logging import configure_logging
from classhub.core.security import get_password_hash
from classhub.core.settings import settings
from classhub.db.base import Base
from classhub.db.session import SessionLocal, engine
from classhub.models.classroom import ClassRoom
from classhub.models.enums import PostType, Role
from classhub.models.post import Post
from classhub.models.user import User
from classhub.services.assignments import create_assignment
from classhub.services.classrooms import add_member, create_classroom

logger = logging.getLogger(__name__)

DEMO_USERS = [
    ("Ada Teacher", "teacher@classhub.example.com"),
    ("Ben Student", "ben@classhub.example.com"),
    ("Cara Student", "cara@classhub.example.com"),
    ("Dan Helper", "dan@classhub.example.com"),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the ClassHub database with demo data")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables before seeding")
    parser.add_argument("--password", default="password", help="Password given to every demo user")
    return parser.parse_args(argv)


def reset_db() -> None:
    if settings.is_production:
        raise RuntimeError("Refusing to drop tables in production.")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def get_or_create_user(db: Session, *, name: str, email: str, password: str) -> User:
    user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if user:
        return user
    user = User(name=name, email=email, password=get_password_hash(password))
    db.add(user)
    db.flush()
    return user


def seed(db: Session, *, password: str = "password") -> ClassRoom | None:
    """Create demo users, one classroom with members, a post and an assignment.

    Returns the new classroom, or None when the demo classroom already exists.
    """
    users = [get_or_create_user(db, name=name, email=email, password=password) for name, email in DEMO_USERS]
    teacher, *students = users

    existing = db.execute(select(ClassRoom).where(ClassRoom.name == "Math101")).scalar_one_or_none()
    if existing:
        return None

    classroom = create_classroom(db, name="Math101", description="Intro to algebra", creator_id=teacher.id)
    add_member(db, class_id=classroom.id, user_id=students[0].id)
    add_member(db, class_id=classroom.id, user_id=students[1].id)
    add_member(db, class_id=classroom.id, user_id=students[2].id, role=Role.MODERATOR)

    db.add(
        Post(
            title="Welcome",
            content="Syllabus and office hours are pinned in the files tab.",
            class_room_id=classroom.id,
            author_id=teacher.id,
            post_type=PostType.MESSAGE,
        )
    )
    create_assignment(
        db,
        class_id=classroom.id,
        title="Problem set 1",
        description="Chapter 1, exercises 1-10",
        created_by=teacher.id,
    )
    db.commit()
    return classroom


def main(argv: list[str] | None = None) -> None:
    configure_logging(level=settings.log_level)
    args = parse_args(argv)
    if args.reset:
        reset_db()
    else:
        Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        classroom = seed(db, password=args.password)
    if classroom is None:
        logger.info("Seed appears to have already run. Use --reset to reseed.")
    else:
        logger.info("Seeded classroom %s", classroom.id)


if __name__ == "__main__":
    main()
