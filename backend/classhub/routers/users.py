from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from classhub.core.errors import persistence_guard
from classhub.core.security import create_access_token, get_password_hash, verify_password
from classhub.db.session import get_db
from classhub.models.user import User
from classhub.schemas.user import LoginPayload, TokenResponse, UserCreate, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


def _find_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
) -> UserRead:
    with persistence_guard(db, "Failed to create user"):
        if _find_by_email(db, user_in.email):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
        user = User(
            name=user_in.name,
            email=user_in.email,
            password=get_password_hash(user_in.password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    logger.info("User %s registered", user.id)
    return UserRead.model_validate(user)


@router.get("", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)) -> List[UserRead]:
    with persistence_guard(db, "Failed to fetch users"):
        users = db.execute(select(User).order_by(User.id.asc())).scalars().all()
        return [UserRead.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
) -> UserRead:
    with persistence_guard(db, "Failed to fetch user"):
        user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginPayload,
    db: Session = Depends(get_db),
) -> TokenResponse:
    with persistence_guard(db, "Failed to log in"):
        user = _find_by_email(db, payload.email)
    if not user or not verify_password(payload.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = create_access_token({"sub": str(user.id)})
    return TokenResponse(access_token=token, user=UserRead.model_validate(user))
