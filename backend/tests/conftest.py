from __future__ import annotations

import os
import tempfile

# Settings are read once at import time; point them somewhere harmless first.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")
os.environ.setdefault("PUBLIC_DIR", tempfile.mkdtemp(prefix="classhub-public-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from classhub.core.security import get_password_hash
from classhub.core.settings import settings
from classhub.db.base import Base
from classhub.db.session import enable_sqlite_foreign_keys, get_db
from classhub.main import app
from classhub.models.user import User


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db(engine):
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def public_dir():
    # /public is mounted once at import, so tests share the directory PUBLIC_DIR points at.
    return settings.ensure_public_dir()


@pytest.fixture()
def client(db: Session, public_dir):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    client_instance = TestClient(app)
    try:
        yield client_instance
    finally:
        client_instance.close()
        app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db: Session):
    counter = {"n": 0}

    def _make_user(name: str | None = None, email: str | None = None, password: str = "secret-pass") -> User:
        counter["n"] += 1
        user = User(
            name=name or f"User {counter['n']}",
            email=email or f"user{counter['n']}@example.com",
            password=get_password_hash(password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_classroom(client):
    def _make_classroom(creator: User, name: str = "Math101", description: str = "intro") -> dict:
        response = client.post(
            "/api/classrooms",
            json={"name": name, "description": description, "creatorId": creator.id},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_classroom
