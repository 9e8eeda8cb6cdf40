from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from classhub.core.security import decode_token, verify_password
from classhub.models.user import User


def test_create_user_hashes_password(client, db: Session):
    response = client.post(
        "/api/users",
        json={"name": "Ada", "email": "ada@example.com", "password": "correct-horse"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "ada@example.com"
    assert "password" not in body

    user = db.execute(select(User).where(User.email == "ada@example.com")).scalar_one()
    assert user.password != "correct-horse"
    assert verify_password("correct-horse", user.password)


def test_create_user_duplicate_email_conflicts(client, make_user):
    make_user(email="taken@example.com")

    response = client.post(
        "/api/users",
        json={"name": "Other", "email": "taken@example.com", "password": "another-pass"},
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


def test_create_user_validates_email(client):
    response = client.post("/api/users", json={"name": "Bad", "email": "not-an-email", "password": "secret-pass"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"


def test_list_and_get_users(client, make_user):
    first, second = make_user(name="Ada"), make_user(name="Ben")

    listed = client.get("/api/users")
    assert [u["name"] for u in listed.json()] == ["Ada", "Ben"]

    fetched = client.get(f"/api/users/{second.id}")
    assert fetched.status_code == 200
    assert fetched.json()["id"] == second.id

    missing = client.get("/api/users/999")
    assert missing.status_code == 404
    assert missing.json() == {"error": "User not found"}


def test_login_returns_token_for_user(client, make_user):
    user = make_user(email="login@example.com", password="s3cret-pass")

    response = client.post("/api/users/login", json={"email": "login@example.com", "password": "s3cret-pass"})

    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["id"] == user.id
    assert decode_token(body["accessToken"])["sub"] == str(user.id)


def test_login_rejects_bad_password(client, make_user):
    make_user(email="login@example.com", password="s3cret-pass")

    response = client.post("/api/users/login", json={"email": "login@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"error": "Incorrect email or password"}
