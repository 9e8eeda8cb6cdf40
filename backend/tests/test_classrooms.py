from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from classhub.models.classroom import ClassMember, ClassRoom
from classhub.models.enums import Role
from classhub.models.user import User


def _member_count(db: Session, class_id: int) -> int:
    return db.execute(select(func.count(ClassMember.id)).where(ClassMember.class_id == class_id)).scalar_one()


def test_create_classroom_adds_creator_as_admin(client, db: Session, make_user):
    creator = make_user()

    response = client.post(
        "/api/classrooms",
        json={"name": "Math101", "description": "intro", "creatorId": creator.id},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Math101"
    assert body["description"] == "intro"
    assert body["createdBy"] == creator.id

    members = db.execute(select(ClassMember).where(ClassMember.class_id == body["id"])).scalars().all()
    assert len(members) == 1
    assert members[0].user_id == creator.id
    assert members[0].role == Role.ADMIN


def test_create_classroom_validation_errors(client, db: Session):
    response = client.post("/api/classrooms", json={"name": "", "creatorId": 0})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"name", "description", "creatorId"} <= fields
    assert all(error["location"] == "body" for error in response.json()["errors"])
    assert db.execute(select(func.count(ClassRoom.id))).scalar_one() == 0


def test_create_classroom_rejects_non_string_name(client, make_user):
    creator = make_user()
    response = client.post(
        "/api/classrooms",
        json={"name": 42, "description": "intro", "creatorId": creator.id},
    )
    assert response.status_code == 400


def test_create_classroom_unknown_creator_is_generic_server_error(client, db: Session):
    response = client.post(
        "/api/classrooms",
        json={"name": "Ghost", "description": "no creator", "creatorId": 999},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create class"}
    assert db.execute(select(func.count(ClassRoom.id))).scalar_one() == 0
    assert db.execute(select(func.count(ClassMember.id))).scalar_one() == 0


def test_created_classroom_is_listed_for_creator(client, make_user, make_classroom):
    creator = make_user()
    classroom = make_classroom(creator)

    response = client.get(f"/api/classrooms/{creator.id}/classes")

    assert response.status_code == 200
    classes = response.json()
    assert [c["id"] for c in classes] == [classroom["id"]]
    assert classes[0]["members"][0]["user"]["email"] == creator.email
    assert classes[0]["members"][0]["role"] == "ADMIN"


def test_user_classes_rejects_non_positive_id(client):
    response = client.get("/api/classrooms/0/classes")
    assert response.status_code == 400
    assert response.json()["errors"][0]["location"] == "path"


def test_add_member_defaults_to_normal(client, make_user, make_classroom):
    creator, student = make_user(), make_user()
    classroom = make_classroom(creator)

    response = client.post(f"/api/classrooms/{classroom['id']}/add-member", json={"userId": student.id})

    assert response.status_code == 201
    body = response.json()
    assert body["userId"] == student.id
    assert body["classId"] == classroom["id"]
    assert body["role"] == "NORMAL"


def test_add_member_with_explicit_role(client, make_user, make_classroom):
    creator, helper = make_user(), make_user()
    classroom = make_classroom(creator)

    response = client.post(
        f"/api/classrooms/{classroom['id']}/add-member",
        json={"userId": helper.id, "role": "MODERATOR"},
    )

    assert response.status_code == 201
    assert response.json()["role"] == "MODERATOR"


def test_add_member_rejects_unknown_role(client, db: Session, make_user, make_classroom):
    creator, student = make_user(), make_user()
    classroom = make_classroom(creator)

    response = client.post(
        f"/api/classrooms/{classroom['id']}/add-member",
        json={"userId": student.id, "role": "OWNER"},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "role"
    assert _member_count(db, classroom["id"]) == 1


def test_list_members_includes_user_profile(client, make_user, make_classroom):
    creator, student = make_user(name="Ada"), make_user(name="Ben")
    classroom = make_classroom(creator)
    client.post(f"/api/classrooms/{classroom['id']}/add-member", json={"userId": student.id})

    response = client.get(f"/api/classrooms/{classroom['id']}/members")

    assert response.status_code == 200
    members = response.json()
    assert [(m["user"]["name"], m["role"]) for m in members] == [("Ada", "ADMIN"), ("Ben", "NORMAL")]
    assert "password" not in members[0]["user"]


def test_update_member_role(client, db: Session, make_user, make_classroom):
    creator, student = make_user(), make_user()
    classroom = make_classroom(creator)
    client.post(f"/api/classrooms/{classroom['id']}/add-member", json={"userId": student.id})

    response = client.put(
        f"/api/classrooms/{classroom['id']}/update-member-role",
        json={"userId": student.id, "role": "MODERATOR"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Role updated successfully"}
    member = db.execute(
        select(ClassMember).where(ClassMember.class_id == classroom["id"], ClassMember.user_id == student.id)
    ).scalar_one()
    db.refresh(member)
    assert member.role == Role.MODERATOR


def test_update_member_role_for_non_member_is_404(client, db: Session, make_user, make_classroom):
    creator, outsider = make_user(), make_user()
    classroom = make_classroom(creator)

    response = client.put(
        f"/api/classrooms/{classroom['id']}/update-member-role",
        json={"userId": outsider.id, "role": "ADMIN"},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Member not found"}
    roles = db.execute(select(ClassMember.role).where(ClassMember.class_id == classroom["id"])).scalars().all()
    assert roles == [Role.ADMIN]


def test_available_members_excludes_caller_and_members(client, db: Session, make_user, make_classroom):
    creator = make_user()
    member, outsider_a, outsider_b = make_user(), make_user(), make_user()
    classroom = make_classroom(creator)
    client.post(f"/api/classrooms/{classroom['id']}/add-member", json={"userId": member.id})

    response = client.get(f"/api/classrooms/{classroom['id']}/available-members/{creator.id}")

    assert response.status_code == 200
    ids = {user["id"] for user in response.json()}
    assert ids == {outsider_a.id, outsider_b.id}
    total = db.execute(select(func.count(User.id))).scalar_one()
    # total - caller - the one other member
    assert len(ids) == total - 1 - 1


def test_available_members_for_non_member_caller(client, db: Session, make_user, make_classroom):
    creator, caller, free = make_user(), make_user(), make_user()
    classroom = make_classroom(creator)

    response = client.get(f"/api/classrooms/{classroom['id']}/available-members/{caller.id}")

    assert response.status_code == 200
    ids = {user["id"] for user in response.json()}
    assert ids == {free.id}
    total = db.execute(select(func.count(User.id))).scalar_one()
    assert len(ids) == total - 1 - _member_count(db, classroom["id"])
