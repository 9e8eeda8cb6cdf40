from __future__ import annotations

from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from classhub.models.assignment import Assignment
from classhub.models.assignment_assignee import AssignmentAssignmentTo
from classhub.models.submission import Submission


def _classroom_with_students(client, make_user, make_classroom, students: int = 3):
    teacher = make_user(name="Teacher")
    classroom = make_classroom(teacher)
    members = []
    for _ in range(students):
        student = make_user()
        client.post(f"/api/classrooms/{classroom['id']}/add-member", json={"userId": student.id})
        members.append(student)
    return teacher, classroom, members


def _create_assignment(client, class_id: int, created_by: int, **extra):
    payload = {"title": "Problem set 1", "description": "Chapter 1", "createdBy": created_by}
    payload.update(extra)
    return client.post(f"/api/classrooms/{class_id}/assignments", json=payload)


def test_create_assignment_fans_out_to_other_members(client, db: Session, make_user, make_classroom):
    teacher, classroom, students = _classroom_with_students(client, make_user, make_classroom)

    response = _create_assignment(client, classroom["id"], teacher.id)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Assignment created and assigned successfully"
    assignment_id = body["assignment"]["id"]
    assert body["assignment"]["classId"] == classroom["id"]
    assert body["assignment"]["fileId"] is None

    assigned = db.execute(
        select(AssignmentAssignmentTo.user_id).where(AssignmentAssignmentTo.assignment_id == assignment_id)
    ).scalars().all()
    assert sorted(assigned) == sorted(s.id for s in students)
    assert teacher.id not in assigned


def test_create_assignment_in_class_with_only_creator(client, db: Session, make_user, make_classroom):
    teacher, classroom, _ = _classroom_with_students(client, make_user, make_classroom, students=0)

    response = _create_assignment(client, classroom["id"], teacher.id)

    assert response.status_code == 201
    assert db.execute(select(func.count(AssignmentAssignmentTo.id))).scalar_one() == 0


def test_create_assignment_is_atomic(client, db: Session, make_user, make_classroom):
    teacher, classroom, _ = _classroom_with_students(client, make_user, make_classroom)

    # Unknown file reference fails the insert; no assignment or fan-out rows may remain
    response = _create_assignment(client, classroom["id"], teacher.id, fileId=12345)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create assignment"}
    assert db.execute(select(func.count(Assignment.id))).scalar_one() == 0
    assert db.execute(select(func.count(AssignmentAssignmentTo.id))).scalar_one() == 0


def test_create_assignment_requires_title(client, make_user, make_classroom):
    teacher, classroom, _ = _classroom_with_students(client, make_user, make_classroom, students=0)

    response = client.post(
        f"/api/classrooms/{classroom['id']}/assignments",
        json={"description": "no title", "createdBy": teacher.id},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "title"


def test_list_assignments_narrows_links_and_submissions_to_user(client, make_user, make_classroom):
    teacher, classroom, (first, second, _) = _classroom_with_students(client, make_user, make_classroom)
    upload = client.post(
        "/api/classrooms/upload",
        data={"userId": str(teacher.id), "classId": str(classroom["id"]), "fileName": "handout"},
        files={"file": ("handout.txt", b"read me", "text/plain")},
    ).json()["fileUpload"]
    assignment_id = _create_assignment(client, classroom["id"], teacher.id, fileId=upload["id"]).json()["assignment"]["id"]
    for student in (first, second):
        client.post(
            f"/api/classrooms/{assignment_id}/submit",
            data={"userId": str(student.id)},
            files={"file": (f"answer-{student.id}.txt", b"42", "text/plain")},
        )

    response = client.get(f"/api/classrooms/{classroom['id']}/{first.id}/assignments")

    assert response.status_code == 200
    assignments = response.json()
    assert len(assignments) == 1
    assignment = assignments[0]
    assert [link["userId"] for link in assignment["assignedTo"]] == [first.id]
    assert [sub["userId"] for sub in assignment["submissions"]] == [first.id]
    assert assignment["file"]["id"] == upload["id"]

    teacher_view = client.get(f"/api/classrooms/{classroom['id']}/{teacher.id}/assignments").json()
    assert teacher_view[0]["assignedTo"] == []
    assert teacher_view[0]["submissions"] == []


def test_submit_assignment_stores_file(client, db: Session, public_dir: Path, make_user, make_classroom):
    teacher, classroom, (student, *_) = _classroom_with_students(client, make_user, make_classroom)
    assignment_id = _create_assignment(client, classroom["id"], teacher.id).json()["assignment"]["id"]

    response = client.post(
        f"/api/classrooms/{assignment_id}/submit",
        data={"userId": str(student.id)},
        files={"file": ("essay.docx", b"essay body", "application/octet-stream")},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Assignment submitted successfully"
    submission = body["submission"]
    assert submission["fileName"] == "essay.docx"
    assert submission["grade"] == 0
    stored = Path(submission["filePath"])
    assert stored.suffix == ".docx"
    assert stored.parent == (public_dir / "submissions").resolve()
    assert stored.read_bytes() == b"essay body"


def test_submit_without_file_is_rejected(client, db: Session, make_user, make_classroom):
    teacher, classroom, (student, *_) = _classroom_with_students(client, make_user, make_classroom)
    assignment_id = _create_assignment(client, classroom["id"], teacher.id).json()["assignment"]["id"]

    response = client.post(f"/api/classrooms/{assignment_id}/submit", data={"userId": str(student.id)})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "file"
    assert db.execute(select(func.count(Submission.id))).scalar_one() == 0


def test_list_submissions_includes_user(client, make_user, make_classroom):
    teacher, classroom, (student, *_) = _classroom_with_students(client, make_user, make_classroom)
    assignment_id = _create_assignment(client, classroom["id"], teacher.id).json()["assignment"]["id"]
    client.post(
        f"/api/classrooms/{assignment_id}/submit",
        data={"userId": str(student.id)},
        files={"file": ("answer.txt", b"42", "text/plain")},
    )

    response = client.get(f"/api/classrooms/{assignment_id}/submissions")

    assert response.status_code == 200
    submissions = response.json()
    assert len(submissions) == 1
    assert submissions[0]["user"]["id"] == student.id
    assert submissions[0]["assignmentId"] == assignment_id
