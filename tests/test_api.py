# /tests/test_api.py

"""
End-to-end flows through the HTTP API, using the same in-memory database as
the service tests.
"""

from portal.core.errors import StorageError
from portal.services.database_service import DatabaseService

LINKS = {"github_url": "https://github.com/u/r", "video_url": "https://youtube.com/watch?v=x"}

# --- Auth ---

def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["status"]

def test_login_and_me(client, student_p1):
    response = client.post("/api/auth/token", data={"username": "s1@portal.test", "password": "secret1"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["role"] == "student"
    assert me.json()["phase"] == "phase1"

def test_login_with_wrong_password(client, student_p1):
    response = client.post("/api/auth/token", data={"username": "s1@portal.test", "password": "nope"})
    assert response.status_code == 401

def test_routes_require_a_valid_token(client, admin):
    assert client.get("/api/admin/students").status_code == 401
    assert client.get("/api/admin/students", headers={"Authorization": "Bearer garbage"}).status_code == 401

def test_roles_are_enforced(client, admin_headers, p1_headers):
    assert client.get("/api/admin/students", headers=p1_headers).status_code == 403
    assert client.get("/api/student/assignments", headers=admin_headers).status_code == 403

# --- Admin: students ---

def test_admin_provisions_and_manages_a_student(client, admin_headers):
    payload = {"email": "new@portal.test", "password": "hunter22", "full_name": "New Student", "phase": "phase2"}
    created = client.post("/api/admin/students", json=payload, headers=admin_headers)
    assert created.status_code == 201
    student_id = created.json()["id"]

    duplicate = client.post("/api/admin/students", json=payload, headers=admin_headers)
    assert duplicate.status_code == 409

    moved = client.patch(f"/api/admin/students/{student_id}/phase", json={"phase": "phase1"}, headers=admin_headers)
    assert moved.status_code == 200
    assert moved.json()["phase"] == "phase1"

    assert client.delete(f"/api/admin/students/{student_id}", headers=admin_headers).status_code == 204
    assert client.delete(f"/api/admin/students/{student_id}", headers=admin_headers).status_code == 404

def test_invalid_student_payload_is_rejected(client, admin_headers):
    payload = {"email": "not-an-email", "password": "123", "full_name": "X"}
    assert client.post("/api/admin/students", json=payload, headers=admin_headers).status_code == 422

# --- Admin: content ---

def test_content_without_target_phase_is_rejected(client, admin_headers):
    response = client.post("/api/admin/assignments", json={"title": "No audience"}, headers=admin_headers)
    assert response.status_code == 422

def test_content_crud(client, admin_headers):
    quiz = client.post(
        "/api/admin/quizzes",
        json={"title": "Quiz 1", "description": "Basics", "target_phase": "phase2"},
        headers=admin_headers,
    )
    assert quiz.status_code == 201
    assert quiz.json()["time_limit_minutes"] == 30

    project = client.post(
        "/api/admin/projects",
        json={"title": "Capstone", "target_phase": "both", "is_collaborative": True},
        headers=admin_headers,
    )
    assert project.json()["is_collaborative"] is True

    assert [q["title"] for q in client.get("/api/admin/quizzes", headers=admin_headers).json()] == ["Quiz 1"]
    assert client.delete(f"/api/admin/quizzes/{quiz.json()['id']}", headers=admin_headers).status_code == 204
    assert client.get("/api/admin/quizzes", headers=admin_headers).json() == []
    assert client.delete("/api/admin/quizzes/qiz_missing", headers=admin_headers).status_code == 404

# --- The full grading flow ---

def test_submit_grade_and_view(client, admin_headers, p1_headers, p2_headers):
    created = client.post(
        "/api/admin/assignments",
        json={"title": "Assignment A", "description": "Build it", "target_phase": "phase1"},
        headers=admin_headers,
    )
    assignment_id = created.json()["id"]

    # Phase 2 never sees it, and cannot submit to it.
    assert client.get("/api/student/assignments", headers=p2_headers).json() == []
    hidden = client.post(f"/api/student/assignments/{assignment_id}/submission", json=LINKS, headers=p2_headers)
    assert hidden.status_code == 404

    listing = client.get("/api/student/assignments", headers=p1_headers).json()
    assert listing[0]["status"] == "unsubmitted"

    submitted = client.post(f"/api/student/assignments/{assignment_id}/submission", json=LINKS, headers=p1_headers)
    assert submitted.status_code == 201
    assert submitted.json()["status"] == "pending"

    again = client.post(f"/api/student/assignments/{assignment_id}/submission", json=LINKS, headers=p1_headers)
    assert again.status_code == 409

    queue = client.get("/api/admin/submissions/assignment?status=pending", headers=admin_headers).json()
    assert len(queue) == 1
    assert queue[0]["item_title"] == "Assignment A"

    graded = client.post(
        f"/api/admin/submissions/assignment/{queue[0]['id']}/grade",
        json={"grade": 85, "max_grade": 100, "feedback": "Good work"},
        headers=admin_headers,
    )
    assert graded.status_code == 201

    regrade = client.post(
        f"/api/admin/submissions/assignment/{queue[0]['id']}/grade",
        json={"grade": 90},
        headers=admin_headers,
    )
    assert regrade.status_code == 409

    assert client.get("/api/admin/submissions/assignment?status=pending", headers=admin_headers).json() == []

    view = client.get("/api/student/assignments", headers=p1_headers).json()[0]
    assert view["status"] == "graded"
    assert f"Grade: {view['grade']['grade']:g}/{view['grade']['max_grade']:g}" == "Grade: 85/100"
    assert view["grade"]["feedback"] == "Good work"
    assert view["percentage"] == 85.0
    print("\n✅ SUCCESS: test_submit_grade_and_view passed.")

def test_missing_links_are_rejected(client, admin_headers, p1_headers):
    created = client.post("/api/admin/projects", json={"title": "P", "target_phase": "both"}, headers=admin_headers)
    response = client.post(
        f"/api/student/projects/{created.json()['id']}/submission",
        json={"github_url": "https://github.com/u/r"},
        headers=p1_headers,
    )
    assert response.status_code == 422

def test_quiz_flow(client, admin_headers, p1_headers):
    quiz_id = client.post("/api/admin/quizzes", json={"title": "Q", "target_phase": "both"}, headers=admin_headers).json()["id"]

    started = client.post(f"/api/student/quizzes/{quiz_id}/start", headers=p1_headers)
    assert started.status_code == 201
    assert started.json()["status"] == "in_progress"

    submitted = client.post(f"/api/student/quizzes/{quiz_id}/submission", json=LINKS, headers=p1_headers)
    assert submitted.status_code == 201
    assert submitted.json()["status"] == "submitted"

    queue = client.get("/api/admin/submissions/quiz?status=submitted", headers=admin_headers).json()
    assert [s["id"] for s in queue] == [started.json()["id"]]

# --- Attendance ---

def test_attendance_flow(client, admin_headers, p1_headers, student_p1, student_p2):
    day = "2024-03-04"
    for status in ("present", "late"):
        response = client.put(
            "/api/admin/attendance",
            json={"student_id": student_p1.id, "date": day, "status": status},
            headers=admin_headers,
        )
        assert response.status_code == 200

    roster = client.get(f"/api/admin/attendance?date={day}", headers=admin_headers).json()
    by_email = {entry["student"]["email"]: entry["attendance"] for entry in roster}
    assert by_email["s1@portal.test"]["status"] == "late"
    assert by_email["s2@portal.test"] is None

    mine = client.get("/api/student/attendance", headers=p1_headers).json()
    assert len(mine["records"]) == 1
    assert mine["summary"]["rate"] == 100.0

    unknown = client.put(
        "/api/admin/attendance",
        json={"student_id": "nobody", "date": day, "status": "present"},
        headers=admin_headers,
    )
    assert unknown.status_code == 404

def test_dashboard(client, admin_headers, student_p1):
    response = client.get("/api/admin/dashboard/summary", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["studentCount"] == 1
    assert body["averageGradePercentage"] is None
    assert body["todayAttendance"]["total"] == 0

def test_deleted_user_token_is_rejected(client, db_service, student_p1, p1_headers):
    headers = p1_headers
    db_service.delete_user(student_p1.id)
    assert client.get("/api/auth/me", headers=headers).status_code == 401

def test_quiz_submitted_without_a_start_is_created(client, admin_headers, p1_headers):
    quiz_id = client.post("/api/admin/quizzes", json={"title": "Pop quiz", "target_phase": "phase1"}, headers=admin_headers).json()["id"]
    submitted = client.post(f"/api/student/quizzes/{quiz_id}/submission", json=LINKS, headers=p1_headers)
    assert submitted.status_code == 201
    assert submitted.json()["status"] == "submitted"

def test_status_filter_only_accepts_stored_statuses(client, admin_headers):
    response = client.get("/api/admin/submissions/assignment?status=unsubmitted", headers=admin_headers)
    assert response.status_code == 422
    assert client.get("/api/admin/submissions/assignment?status=graded", headers=admin_headers).status_code == 200

# --- Storage failures ---

def test_storage_failure_on_a_student_read_is_reported_verbatim(mocker, client, p1_headers):
    mocker.patch.object(
        DatabaseService, "query",
        side_effect=StorageError("Querying assignments failed: disk I/O error"),
    )
    response = client.get("/api/student/assignments", headers=p1_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Querying assignments failed: disk I/O error"
    print("\n✅ SUCCESS: test_storage_failure_on_a_student_read_is_reported_verbatim passed.")

def test_storage_failure_on_an_admin_read_is_reported_verbatim(mocker, client, admin_headers):
    mocker.patch.object(
        DatabaseService, "get_submissions",
        side_effect=StorageError("Listing quiz submissions failed: database is locked"),
    )
    response = client.get("/api/admin/submissions/quiz", headers=admin_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Listing quiz submissions failed: database is locked"
