# /tests/test_submission_service.py

import pytest
from sqlalchemy.exc import OperationalError

from portal.core.errors import DuplicateRecordError, InvalidTransitionError, RecordNotFoundError, StorageError
from portal.models.content_model import ContentKind
from portal.models.submission_model import GradeCreate, SubmissionCreate
from portal.services import content_service, submission_service

# --- Test Data Fixtures ---

@pytest.fixture
def links():
    return SubmissionCreate(github_url="https://github.com/sam/loops", video_url="https://youtu.be/loops")

# --- Submitting ---

@pytest.mark.parametrize("kind", [ContentKind.ASSIGNMENT, ContentKind.PROJECT])
def test_submit_creates_pending_submission(db_service, make_item, student_p1, links, kind):
    item = make_item(kind, target_phase="phase1")
    submission = submission_service.submit_work(kind, item.id, student_p1, links, db_service)
    assert submission.status == "pending"
    assert submission.item_id == item.id
    assert submission.github_url == "https://github.com/sam/loops"

def test_second_submission_is_rejected(db_service, make_item, student_p1, links):
    item = make_item()
    submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p1, links, db_service)
    with pytest.raises(DuplicateRecordError):
        submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p1, links, db_service)
    assert len(db_service.get_submissions("assignment")) == 1

def test_store_rejects_duplicates_even_without_the_precheck(db_service, make_item, student_p1):
    item = make_item()
    record = {"assignment_id": item.id, "student_id": student_p1.id, "github_url": "g", "video_url": "v", "status": "pending"}
    db_service.add_submission("assignment", {"id": "sub_first", **record})
    with pytest.raises(DuplicateRecordError):
        db_service.add_submission("assignment", {"id": "sub_second", **record})

def test_cannot_submit_to_an_item_for_another_phase(db_service, make_item, student_p2, links):
    item = make_item(target_phase="phase1")
    with pytest.raises(RecordNotFoundError):
        submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p2, links, db_service)

def test_submitting_to_a_missing_item_fails(db_service, student_p1, links):
    with pytest.raises(RecordNotFoundError):
        submission_service.submit_work(ContentKind.PROJECT, "prj_missing", student_p1, links, db_service)

# --- Grading ---

def test_grade_marks_submission_graded(db_service, make_item, admin, student_p1, links):
    item = make_item()
    submission = submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p1, links, db_service)

    grade = submission_service.grade_submission(
        ContentKind.ASSIGNMENT, submission.id, GradeCreate(grade=85, feedback="Nice work"), admin.id, db_service
    )

    assert grade.grade == 85
    assert grade.max_grade == 100
    assert grade.student_id == student_p1.id
    assert grade.assignment_id == item.id
    assert grade.submission_id == submission.id
    assert grade.graded_by == admin.id
    assert db_service.get_submission("assignment", submission.id).status == "graded"
    print("\n✅ SUCCESS: test_grade_marks_submission_graded passed.")

def test_grading_twice_is_rejected(db_service, make_item, admin, student_p1, links):
    item = make_item(ContentKind.PROJECT)
    submission = submission_service.submit_work(ContentKind.PROJECT, item.id, student_p1, links, db_service)
    submission_service.grade_submission(ContentKind.PROJECT, submission.id, GradeCreate(grade=70), admin.id, db_service)
    with pytest.raises(InvalidTransitionError):
        submission_service.grade_submission(ContentKind.PROJECT, submission.id, GradeCreate(grade=90), admin.id, db_service)
    assert db_service.count("grades") == 1

def test_grading_unknown_submission(db_service, admin):
    with pytest.raises(RecordNotFoundError):
        submission_service.grade_submission(ContentKind.ASSIGNMENT, "sub_missing", GradeCreate(grade=1), admin.id, db_service)

def test_failed_grade_commit_leaves_nothing_behind(mocker, db_service, make_item, admin, student_p1, links):
    """If the store fails, neither the grade nor the status change is kept."""
    item = make_item()
    submission = submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p1, links, db_service)

    mocker.patch.object(
        db_service.db, "commit",
        side_effect=OperationalError("COMMIT", {}, Exception("database is locked")),
    )
    with pytest.raises(StorageError):
        submission_service.grade_submission(ContentKind.ASSIGNMENT, submission.id, GradeCreate(grade=50), admin.id, db_service)

    assert db_service.get_submission("assignment", submission.id).status == "pending"
    assert db_service.count("grades") == 0

# --- Quizzes ---

def test_quiz_start_submit_grade(db_service, make_item, admin, student_p1, links):
    quiz = make_item(ContentKind.QUIZ, target_phase="phase1")

    attempt = submission_service.start_quiz(quiz.id, student_p1, db_service)
    assert attempt.status == "in_progress"
    assert attempt.submitted_at is None

    submitted = submission_service.submit_work(ContentKind.QUIZ, quiz.id, student_p1, links, db_service)
    assert submitted.id == attempt.id
    assert submitted.status == "submitted"
    assert submitted.submitted_at is not None

    grade = submission_service.grade_submission(ContentKind.QUIZ, submitted.id, GradeCreate(grade=9, max_grade=10), admin.id, db_service)
    assert grade.quiz_submission_id == submitted.id
    assert grade.quiz_id == quiz.id

def test_quiz_submit_without_start(db_service, make_item, student_p1, links):
    quiz = make_item(ContentKind.QUIZ)
    submission = submission_service.submit_work(ContentKind.QUIZ, quiz.id, student_p1, links, db_service)
    assert submission.status == "submitted"
    assert submission.started_at is not None
    with pytest.raises(InvalidTransitionError):
        submission_service.submit_work(ContentKind.QUIZ, quiz.id, student_p1, links, db_service)

def test_quiz_cannot_be_started_twice(db_service, make_item, student_p1):
    quiz = make_item(ContentKind.QUIZ)
    submission_service.start_quiz(quiz.id, student_p1, db_service)
    with pytest.raises(DuplicateRecordError):
        submission_service.start_quiz(quiz.id, student_p1, db_service)

def test_in_progress_quiz_is_not_gradable(db_service, make_item, admin, student_p1):
    quiz = make_item(ContentKind.QUIZ)
    attempt = submission_service.start_quiz(quiz.id, student_p1, db_service)
    with pytest.raises(InvalidTransitionError):
        submission_service.grade_submission(ContentKind.QUIZ, attempt.id, GradeCreate(grade=5), admin.id, db_service)

# --- Read views ---

def test_admin_listing_and_status_filter(db_service, make_item, admin, student_p1, student_p2, links):
    item = make_item(title="Recursion")
    first = submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p1, links, db_service)
    submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p2, links, db_service)
    submission_service.grade_submission(ContentKind.ASSIGNMENT, first.id, GradeCreate(grade=40, max_grade=50), admin.id, db_service)

    everything = submission_service.list_submissions(ContentKind.ASSIGNMENT, db_service)
    assert len(everything) == 2
    graded = next(d for d in everything if d.id == first.id)
    assert graded.item_title == "Recursion"
    assert graded.student_name == "Sam Phaseone"
    assert graded.percentage == 80.0

    pending = submission_service.list_submissions(ContentKind.ASSIGNMENT, db_service, status="pending")
    assert [d.student_email for d in pending] == ["s2@portal.test"]

def test_student_items_show_only_own_work(db_service, make_item, admin, student_p1, student_p2, links):
    shared = make_item(target_phase="both", title="Shared")
    make_item(target_phase="phase2", title="Phase two only")
    mine = submission_service.submit_work(ContentKind.ASSIGNMENT, shared.id, student_p1, links, db_service)
    submission_service.submit_work(ContentKind.ASSIGNMENT, shared.id, student_p2, links, db_service)
    submission_service.grade_submission(ContentKind.ASSIGNMENT, mine.id, GradeCreate(grade=85, feedback="Good"), admin.id, db_service)

    views = submission_service.student_items(ContentKind.ASSIGNMENT, student_p1, db_service)
    assert [v.item.title for v in views] == ["Shared"]
    assert views[0].submission.id == mine.id
    assert views[0].status == "graded"
    assert views[0].grade.feedback == "Good"
    assert views[0].percentage == 85.0

    p2_views = submission_service.student_items(ContentKind.ASSIGNMENT, student_p2, db_service)
    assert {v.item.title for v in p2_views} == {"Shared", "Phase two only"}
    unsubmitted = next(v for v in p2_views if v.item.title == "Phase two only")
    assert unsubmitted.status == "unsubmitted"
    assert unsubmitted.submission is None
    assert unsubmitted.grade is None

# --- Cascades ---

def test_deleting_an_item_removes_its_submissions_and_grades(db_service, make_item, admin, student_p1, links):
    item = make_item()
    submission = submission_service.submit_work(ContentKind.ASSIGNMENT, item.id, student_p1, links, db_service)
    submission_service.grade_submission(ContentKind.ASSIGNMENT, submission.id, GradeCreate(grade=60), admin.id, db_service)

    content_service.delete_item(ContentKind.ASSIGNMENT, item.id, db_service)

    assert db_service.get_submissions("assignment") == []
    assert db_service.count("grades") == 0
    with pytest.raises(RecordNotFoundError):
        content_service.delete_item(ContentKind.ASSIGNMENT, item.id, db_service)
