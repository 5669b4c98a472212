# /portal/services/coursework_helpers/state_machine.py

"""
Lifecycle of a piece of student work.

    assignment / project:  (none) -> pending -> graded
    quiz:                  (none) -> in_progress -> submitted -> graded
                           (none) -> submitted     (submit without a start)

`None` stands for "no submission row yet". 'graded' is terminal and nothing
moves backwards.
"""

from typing import Any, Dict, Optional, Set

from ...core.errors import InvalidTransitionError
from ...models.content_model import ContentKind
from ...models.submission_model import SubmissionStatus

_LINK_WORK_TRANSITIONS: Dict[Optional[str], Set[str]] = {
    None: {SubmissionStatus.PENDING.value},
    SubmissionStatus.PENDING.value: {SubmissionStatus.GRADED.value},
    SubmissionStatus.GRADED.value: set(),
}

_QUIZ_TRANSITIONS: Dict[Optional[str], Set[str]] = {
    None: {SubmissionStatus.IN_PROGRESS.value, SubmissionStatus.SUBMITTED.value},
    SubmissionStatus.IN_PROGRESS.value: {SubmissionStatus.SUBMITTED.value},
    SubmissionStatus.SUBMITTED.value: {SubmissionStatus.GRADED.value},
    SubmissionStatus.GRADED.value: set(),
}

TRANSITIONS = {
    ContentKind.ASSIGNMENT: _LINK_WORK_TRANSITIONS,
    ContentKind.PROJECT: _LINK_WORK_TRANSITIONS,
    ContentKind.QUIZ: _QUIZ_TRANSITIONS,
}

# Status a submission is created with by the plain "submit" action.
SUBMITTED_STATUS = {
    ContentKind.ASSIGNMENT: SubmissionStatus.PENDING.value,
    ContentKind.PROJECT: SubmissionStatus.PENDING.value,
    ContentKind.QUIZ: SubmissionStatus.SUBMITTED.value,
}


def _value(status: Any) -> Optional[str]:
    return getattr(status, "value", status)


def can_transition(kind, current: Any, target: Any) -> bool:
    transitions = TRANSITIONS[ContentKind(kind)]
    return _value(target) in transitions.get(_value(current), set())


def ensure_transition(kind, current: Any, target: Any) -> None:
    if not can_transition(kind, current, target):
        current_label = _value(current) or "unsubmitted"
        raise InvalidTransitionError(
            f"A {ContentKind(kind).value} submission cannot move from '{current_label}' to '{_value(target)}'."
        )


def display_status(submission: Optional[Any]) -> str:
    """What a student sees next to an item."""
    if submission is None:
        return SubmissionStatus.UNSUBMITTED.value
    return _value(submission.status)
