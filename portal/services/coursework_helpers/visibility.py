# /portal/services/coursework_helpers/visibility.py

"""
Phase-scoped visibility of coursework and the join of each item with the
student's own submission and grade.

These functions are pure: they work on records that have already been
fetched (ORM objects or plain dicts) and never touch the store. The same
rule is also pushed into the store query via `audience_for`, so the filter
here is the definition of the rule rather than the only line of defence.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple

BOTH = "both"


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _value(value: Any) -> Any:
    # Accept Enum members as well as raw strings.
    return getattr(value, "value", value)


def is_visible(target_phase: Any, student_phase: Any) -> bool:
    """An item is visible when it targets 'both' or exactly the student's phase."""
    target = _value(target_phase)
    return target == BOTH or (student_phase is not None and target == _value(student_phase))


def audience_for(student_phase: Any) -> List[str]:
    """The target_phase values a student of this phase may see."""
    if student_phase is None:
        return [BOTH]
    return [BOTH, _value(student_phase)]


def filter_visible(items: Iterable[Any], student_phase: Any) -> List[Any]:
    """Keeps the visible items, preserving their order."""
    return [item for item in items if is_visible(_field(item, "target_phase"), student_phase)]


def submission_for(item_id: str, submissions: Sequence[Any], student_id: str) -> Optional[Any]:
    """
    The student's submission for one item. If the store ever returns more
    than one, the first in the given order wins.
    """
    for submission in submissions:
        if _field(submission, "student_id") == student_id and _field(submission, "item_id") == item_id:
            return submission
    return None


def attach_submission(items: Iterable[Any], submissions: Sequence[Any], student_id: str) -> List[Tuple[Any, Optional[Any]]]:
    """Pairs each item with the student's submission for it (or None)."""
    return [(item, submission_for(_field(item, "id"), submissions, student_id)) for item in items]


def first_grade(grades: Optional[Sequence[Any]]) -> Optional[Any]:
    if not grades:
        return None
    return grades[0]
