# /portal/services/coursework_helpers/kinds.py

"""
Naming table for the three kinds of coursework.

Every service that handles "an item and its submissions" looks up the
collection names and foreign-key field names here instead of branching on
the kind.
"""

import uuid
from typing import NamedTuple

from ...models.content_model import ContentKind


class KindSpec(NamedTuple):
    collection: str
    item_field: str
    grade_submission_field: str
    id_prefix: str
    submission_id_prefix: str


KIND_SPECS = {
    ContentKind.ASSIGNMENT: KindSpec(
        collection="assignments",
        item_field="assignment_id",
        grade_submission_field="submission_id",
        id_prefix="asg",
        submission_id_prefix="sub",
    ),
    ContentKind.QUIZ: KindSpec(
        collection="quizzes",
        item_field="quiz_id",
        grade_submission_field="quiz_submission_id",
        id_prefix="qiz",
        submission_id_prefix="qsub",
    ),
    ContentKind.PROJECT: KindSpec(
        collection="projects",
        item_field="project_id",
        grade_submission_field="project_submission_id",
        id_prefix="prj",
        submission_id_prefix="psub",
    ),
}


def spec_for(kind) -> KindSpec:
    return KIND_SPECS[ContentKind(kind)]


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"
