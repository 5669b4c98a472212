# /portal/services/content_service.py

"""
Publishing and retiring coursework, and the phase-scoped read a student gets.
"""

import logging
from typing import List

from pydantic import BaseModel

from ..core.errors import RecordNotFoundError
from ..models.content_model import ContentKind
from .coursework_helpers import kinds, visibility
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def create_item(kind: ContentKind, item_in: BaseModel, admin_id: str, db: DatabaseService):
    spec = kinds.spec_for(kind)
    record = {"id": kinds.new_id(spec.id_prefix), "created_by": admin_id, **item_in.model_dump()}
    new_item = db.insert(spec.collection, record)
    logger.info("Admin %s created %s %s for %s", admin_id, kind.value, new_item.id, new_item.target_phase)
    return new_item


def list_items(kind: ContentKind, db: DatabaseService) -> List:
    return db.query(kinds.spec_for(kind).collection, order_by="created_at", descending=True)


def get_item(kind: ContentKind, item_id: str, db: DatabaseService):
    item = db.get(kinds.spec_for(kind).collection, item_id)
    if item is None:
        raise RecordNotFoundError(f"{kind.value.capitalize()} with ID {item_id} not found")
    return item


def delete_item(kind: ContentKind, item_id: str, db: DatabaseService) -> None:
    """Deletes the item; its submissions and their grades go with it."""
    if not db.delete(kinds.spec_for(kind).collection, item_id):
        raise RecordNotFoundError(f"{kind.value.capitalize()} with ID {item_id} not found")
    logger.info("Deleted %s %s", kind.value, item_id)


def list_visible_items(kind: ContentKind, student_phase, db: DatabaseService) -> List:
    """Items whose target_phase is 'both' or the student's phase, newest first."""
    rows = db.query(
        kinds.spec_for(kind).collection,
        any_of={"target_phase": visibility.audience_for(student_phase)},
        order_by="created_at",
        descending=True,
    )
    return visibility.filter_visible(rows, student_phase)


def get_visible_item(kind: ContentKind, item_id: str, student, db: DatabaseService):
    """A single item, reported as missing when it is not meant for this student."""
    item = get_item(kind, item_id, db)
    if not visibility.is_visible(item.target_phase, student.phase):
        raise RecordNotFoundError(f"{kind.value.capitalize()} with ID {item_id} not found")
    return item
