"""
Create/update helpers for the single-table admin content resources
"""
import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import EntityNotFound, PersistenceError
from app.services.audit_service import record_audit

logger = logging.getLogger(__name__)


def create_row(
    db: Session,
    model: Type,
    values: Dict[str, Any],
    entity_type: str,
    actor_id: Optional[int],
):
    """Insert a row and its audit entry in one commit"""
    entity = model(**values)
    try:
        db.add(entity)
        db.flush()
        record_audit(db, actor_id=actor_id, action="CREATE", entity_type=entity_type,
                     entity_id=entity.id, meta=values)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Error creating {entity_type}", exc_info=True)
        raise PersistenceError(f"Failed to create {entity_type.replace('_', ' ')}")
    db.refresh(entity)
    return entity


def get_row(db: Session, model: Type, entity_id: int, entity_type: str):
    entity = db.query(model).filter(model.id == entity_id).first()
    if entity is None:
        raise EntityNotFound(f"{entity_type.replace('_', ' ').capitalize()} with id {entity_id} not found")
    return entity


def update_row(
    db: Session,
    entity,
    changes: BaseModel,
    entity_type: str,
    actor_id: Optional[int],
    extra: Optional[Dict[str, Any]] = None,
):
    """Apply the explicitly set fields of an update schema"""
    update_dict = changes.model_dump(exclude_unset=True)
    if extra:
        update_dict.update(extra)
    try:
        for key, value in update_dict.items():
            setattr(entity, key, value)
        record_audit(db, actor_id=actor_id, action="UPDATE", entity_type=entity_type,
                     entity_id=entity.id, meta=update_dict)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Error updating {entity_type} {entity.id}", exc_info=True)
        raise PersistenceError(f"Failed to update {entity_type.replace('_', ' ')}")
    db.refresh(entity)
    return entity
