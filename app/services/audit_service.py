"""
Audit trail for admin and account mutations

Rows are written through record_audit() inside the mutation's own
transaction, so a rejected write leaves no audit entry behind.
"""
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.models.audit_log import AuditLog


def to_json_safe(value: Any) -> Any:
    """Convert enums, dates, decimals and schemas for the meta_json column"""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, (date, datetime, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, BaseModel):
        return to_json_safe(value.model_dump())
    if isinstance(value, dict):
        return {str(k): to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_json_safe(item) for item in value]
    return str(value)


def record_audit(
    db: Session,
    actor_id: Optional[int],
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    meta: Optional[Dict[str, Any]] = None
) -> AuditLog:
    """
    Stage an audit entry in the caller's transaction (no commit)

    Args:
        actor_id: User performing the action; None for system actions
        action: e.g. "CREATE", "UPDATE", "STATUS_CHANGE", "DELETE", "ROLE_SET"
        entity_type: e.g. "booking", "job_posting", "user_role"
    """
    audit_log = AuditLog(
        actor_id=actor_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        meta_json=to_json_safe(meta) if meta is not None else None,
        # Set here rather than by server default; SQLite ignores the migration default
        created_at=datetime.now(timezone.utc)
    )
    db.add(audit_log)
    return audit_log


def log_audit(
    db: Session,
    actor_id: Optional[int],
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    meta: Optional[Dict[str, Any]] = None
) -> AuditLog:
    """Record an audit entry on its own, after the mutation already committed"""
    audit_log = record_audit(db, actor_id, action, entity_type, entity_id, meta)
    db.commit()
    db.refresh(audit_log)
    return audit_log
