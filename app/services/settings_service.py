"""
Site settings service
"""
import logging
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.site_setting import SiteSetting, SITE_SETTING_DEFAULTS
from app.services.audit_service import record_audit

logger = logging.getLogger(__name__)


def get_site_settings(db: Session) -> Dict[str, Optional[str]]:
    """
    Every known setting; a missing or empty stored value falls back to its default.
    """
    stored = {row.key: row.value for row in db.query(SiteSetting).all()}
    return {
        key: stored.get(key) or default
        for key, default in SITE_SETTING_DEFAULTS.items()
    }


def update_site_settings(db: Session, values: Dict[str, Optional[str]], actor_id: int) -> Dict[str, Optional[str]]:
    """Upsert the given keys in one commit and return the merged settings"""
    try:
        existing = {
            row.key: row
            for row in db.query(SiteSetting).filter(SiteSetting.key.in_(list(values))).all()
        }
        for key, value in values.items():
            row = existing.get(key)
            if row is None:
                db.add(SiteSetting(key=key, value=value, updated_by=actor_id))
            else:
                row.value = value
                row.updated_by = actor_id
        record_audit(db, actor_id=actor_id, action="UPDATE", entity_type="site_settings",
                     meta={"keys": sorted(values)})
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error("Error saving site settings", exc_info=True)
        raise PersistenceError("Failed to save settings")

    return get_site_settings(db)
