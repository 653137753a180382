"""
Status lifecycle manager shared by the admin resources

Every resource declares a closed status enumeration. Any member may be set
from any other; there is no ordering between statuses. A transition is one
committed update (plus its audit row), after which the row is re-read from
the store. Deletes are irreversible and refuse to run unconfirmed.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ConfirmationRequired,
    EntityNotFound,
    InvalidStatus,
    PersistenceError,
)
from app.models.activity import ActivityStatus
from app.services.audit_service import record_audit

logger = logging.getLogger(__name__)


def _enum_value(status: enum.Enum) -> Any:
    return status.value


@dataclass(frozen=True)
class LifecycleSpec:
    """
    How a resource stores its status.

    to_column/from_column convert between the enumeration and the column
    value; active-flag resources map ActivityStatus onto a boolean.
    """
    model: Type
    entity_type: str
    statuses: Type[enum.Enum]
    column: str = "status"
    to_column: Callable[[Any], Any] = _enum_value
    from_column: Optional[Callable[[Any], Any]] = None
    order_by: Sequence[str] = field(default=("created_at", "id"))


class StatusLifecycleManager:
    def __init__(self, spec: LifecycleSpec):
        self.spec = spec

    @property
    def label(self) -> str:
        return self.spec.entity_type.replace("_", " ")

    def allowed_statuses(self) -> List[str]:
        """Exactly the declared enumeration, in declaration order"""
        return [member.value for member in self.spec.statuses]

    def parse_status(self, value: Any) -> enum.Enum:
        if isinstance(value, self.spec.statuses):
            return value
        try:
            return self.spec.statuses(value)
        except ValueError:
            raise InvalidStatus(
                f"Invalid {self.label} status '{value}'. Allowed: {self.allowed_statuses()}"
            )

    def current_status(self, entity) -> enum.Enum:
        raw = getattr(entity, self.spec.column)
        if self.spec.from_column is not None:
            return self.spec.from_column(raw)
        return self.spec.statuses(raw)

    def get(self, db: Session, entity_id: int):
        entity = db.query(self.spec.model).filter(self.spec.model.id == entity_id).first()
        if entity is None:
            raise EntityNotFound(f"{self.label.capitalize()} with id {entity_id} not found")
        return entity

    def fetch_list(self, db: Session, status_filter: Optional[Any] = None) -> List:
        """Fetch every matching row straight from the store, newest first"""
        model = self.spec.model
        query = db.query(model)
        if status_filter is not None:
            target = self.parse_status(status_filter)
            query = query.filter(getattr(model, self.spec.column) == self.spec.to_column(target))
        ordering = [getattr(model, name).desc() for name in self.spec.order_by]
        return query.order_by(*ordering).all()

    def transition(self, db: Session, entity_id: int, target: Any, actor_id: Optional[int]):
        """
        Move an entity to target status.

        Setting the current status again succeeds and leaves the row as is.

        Raises:
            InvalidStatus: target is not in the enumeration
            EntityNotFound: no such row
            PersistenceError: the store rejected the write (nothing changed)
        """
        new_status = self.parse_status(target)
        entity = self.get(db, entity_id)
        previous = self.current_status(entity)

        try:
            setattr(entity, self.spec.column, self.spec.to_column(new_status))
            record_audit(
                db,
                actor_id=actor_id,
                action="STATUS_CHANGE",
                entity_type=self.spec.entity_type,
                entity_id=entity_id,
                meta={"from": previous, "to": new_status},
            )
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Error updating {self.label} {entity_id} status", exc_info=True)
            raise PersistenceError("Failed to update status")

        db.refresh(entity)
        logger.info(f"{self.label.capitalize()} {entity_id} status: {previous.value} -> {new_status.value}")
        return entity

    def delete(self, db: Session, entity_id: int, confirmed: bool, actor_id: Optional[int]) -> None:
        """
        Permanently delete an entity. There is no undo.

        Raises:
            ConfirmationRequired: confirmed is not True; the store is untouched
            EntityNotFound: no such row
            PersistenceError: the store rejected the delete
        """
        if confirmed is not True:
            raise ConfirmationRequired(
                f"Deleting this {self.label} cannot be undone; confirm to proceed"
            )

        entity = self.get(db, entity_id)
        try:
            db.delete(entity)
            record_audit(
                db,
                actor_id=actor_id,
                action="DELETE",
                entity_type=self.spec.entity_type,
                entity_id=entity_id,
            )
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Error deleting {self.label} {entity_id}", exc_info=True)
            raise PersistenceError(f"Failed to delete {self.label}")

        logger.info(f"{self.label.capitalize()} {entity_id} deleted")


def activity_spec(model: Type, entity_type: str, order_by: Sequence[str] = ("created_at", "id")) -> LifecycleSpec:
    """LifecycleSpec for resources tracked by an is_active flag"""
    return LifecycleSpec(
        model=model,
        entity_type=entity_type,
        statuses=ActivityStatus,
        column="is_active",
        to_column=lambda status: status.to_flag(),
        from_column=ActivityStatus.from_flag,
        order_by=order_by,
    )
