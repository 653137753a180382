"""
Order service - customer orders and their admin lifecycle
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.order import Order, OrderStatus
from app.schemas.order import OrderCreate, AdminOrderOut
from app.services.crud import create_row
from app.services.status_lifecycle import LifecycleSpec, StatusLifecycleManager

order_lifecycle = StatusLifecycleManager(
    LifecycleSpec(model=Order, entity_type="order", statuses=OrderStatus)
)


def create_order(db: Session, user_id: int, data: OrderCreate) -> Order:
    """Place an order; pricing is set later by the agency"""
    return create_row(
        db,
        Order,
        {
            "user_id": user_id,
            "service_name": data.service_name,
            "description": data.description,
            "status": OrderStatus.PENDING.value,
        },
        entity_type="order",
        actor_id=user_id,
    )


def list_user_orders(db: Session, user_id: int) -> List[Order]:
    return (
        db.query(Order)
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )


def to_admin_out(order: Order) -> AdminOrderOut:
    out = AdminOrderOut.model_validate(order)
    if order.user is not None:
        out.customer_name = order.user.full_name
        out.customer_phone = order.user.phone
    return out


def list_orders_admin(db: Session, status_filter: Optional[OrderStatus] = None) -> List[AdminOrderOut]:
    return [to_admin_out(o) for o in order_lifecycle.fetch_list(db, status_filter=status_filter)]
