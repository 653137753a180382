"""
Admin order endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.order import OrderStatus
from app.models.user import User
from app.schemas.common import StatusOptionsOut
from app.schemas.order import OrderListResponse, OrderStatusUpdate
from app.services.order_service import list_orders_admin, order_lifecycle

router = APIRouter()


def _listing(db: Session, status_filter: Optional[OrderStatus] = None) -> OrderListResponse:
    items = list_orders_admin(db, status_filter=status_filter)
    return OrderListResponse(items=items, total=len(items))


@router.get("", response_model=OrderListResponse)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def order_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="order", statuses=order_lifecycle.allowed_statuses())


@router.patch("/{order_id}/status", response_model=OrderListResponse)
async def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    order_lifecycle.transition(db, order_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{order_id}", response_model=OrderListResponse)
async def delete_order(
    order_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    order_lifecycle.delete(db, order_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
