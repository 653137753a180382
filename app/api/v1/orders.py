"""
Customer order endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_current_user
from app.models.user import User
from app.schemas.order import OrderCreate, OrderOut
from app.services.order_service import create_order, list_user_orders

router = APIRouter()


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
async def place_order(
    order_data: OrderCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return create_order(db, current_user.id, order_data)


@router.get("/my", response_model=List[OrderOut])
async def my_orders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return list_user_orders(db, current_user.id)
