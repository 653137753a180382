"""
Order schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from app.models.order import OrderStatus


class OrderCreate(BaseModel):
    """Schema for placing an order"""
    service_name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)


class OrderOut(BaseModel):
    id: int
    user_id: int
    service_name: str
    description: Optional[str]
    status: OrderStatus
    total_amount: Optional[Decimal]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AdminOrderOut(OrderOut):
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None


class OrderListResponse(BaseModel):
    items: List[AdminOrderOut]
    total: int


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
