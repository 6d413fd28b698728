# app/schemas/orders/order_schemas.py

from pydantic import Field
from datetime import datetime
from typing import List, Optional

from app.schemas.base import CamelModel, ORMBase, Money


# =====================================================
# INPUT
# =====================================================
class CheckoutRequest(CamelModel):
    user_id: str = Field(min_length=1, max_length=128)
    discount_code: Optional[str] = Field(default=None, min_length=1)


# =====================================================
# OUTPUT
# =====================================================
class OrderItemOut(ORMBase):
    id: int
    order_id: int
    item_id: str
    name: str
    price: Money
    quantity: int


class OrderOut(ORMBase):
    id: int
    user_id: str
    subtotal: Money
    discount_code: Optional[str]
    discount_amount: Money
    total: Money
    created_at: datetime

    items: List[OrderItemOut]


class CheckoutResponse(CamelModel):
    message: str
    order: OrderOut
