# app/schemas/cart/cart_schemas.py

from pydantic import Field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.base import CamelModel, ORMBase, Money

# cart_items.quantity is a 32-bit INTEGER
MAX_QUANTITY = 2_147_483_647


class AddToCartRequest(CamelModel):
    user_id: str = Field(min_length=1, max_length=128)
    item_id: str = Field(min_length=1, max_length=128)
    name: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    quantity: int = Field(ge=1, le=MAX_QUANTITY)


class CartItemOut(ORMBase):
    id: int
    user_id: str
    item_id: str
    name: str
    price: Money
    quantity: int
    created_at: datetime
    updated_at: Optional[datetime]


class CartItemAdded(CamelModel):
    message: str
    item: CartItemOut


class CartCleared(CamelModel):
    message: str
    count: int
