from datetime import datetime
from typing import Optional

from app.schemas.base import ORMBase, Money


class DiscountCodeOut(ORMBase):
    id: int
    code: str
    discount_percent: Money
    is_active: bool
    is_used: bool
    created_at: datetime
    order_used_in_id: Optional[int]
