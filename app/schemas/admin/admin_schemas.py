from typing import List, Optional

from app.schemas.base import CamelModel
from app.schemas.discounts.discount_code_schemas import DiscountCodeOut


class ActiveDiscountResponse(CamelModel):
    active_discount: Optional[DiscountCodeOut]


class AdminStats(CamelModel):
    total_orders: int
    total_items_purchased: int
    total_purchase_amount: str
    total_discount_amount: str
    discount_codes_generated: List[DiscountCodeOut]
    discount_codes_used: List[DiscountCodeOut]
