# app/services/admin/admin_service.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.models.orders.order_models import Order, OrderItem
from app.schemas.admin.admin_schemas import AdminStats
from app.schemas.discounts.discount_code_schemas import DiscountCodeOut
from app.services.discounts.discount_code_service import get_active_code, list_discount_codes
from app.utils.decimal_utils import format_amount
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def get_active_discount_code(db: AsyncSession) -> DiscountCodeOut | None:
    """Currently active and unused discount code, if one exists."""
    logger.info("Fetching active discount code...")
    discount = await get_active_code(db)
    if not discount:
        logger.info("No active discount code found.")
        return None

    logger.info(f"Found active discount code: {discount.code}")
    return DiscountCodeOut.model_validate(discount)


async def get_statistics(db: AsyncSession) -> AdminStats:
    logger.info("Calculating admin statistics...")

    total_orders = await db.scalar(select(func.count(Order.id)))
    total_items = await db.scalar(select(func.coalesce(func.sum(OrderItem.quantity), 0)))

    amounts = (
        await db.execute(
            select(
                func.sum(Order.total).label("total"),
                func.sum(Order.discount_amount).label("discount"),
            )
        )
    ).one()

    codes = [DiscountCodeOut.model_validate(d) for d in await list_discount_codes(db)]

    logger.info("Statistics calculation complete.")

    return AdminStats(
        total_orders=total_orders or 0,
        total_items_purchased=int(total_items or 0),
        total_purchase_amount=format_amount(amounts.total),
        total_discount_amount=format_amount(amounts.discount),
        discount_codes_generated=codes,
        discount_codes_used=[c for c in codes if c.is_used],
    )
