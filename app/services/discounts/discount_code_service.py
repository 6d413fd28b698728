# app/services/discounts/discount_code_service.py

from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.models.discounts.discount_code_models import DiscountCode
from app.utils.decimal_utils import to_decimal
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _redeemable():
    return (
        DiscountCode.is_active.is_(True),
        DiscountCode.is_used.is_(False),
    )


async def find_redeemable_code(db: AsyncSession, code: str) -> Optional[DiscountCode]:
    """Return the code only if it is active and unused, otherwise None."""
    result = await db.execute(
        select(DiscountCode).where(DiscountCode.code == code, *_redeemable())
    )
    return result.scalars().first()


async def get_active_code(db: AsyncSession) -> Optional[DiscountCode]:
    result = await db.execute(
        select(DiscountCode)
        .where(*_redeemable())
        .order_by(DiscountCode.created_at.desc(), DiscountCode.id.desc())
    )
    return result.scalars().first()


async def list_discount_codes(
    db: AsyncSession,
    *,
    used: Optional[bool] = None,
) -> list[DiscountCode]:
    query = select(DiscountCode)

    if used is not None:
        query = query.where(DiscountCode.is_used.is_(used))

    result = await db.execute(
        query.order_by(DiscountCode.created_at.desc(), DiscountCode.id.desc())
    )
    return list(result.scalars().all())


async def deactivate_active_codes(db: AsyncSession) -> int:
    result = await db.execute(
        update(DiscountCode)
        .where(DiscountCode.is_active.is_(True))
        .values(is_active=False)
        .execution_options(synchronize_session="evaluate")
    )
    return result.rowcount or 0


async def create_discount_code(
    db: AsyncSession,
    code: str,
    discount_percent: Decimal,
) -> DiscountCode:
    discount = DiscountCode(
        code=code,
        discount_percent=to_decimal(discount_percent),
        is_active=True,
        is_used=False,
    )
    db.add(discount)
    await db.flush()
    return discount


async def mark_code_used(db: AsyncSession, discount: DiscountCode, order_id: int) -> None:
    discount.is_used = True
    discount.is_active = False
    discount.order_used_in_id = order_id
    await db.flush()
