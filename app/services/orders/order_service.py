# app/services/orders/order_service.py

from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from app.models.cart.cart_models import CartItem
from app.models.orders.order_models import Order, OrderItem
from app.schemas.orders.order_schemas import CheckoutRequest, OrderOut, OrderItemOut

from app.constants.error_codes import ErrorCode
from app.core.config import DISCOUNT_PERCENTAGE, NTH_ORDER_FOR_DISCOUNT
from app.core.exceptions import AppException

from app.services.cart.cart_service import get_cart_items, delete_cart_items
from app.services.discounts.discount_code_service import (
    find_redeemable_code,
    mark_code_used,
    deactivate_active_codes,
    create_discount_code,
)
from app.services.orders.order_counter_service import next_order_number
from app.utils.code_generator import generate_discount_code
from app.utils.decimal_utils import compute_subtotal, compute_percentage, to_decimal
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def _get_order_with_items(db: AsyncSession, order_id: int) -> Optional[Order]:
    result = await db.execute(
        select(Order)
        .options(selectinload(Order.items))
        .where(Order.id == order_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


def _map_order(order: Order) -> OrderOut:
    return OrderOut(
        id=order.id,
        user_id=order.user_id,
        subtotal=to_decimal(order.subtotal),
        discount_code=order.discount_code,
        discount_amount=to_decimal(order.discount_amount),
        total=to_decimal(order.total),
        created_at=order.created_at,
        items=[OrderItemOut.model_validate(i) for i in order.items],
    )


async def _rotate_discount_code(db: AsyncSession) -> None:
    deactivated = await deactivate_active_codes(db)
    logger.info(f"Deactivated {deactivated} existing active codes.")

    discount = await create_discount_code(db, generate_discount_code(), DISCOUNT_PERCENTAGE)
    logger.info(f"Generated and activated new discount code: {discount.code}")


async def _place_order(
    db: AsyncSession,
    *,
    user_id: str,
    cart_items: list[CartItem],
    subtotal: Decimal,
    discount_code: Optional[str],
) -> OrderOut:
    discount_amount = Decimal("0.00")
    applied = None

    if discount_code:
        logger.info(f"Attempting to apply discount code: {discount_code}")
        applied = await find_redeemable_code(db, discount_code)

        if applied:
            discount_amount = compute_percentage(subtotal, applied.discount_percent)
            logger.info(
                f"Valid discount code found: {applied.code}. "
                f"Discount amount: {discount_amount}"
            )
        else:
            logger.warning(
                f"Provided discount code {discount_code} is invalid, inactive, or already used."
            )

    total = subtotal - discount_amount
    logger.info(f"Calculated final total: {total}")

    order_number = await next_order_number(db)
    logger.info(f"This is order number: {order_number}")

    order = Order(
        user_id=user_id,
        subtotal=subtotal,
        discount_code=applied.code if applied else None,
        discount_amount=discount_amount,
        total=total,
    )
    # snapshot of the cart lines; later cart changes never touch these
    order.items.extend(
        OrderItem(
            item_id=item.item_id,
            name=item.name,
            price=to_decimal(item.price),
            quantity=item.quantity,
        )
        for item in cart_items
    )
    db.add(order)
    await db.flush()
    logger.info(f"Created order record with ID: {order.id} and {len(cart_items)} items")

    if applied:
        await mark_code_used(db, applied, order.id)
        logger.info(f"Marked discount code {applied.code} as used for order {order.id}.")

    cleared = await delete_cart_items(db, user_id)
    logger.info(f"Cleared {cleared} items from cart for user {user_id}.")

    if order_number % NTH_ORDER_FOR_DISCOUNT == 0:
        logger.info(f"Order {order_number} is an Nth order. Generating new discount code.")
        await _rotate_discount_code(db)

    await db.flush()

    created = await _get_order_with_items(db, order.id)
    if not created:
        raise AppException(
            500,
            "Failed to retrieve order details after creation.",
            ErrorCode.ORDER_NOT_FOUND,
        )
    return _map_order(created)


# ---------------- CHECKOUT ----------------
async def checkout(db: AsyncSession, payload: CheckoutRequest) -> OrderOut:
    user_id = payload.user_id
    logger.info(f"Checkout initiated for user: {user_id}")

    cart_items = await get_cart_items(db, user_id)
    if not cart_items:
        raise AppException(
            404,
            f"Cart is empty for user {user_id}. Cannot checkout.",
            ErrorCode.CART_EMPTY,
        )

    subtotal = compute_subtotal(cart_items)

    if subtotal <= 0:
        logger.warning(f"Cart subtotal is zero or negative for user {user_id}. Clearing cart.")
        await delete_cart_items(db, user_id)
        await db.commit()
        raise AppException(
            400,
            "Cart total value is zero. Cannot checkout.",
            ErrorCode.CART_ZERO_TOTAL,
        )

    logger.info(f"Calculated subtotal for user {user_id}: {subtotal}")

    try:
        order = await _place_order(
            db,
            user_id=user_id,
            cart_items=cart_items,
            subtotal=subtotal,
            discount_code=payload.discount_code,
        )
        await db.commit()
    except Exception as exc:
        await db.rollback()
        logger.exception(f"Checkout transaction failed for user {user_id}: {exc}")

        if isinstance(exc, AppException):
            reason = exc.detail
        elif isinstance(exc, SQLAlchemyError):
            # statement text and driver codes stay in the log
            logger.warning(f"Database error during checkout: {exc.__class__.__name__}")
            reason = "database error while placing the order"
        else:
            reason = str(exc)
        raise AppException(
            500,
            f"Checkout failed. Please try again. Reason: {reason}",
            ErrorCode.CHECKOUT_FAILED,
        ) from exc

    logger.info(f"Checkout successful for order ID: {order.id}")
    return order


# ---------------- GET ----------------
async def get_order(db: AsyncSession, order_id: int) -> OrderOut:
    order = await _get_order_with_items(db, order_id)
    if not order:
        raise AppException(404, "Order not found", ErrorCode.ORDER_NOT_FOUND)
    return _map_order(order)
