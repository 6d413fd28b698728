# app/services/cart/cart_service.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.dialects import postgresql, sqlite

from app.models.cart.cart_models import CartItem
from app.schemas.cart.cart_schemas import AddToCartRequest, CartItemOut
from app.core.exceptions import AppException
from app.constants.error_codes import ErrorCode
from app.utils.decimal_utils import to_decimal
from app.utils.logger import get_logger

logger = get_logger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _upsert_stmt(dialect_name: str, payload: AddToCartRequest):
    insert = _INSERTS[dialect_name]
    stmt = insert(CartItem).values(
        user_id=payload.user_id,
        item_id=payload.item_id,
        name=payload.name,
        price=to_decimal(payload.price),
        quantity=payload.quantity,
    )
    return (
        stmt.on_conflict_do_update(
            index_elements=[CartItem.user_id, CartItem.item_id],
            set_={
                "quantity": CartItem.quantity + stmt.excluded.quantity,
                "name": stmt.excluded.name,
                "price": stmt.excluded.price,
                "updated_at": func.now(),
            },
        )
        .returning(CartItem)
        .execution_options(populate_existing=True)
    )


def _require_user_id(user_id: str) -> str:
    if not user_id or not user_id.strip():
        raise AppException(400, "User ID parameter is required", ErrorCode.VALIDATION_ERROR)
    return user_id


async def get_cart_items(db: AsyncSession, user_id: str) -> list[CartItem]:
    result = await db.execute(
        select(CartItem)
        .where(CartItem.user_id == user_id)
        .order_by(CartItem.created_at.asc(), CartItem.id.asc())
    )
    return list(result.scalars().all())


async def delete_cart_items(db: AsyncSession, user_id: str) -> int:
    result = await db.execute(
        delete(CartItem)
        .where(CartItem.user_id == user_id)
        .execution_options(synchronize_session="evaluate")
    )
    return result.rowcount or 0


# ---------------- ADD ----------------
async def add_item(db: AsyncSession, payload: AddToCartRequest) -> CartItemOut:
    stmt = _upsert_stmt(db.get_bind().dialect.name, payload)
    result = await db.execute(stmt)
    item = result.scalar_one()
    data = CartItemOut.model_validate(item)
    await db.commit()

    logger.info(
        f"Item {payload.item_id} added/updated for user {payload.user_id}. "
        f"New quantity: {data.quantity}"
    )
    return data


# ---------------- GET ----------------
async def get_cart(db: AsyncSession, user_id: str) -> list[CartItemOut]:
    _require_user_id(user_id)
    items = await get_cart_items(db, user_id)
    return [CartItemOut.model_validate(i) for i in items]


# ---------------- CLEAR ----------------
async def clear_cart(db: AsyncSession, user_id: str) -> int:
    _require_user_id(user_id)
    count = await delete_cart_items(db, user_id)
    await db.commit()

    logger.info(f"Cleared {count} items from cart for user {user_id}.")
    return count
