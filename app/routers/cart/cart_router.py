# app/routers/cart/cart_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.cart.cart_schemas import (
    AddToCartRequest,
    CartItemAdded,
    CartItemOut,
    CartCleared,
)
from app.services.cart.cart_service import add_item, get_cart, clear_cart
from app.utils.logger import get_logger

router = APIRouter(prefix="/cart", tags=["Cart"])
logger = get_logger(__name__)


@router.post("", response_model=CartItemAdded, status_code=status.HTTP_201_CREATED)
async def add_item_to_cart_api(
    payload: AddToCartRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Add to cart", extra={"user_id": payload.user_id, "item_id": payload.item_id})
    item = await add_item(db, payload)
    return CartItemAdded(message="Item added to cart successfully", item=item)


@router.get("/{user_id}", response_model=list[CartItemOut])
async def get_user_cart_api(
    user_id: str,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Get cart", extra={"user_id": user_id})
    return await get_cart(db, user_id)


@router.delete("/{user_id}", response_model=CartCleared)
async def clear_user_cart_api(
    user_id: str,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Clear cart", extra={"user_id": user_id})
    count = await clear_cart(db, user_id)
    return CartCleared(message="Cart cleared successfully", count=count)
