# app/routers/orders/order_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.orders.order_schemas import CheckoutRequest, CheckoutResponse, OrderOut
from app.services.orders.order_service import checkout, get_order
from app.utils.logger import get_logger

router = APIRouter(prefix="/order", tags=["Orders"])
logger = get_logger(__name__)


@router.post("/checkout", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
async def checkout_api(
    payload: CheckoutRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Checkout", extra={"user_id": payload.user_id})
    order = await checkout(db, payload)
    return CheckoutResponse(message="Checkout successful!", order=order)


@router.get("/{order_id}", response_model=OrderOut)
async def get_order_api(
    order_id: int,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Get order", extra={"order_id": order_id})
    return await get_order(db, order_id)
