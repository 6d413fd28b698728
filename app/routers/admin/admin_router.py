# app/routers/admin/admin_router.py

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.admin.admin_schemas import ActiveDiscountResponse, AdminStats
from app.services.admin.admin_service import get_active_discount_code, get_statistics
from app.utils.logger import get_logger

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = get_logger(__name__)


@router.get("/discount/active", response_model=ActiveDiscountResponse)
async def get_active_discount_api(db: AsyncSession = Depends(get_db)):
    logger.info("Get active discount")
    discount = await get_active_discount_code(db)
    return ActiveDiscountResponse(active_discount=discount)


@router.get("/stats", response_model=AdminStats)
async def get_stats_api(db: AsyncSession = Depends(get_db)):
    logger.info("Get admin stats")
    return await get_statistics(db)
