# app/core/config.py

import os
from decimal import Decimal, InvalidOperation
from dotenv import load_dotenv
from app.utils.logger import get_logger

logger = get_logger(__name__)

load_dotenv()

# =====================================================
# APPLICATION
# =====================================================
APP_ENV = os.getenv("APP_ENV")
if APP_ENV not in {"development", "staging", "production"}:
    raise ValueError("APP_ENV must be development | staging | production")

IS_PRODUCTION = APP_ENV == "production"

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# =====================================================
# DATABASE
# =====================================================
DB_TYPE = os.getenv("DB_TYPE")
if DB_TYPE not in {"postgres", "sqlite"}:
    raise ValueError("DB_TYPE must be postgres | sqlite")

if DB_TYPE == "postgres":
    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL is required for Postgres")

elif DB_TYPE == "sqlite":
    if IS_PRODUCTION:
        raise ValueError("SQLite is NOT allowed in production")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./shop.db")

# ---- Pool tuning (safe defaults) ----
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", 20))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 30))
DB_ECHO_POOL = os.getenv("DB_ECHO_POOL", "false").lower() == "true"

# =====================================================
# DISCOUNTS
# =====================================================
try:
    DISCOUNT_PERCENTAGE = Decimal(os.getenv("DISCOUNT_PERCENTAGE", "10"))
except InvalidOperation:
    raise ValueError("DISCOUNT_PERCENTAGE must be a number")

if DISCOUNT_PERCENTAGE <= 0 or DISCOUNT_PERCENTAGE > 100:
    raise ValueError("DISCOUNT_PERCENTAGE must be in (0, 100]")

NTH_ORDER_FOR_DISCOUNT = int(os.getenv("NTH_ORDER_FOR_DISCOUNT", 5))
if NTH_ORDER_FOR_DISCOUNT < 1:
    raise ValueError("NTH_ORDER_FOR_DISCOUNT must be at least 1")

logger.debug(
    "Discount settings loaded",
    extra={
        "discount_percentage": str(DISCOUNT_PERCENTAGE),
        "nth_order": NTH_ORDER_FOR_DISCOUNT,
    },
)
