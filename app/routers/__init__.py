# app/routers/__init__.py

from .cart.cart_router import router as cart_router
from .orders.order_router import router as order_router
from .admin.admin_router import router as admin_router


__all__ = [
"cart_router",
"order_router",
"admin_router",
]
