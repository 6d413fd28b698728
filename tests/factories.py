from decimal import Decimal

from app.models.cart.cart_models import CartItem
from app.models.discounts.discount_code_models import DiscountCode
from app.models.orders.app_state_models import AppState, APP_STATE_ID


def cart_line(user_id, item_id, price, quantity=1, name=None):
    return CartItem(
        user_id=user_id,
        item_id=item_id,
        name=name or item_id,
        price=Decimal(price),
        quantity=quantity,
    )


def discount_code(code, percent="10", is_active=True, is_used=False):
    return DiscountCode(
        code=code,
        discount_percent=Decimal(percent),
        is_active=is_active,
        is_used=is_used,
    )


def order_counter(count):
    return AppState(id=APP_STATE_ID, order_count=count)


async def current_order_count(session):
    state = await session.get(AppState, APP_STATE_ID)
    return state.order_count if state else 0
