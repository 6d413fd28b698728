# Cart
from app.models.cart.cart_models import CartItem

# Orders
from app.models.orders.order_models import Order, OrderItem
from app.models.orders.app_state_models import AppState

# Discounts
from app.models.discounts.discount_code_models import DiscountCode
