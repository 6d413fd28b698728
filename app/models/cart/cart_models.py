from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint, UniqueConstraint
from app.core.db import Base
from app.models.base.mixins import TimestampMixin


class CartItem(Base, TimestampMixin):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    item_id = Column(String(128), nullable=False)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        UniqueConstraint("user_id", "item_id", name="uq_cart_item_user_item"),
        CheckConstraint("quantity >= 1", name="ck_cart_item_qty_positive"),
        CheckConstraint("price >= 0", name="ck_cart_item_price_non_negative"),
    )

    def __repr__(self):
        return f"<CartItem id={self.id} user_id={self.user_id} item_id={self.item_id} qty={self.quantity}>"
