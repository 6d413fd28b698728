from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, CheckConstraint
from sqlalchemy.orm import relationship
from decimal import Decimal
from app.core.db import Base
from app.models.base.mixins import CreatedAtMixin


class Order(Base, CreatedAtMixin):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)

    subtotal = Column(Numeric(14, 2), nullable=False)
    # plain copy of the redeemed code, not a foreign key
    discount_code = Column(String(64), nullable=True)
    discount_amount = Column(Numeric(14, 2), nullable=False, default=Decimal("0.00"))
    total = Column(Numeric(14, 2), nullable=False)

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        CheckConstraint(
            "subtotal >= 0 AND discount_amount >= 0 AND total >= 0",
            name="ck_order_amounts_non_negative",
        ),
    )

    def __repr__(self):
        return f"<Order id={self.id} user_id={self.user_id} total={self.total}>"


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = Column(String(128), nullable=False)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_item_qty_positive"),
        CheckConstraint("price >= 0", name="ck_order_item_price_non_negative"),
    )

    def __repr__(self):
        return f"<OrderItem id={self.id} order_id={self.order_id} item_id={self.item_id} qty={self.quantity}>"
