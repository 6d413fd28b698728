from sqlalchemy import Column, Integer, String, Numeric, Boolean, ForeignKey, Index, CheckConstraint
from app.core.db import Base
from app.models.base.mixins import CreatedAtMixin


class DiscountCode(Base, CreatedAtMixin):
    __tablename__ = "discount_codes"

    id = Column(Integer, primary_key=True)
    code = Column(String(64), nullable=False, unique=True, index=True)
    discount_percent = Column(Numeric(5, 2), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    is_used = Column(Boolean, default=False, nullable=False)
    order_used_in_id = Column(
        Integer,
        ForeignKey("orders.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )

    __table_args__ = (
        CheckConstraint(
            "discount_percent > 0 AND discount_percent <= 100",
            name="ck_discount_code_percent_range",
        ),
        Index("ix_discount_code_active_used", "is_active", "is_used"),
    )

    def __repr__(self):
        return f"<DiscountCode id={self.id} code={self.code} active={self.is_active} used={self.is_used}>"
