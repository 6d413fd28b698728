from sqlalchemy import Column, Integer, String, CheckConstraint
from app.core.db import Base

APP_STATE_ID = "singleton"


class AppState(Base):
    """Single row holding the running count of successful checkouts."""

    __tablename__ = "app_state"

    id = Column(String(32), primary_key=True, default=APP_STATE_ID)
    order_count = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("order_count >= 0", name="ck_app_state_order_count_non_negative"),
    )

    def __repr__(self):
        return f"<AppState id={self.id} order_count={self.order_count}>"
