# app/services/orders/order_counter_service.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.dialects import postgresql, sqlite

from app.models.orders.app_state_models import AppState, APP_STATE_ID

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _increment_stmt(dialect_name: str):
    """
    INSERT the singleton row at 1, or bump the existing count.
    Runs in the caller's transaction so a rollback undoes it.
    """
    try:
        insert = _INSERTS[dialect_name]
    except KeyError:
        raise NotImplementedError(f"Order counter not supported on {dialect_name}")

    return (
        insert(AppState)
        .values(id=APP_STATE_ID, order_count=1)
        .on_conflict_do_update(
            index_elements=[AppState.id],
            set_={"order_count": AppState.order_count + 1},
        )
        .returning(AppState.order_count)
    )


async def next_order_number(db: AsyncSession) -> int:
    stmt = _increment_stmt(db.get_bind().dialect.name)
    result = await db.execute(stmt)
    return result.scalar_one()

