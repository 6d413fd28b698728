"""Admin read-side: active discount lookup and store statistics."""

from decimal import Decimal

from app.schemas.orders.order_schemas import CheckoutRequest
from app.services.admin.admin_service import get_active_discount_code, get_statistics
from app.services.orders.order_service import checkout

from tests.factories import cart_line, discount_code


class TestActiveDiscount:
    async def test_none_when_no_codes(self, db):
        assert await get_active_discount_code(db) is None

    async def test_ignores_used_and_inactive_codes(self, db, seed):
        await seed(
            discount_code("USED", is_active=False, is_used=True),
            discount_code("OFF", is_active=False),
            discount_code("LIVE"),
        )

        active = await get_active_discount_code(db)

        assert active.code == "LIVE"
        assert active.is_active is True
        assert active.is_used is False


class TestStatistics:
    async def test_empty_store_defaults(self, db):
        stats = await get_statistics(db)

        assert stats.total_orders == 0
        assert stats.total_items_purchased == 0
        assert stats.total_purchase_amount == "0.00"
        assert stats.total_discount_amount == "0.00"
        assert stats.discount_codes_generated == []
        assert stats.discount_codes_used == []

    async def test_aggregates_orders_and_codes(self, db, seed):
        await seed(
            discount_code("SAVE10"),
            discount_code("SPARE"),
            cart_line("alice", "itemA", "10.00", 1),
            cart_line("alice", "itemB", "5.50", 2),
            cart_line("bob", "itemC", "4.00", 5),
        )

        await checkout(db, CheckoutRequest(user_id="alice", discount_code="SAVE10"))
        await checkout(db, CheckoutRequest(user_id="bob"))

        stats = await get_statistics(db)

        assert stats.total_orders == 2
        assert stats.total_items_purchased == 8
        # 18.90 + 20.00
        assert stats.total_purchase_amount == "38.90"
        assert stats.total_discount_amount == "2.10"
        assert {c.code for c in stats.discount_codes_generated} == {"SAVE10", "SPARE"}
        assert [c.code for c in stats.discount_codes_used] == ["SAVE10"]
        assert stats.discount_codes_used[0].discount_percent == Decimal("10.00")

    async def test_codes_listed_newest_first(self, db, seed):
        await seed(discount_code("FIRST", is_active=False))
        await seed(discount_code("SECOND"))

        stats = await get_statistics(db)

        assert [c.code for c in stats.discount_codes_generated] == ["SECOND", "FIRST"]
