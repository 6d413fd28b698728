"""HTTP surface: status codes, camelCase payloads and error envelopes."""

import logging

import pytest

from tests.factories import cart_line, discount_code

USER = "user-api-test"


async def _add(client, item_id="itemA", name="A", price=10.00, quantity=1, user_id=USER):
    return await client.post(
        "/cart",
        json={
            "userId": user_id,
            "itemId": item_id,
            "name": name,
            "price": price,
            "quantity": quantity,
        },
    )


class TestHealth:
    async def test_health_check(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert "X-Request-ID" in response.headers


    async def test_access_log_carries_request_id(self, client):
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        access = logging.getLogger("access")
        access.addHandler(handler)
        try:
            response = await client.get("/", headers={"X-Request-ID": "req-123"})
        finally:
            access.removeHandler(handler)

        assert response.headers["X-Request-ID"] == "req-123"
        assert [r.request_id for r in records] == ["req-123"]


class TestCartEndpoints:
    async def test_add_item(self, client):
        response = await _add(client, price=5.5, quantity=2)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Item added to cart successfully"
        assert body["item"]["userId"] == USER
        assert body["item"]["itemId"] == "itemA"
        assert body["item"]["price"] == "5.50"
        assert body["item"]["quantity"] == 2

    @pytest.mark.parametrize(
        "overrides",
        [
            {"price": 0},
            {"price": -1},
            {"price": 1.234},
            {"quantity": 0},
            {"quantity": 1.5},
            {"price": 12345678901},
            {"quantity": 2**31},
            {"userId": "u" * 129},
            {"userId": ""},
            {"name": ""},
        ],
    )
    async def test_invalid_payload_is_rejected(self, client, overrides):
        payload = {"userId": USER, "itemId": "itemA", "name": "A", "price": 10, "quantity": 1}
        payload.update(overrides)

        response = await client.post("/cart", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "VALIDATION_ERROR"

    async def test_largest_price_is_accepted(self, client):
        response = await _add(client, price=9999999999.99)

        assert response.status_code == 201
        assert response.json()["item"]["price"] == "9999999999.99"

    async def test_get_cart(self, client):
        await _add(client, item_id="itemA")
        await _add(client, item_id="itemB", price=2)

        response = await client.get(f"/cart/{USER}")

        assert response.status_code == 200
        assert [i["itemId"] for i in response.json()] == ["itemA", "itemB"]

    async def test_get_unknown_cart_is_empty_list(self, client):
        response = await client.get("/cart/nobody")

        assert response.status_code == 200
        assert response.json() == []

    async def test_clear_cart(self, client):
        await _add(client, item_id="itemA")
        await _add(client, item_id="itemB")

        response = await client.delete(f"/cart/{USER}")

        assert response.status_code == 200
        assert response.json() == {"message": "Cart cleared successfully", "count": 2}


class TestCheckoutEndpoint:
    async def test_checkout_without_code(self, client, seed):
        await seed(cart_line(USER, "itemA", "10.00", 1), cart_line(USER, "itemB", "5.50", 2))

        response = await client.post("/order/checkout", json={"userId": USER})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Checkout successful!"
        order = body["order"]
        assert order["subtotal"] == "21.00"
        assert order["discountAmount"] == "0.00"
        assert order["total"] == "21.00"
        assert order["discountCode"] is None
        assert len(order["items"]) == 2

        cart = await client.get(f"/cart/{USER}")
        assert cart.json() == []

    async def test_checkout_with_code(self, client, seed):
        await seed(
            cart_line(USER, "itemA", "10.00", 1),
            cart_line(USER, "itemB", "5.50", 2),
            discount_code("SAVE10"),
        )

        response = await client.post(
            "/order/checkout",
            json={"userId": USER, "discountCode": "SAVE10"},
        )

        assert response.status_code == 201
        order = response.json()["order"]
        assert order["discountCode"] == "SAVE10"
        assert order["discountAmount"] == "2.10"
        assert order["total"] == "18.90"

        fetched = await client.get(f"/order/{order['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["total"] == "18.90"

    async def test_empty_cart(self, client):
        response = await client.post("/order/checkout", json={"userId": USER})

        assert response.status_code == 404
        assert response.json()["error_code"] == "CART_EMPTY"

    async def test_missing_user_id(self, client):
        response = await client.post("/order/checkout", json={})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_unknown_order(self, client):
        response = await client.get("/order/12345")

        assert response.status_code == 404
        assert response.json()["error_code"] == "ORDER_NOT_FOUND"


class TestAdminEndpoints:
    async def test_active_discount_absent(self, client):
        response = await client.get("/admin/discount/active")

        assert response.status_code == 200
        assert response.json() == {"activeDiscount": None}

    async def test_active_discount_present(self, client, seed):
        await seed(discount_code("LIVE", percent="10"))

        response = await client.get("/admin/discount/active")

        active = response.json()["activeDiscount"]
        assert active["code"] == "LIVE"
        assert active["discountPercent"] == "10.00"
        assert active["isActive"] is True
        assert active["isUsed"] is False
        assert active["orderUsedInId"] is None

    async def test_stats(self, client, seed):
        await seed(cart_line(USER, "itemA", "10.00", 3))
        await client.post("/order/checkout", json={"userId": USER})

        response = await client.get("/admin/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalOrders": 1,
            "totalItemsPurchased": 3,
            "totalPurchaseAmount": "30.00",
            "totalDiscountAmount": "0.00",
            "discountCodesGenerated": [],
            "discountCodesUsed": [],
        }
