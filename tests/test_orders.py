"""Заказы: расчёт стоимости, привязка к пользователю и выдача."""

from decimal import Decimal

import pytest

from extensions import db
from models import Order
from services import credential_store, order_ledger
from services.errors import ValidationError
from utils.session_context import SessionContext

UNIT_PRICE = Decimal("2500.00")


def _login_as(client_info, username):
    ctx = SessionContext({})
    credential_store.register(ctx, client_info, username, "s3cret-pass")
    return ctx


class TestCreateOrder:

    def test_total_is_unit_price_times_quantity(self, session_ctx):
        result = order_ledger.create_order(session_ctx, "Gaming Monitor", "1 Main St", 3, UNIT_PRICE)

        assert result["total_price"] == 7500.00
        order = db.session.get(Order, result["order_id"])
        assert order.total_price == Decimal("7500.00")
        assert order.quantity == 3
        assert order.status == "pending"

    def test_product_name_does_not_affect_price(self, session_ctx):
        mouse = order_ledger.create_order(session_ctx, "Razer Gaming Mouse", "addr", 2, UNIT_PRICE)
        monitor = order_ledger.create_order(session_ctx, "Gaming Monitor", "addr", 2, UNIT_PRICE)

        assert mouse["total_price"] == monitor["total_price"] == 5000.00

    def test_anonymous_checkout_has_no_owner(self, session_ctx):
        result = order_ledger.create_order(session_ctx, "Gaming Headset", "addr", 1, UNIT_PRICE)

        assert db.session.get(Order, result["order_id"]).user_id is None

    def test_order_is_attributed_to_session_user(self, client_info):
        ctx = _login_as(client_info, "alice")

        result = order_ledger.create_order(ctx, "Gaming Headset", "addr", 1, UNIT_PRICE)

        assert db.session.get(Order, result["order_id"]).user_id == ctx.user_id

    @pytest.mark.parametrize(
        "product,address,quantity",
        [
            ("Mouse", None, 1),
            ("Mouse", "", 1),
            (None, "addr", 1),
            ("Mouse", "addr", None),
            ("Mouse", "addr", 0),
        ],
    )
    def test_missing_fields_create_nothing(self, session_ctx, product, address, quantity):
        with pytest.raises(ValidationError) as exc_info:
            order_ledger.create_order(session_ctx, product, address, quantity, UNIT_PRICE)

        assert exc_info.value.message == "Missing order information"
        assert Order.query.count() == 0

    @pytest.mark.parametrize("quantity", [-2, "3", 1.5, True])
    def test_quantity_must_be_positive_integer(self, session_ctx, quantity):
        with pytest.raises(ValidationError) as exc_info:
            order_ledger.create_order(session_ctx, "Mouse", "addr", quantity, UNIT_PRICE)

        assert exc_info.value.message == "Quantity must be a positive integer"
        assert Order.query.count() == 0

    def test_total_above_column_limit_is_rejected(self, session_ctx):
        with pytest.raises(ValidationError) as exc_info:
            order_ledger.create_order(session_ctx, "Mouse", "addr", 40000, UNIT_PRICE)

        assert exc_info.value.message == "Quantity must be a positive integer"
        assert Order.query.count() == 0

    def test_largest_total_that_fits_is_accepted(self, session_ctx):
        result = order_ledger.create_order(session_ctx, "Mouse", "addr", 39999, UNIT_PRICE)

        assert db.session.get(Order, result["order_id"]).total_price == Decimal("99997500.00")

    def test_calculate_total_rounds_to_cents(self):
        assert order_ledger.calculate_total(Decimal("19.999"), 3) == Decimal("60.00")


class TestGetOrders:

    def test_user_sees_only_own_orders(self, client_info):
        alice = _login_as(client_info, "alice")
        bob = _login_as(client_info, "bob")
        order_ledger.create_order(alice, "Mouse", "Alice st", 1, UNIT_PRICE)
        order_ledger.create_order(bob, "Keyboard", "Bob st", 2, UNIT_PRICE)
        order_ledger.create_order(SessionContext({}), "Monitor", "Anon st", 1, UNIT_PRICE)

        orders = order_ledger.get_orders(alice.user_id)

        assert [o["product_name"] for o in orders] == ["Mouse"]
        assert all(o["user_id"] == alice.user_id for o in orders)

    def test_without_user_lists_everything_newest_first(self, session_ctx):
        first = order_ledger.create_order(session_ctx, "first", "addr", 1, UNIT_PRICE)
        second = order_ledger.create_order(session_ctx, "second", "addr", 1, UNIT_PRICE)

        orders = order_ledger.get_orders()

        assert [o["id"] for o in orders] == [second["order_id"], first["order_id"]]
        assert orders[0]["total_price"] == 2500.00
        assert orders[0]["status"] == "pending"
        assert orders[0]["created_at"]

    def test_empty_ledger(self):
        assert order_ledger.get_orders() == []
        assert order_ledger.get_orders(42) == []
