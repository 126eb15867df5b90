"""Unit tests for the Order aggregate and OrderItem.

Tests cover:
- Order and item validation
- Totals (Decimal arithmetic)
- Adding and removing items
"""

from decimal import Decimal

import pytest

from src.domain.entities import Order, OrderItem
from src.domain.errors import OrderError
from tests.conftest import make_item, make_order


@pytest.mark.unit
class TestOrderItem:
    """Test OrderItem validation and totals."""

    def test_total_is_price_times_quantity(self):
        item = make_item(price="10", quantity=2)

        assert item.total() == Decimal("20")

    def test_zero_quantity_raises(self):
        with pytest.raises(ValueError, match=OrderError.ITEM_QUANTITY_INVALID):
            make_item(quantity=0)

    def test_negative_price_raises(self):
        with pytest.raises(ValueError, match=OrderError.ITEM_PRICE_NEGATIVE):
            make_item(price="-1")

    def test_missing_product_id_raises(self):
        with pytest.raises(ValueError, match=OrderError.ITEM_PRODUCT_ID_REQUIRED):
            make_item(product_id="")

    def test_missing_name_raises(self):
        with pytest.raises(ValueError, match=OrderError.ITEM_NAME_REQUIRED):
            make_item(name="")


@pytest.mark.unit
class TestOrderCreation:
    """Test Order construction."""

    def test_empty_id_raises(self):
        with pytest.raises(ValueError, match=OrderError.ID_REQUIRED):
            Order(id="", customer_id="123", items=[make_item()])

    def test_empty_customer_id_raises(self):
        with pytest.raises(ValueError, match=OrderError.CUSTOMER_ID_REQUIRED):
            Order(id="123", customer_id="", items=[make_item()])

    def test_no_items_raises(self):
        with pytest.raises(ValueError, match="Order must contain at least one item"):
            Order(id="123", customer_id="123", items=[])

    def test_duplicate_item_ids_raise(self):
        with pytest.raises(ValueError, match=OrderError.DUPLICATE_ITEM_ID):
            make_order(items=[make_item(item_id="1"), make_item(item_id="1")])


@pytest.mark.unit
class TestOrderTotal:
    """Test Order.total()."""

    def test_total_sums_line_totals(self):
        order = make_order(
            items=[
                make_item(item_id="1", price="100", quantity=1),
                make_item(item_id="2", price="200", quantity=2),
            ]
        )

        assert order.total() == Decimal("500")

    def test_total_keeps_decimal_precision(self):
        order = make_order(
            items=[
                make_item(item_id="1", price="0.10", quantity=1),
                make_item(item_id="2", price="0.20", quantity=1),
            ]
        )

        assert order.total() == Decimal("0.30")


@pytest.mark.unit
class TestOrderItems:
    """Test adding and removing items."""

    def test_add_item(self):
        order = make_order()
        new_item = make_item(item_id="2", price="5", quantity=1)

        order.add_item(new_item)

        assert [item.id for item in order.items] == ["1", "2"]
        assert order.total() == Decimal("25")

    def test_add_item_with_existing_id_raises(self):
        order = make_order()

        with pytest.raises(ValueError, match=OrderError.DUPLICATE_ITEM_ID):
            order.add_item(make_item(item_id="1"))

    def test_remove_item(self):
        order = make_order(items=[make_item(item_id="1"), make_item(item_id="2")])

        order.remove_item("1")

        assert [item.id for item in order.items] == ["2"]

    def test_remove_unknown_item_raises(self):
        order = make_order()

        with pytest.raises(ValueError, match=OrderError.ITEM_NOT_IN_ORDER):
            order.remove_item("999")

    def test_remove_last_item_raises(self):
        order = make_order()

        with pytest.raises(ValueError, match=OrderError.ITEMS_REQUIRED):
            order.remove_item("1")
        assert len(order.items) == 1

    def test_items_list_can_be_appended_directly(self):
        order = make_order()

        order.items.append(
            OrderItem(
                id="2",
                name="Product 2",
                price=Decimal("5"),
                product_id="456",
                quantity=1,
            )
        )

        assert len(order.items) == 2
