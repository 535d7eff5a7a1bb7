"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, CartItemInput, CartLine, CartOutcome
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _item(item_id="p1", price="45000", stock=2, name="Phone X") -> CartItemInput:
    return CartItemInput(
        item_id=item_id,
        product_id=f"CODE-{item_id}",
        display_name=name,
        unit_price=Money.of(price),
        available_stock=stock,
    )


class TestCartAdd:

    def test_first_add_creates_line_with_quantity_one(self):
        cart = Cart()
        change = cart.add(_item())
        assert change.outcome == CartOutcome.ADDED
        assert change.line.quantity == 1
        assert cart.contains("p1")

    def test_repeat_add_increments_instead_of_duplicating(self):
        cart = Cart()
        cart.add(_item(stock=5))
        change = cart.add(_item(stock=5))
        assert change.outcome == CartOutcome.QUANTITY_INCREASED
        assert len(cart) == 1
        assert cart.get("p1").quantity == 2

    def test_add_at_stock_limit_rejected(self):
        cart = Cart()
        cart.add(_item(stock=2))
        cart.add(_item(stock=2))
        change = cart.add(_item(stock=2))
        assert change.outcome == CartOutcome.STOCK_EXCEEDED
        assert not change.changed
        assert cart.get("p1").quantity == 2

    def test_rejected_add_after_stock_shrank_leaves_line_untouched(self):
        cart = Cart()
        for _ in range(3):
            cart.add(_item(stock=5))
        change = cart.add(_item(stock=2))
        assert change.outcome == CartOutcome.STOCK_EXCEEDED
        line = cart.get("p1")
        assert (line.quantity, line.available_stock) == (3, 5)

    def test_add_out_of_stock_item_rejected(self):
        cart = Cart()
        change = cart.add(_item(stock=0))
        assert change.outcome == CartOutcome.STOCK_EXCEEDED
        assert cart.is_empty

    def test_add_refreshes_stock_snapshot(self):
        cart = Cart()
        cart.add(_item(stock=2))
        cart.add(_item(stock=7))
        assert cart.get("p1").available_stock == 7

    def test_add_keeps_first_price(self):
        cart = Cart()
        cart.add(_item(price="100", stock=3))
        cart.add(_item(price="999", stock=3))
        assert cart.get("p1").unit_price == Money.of("100")

    def test_add_from_product(self):
        product = Product(
            id="7", product_id="PH-7", name="Tablet", price=Money.of("30000"),
            stock_quantity=4, image_url="https://img/7.png",
        )
        cart = Cart()
        cart.add(CartItemInput.from_product(product))
        line = cart.get("7")
        assert line.product_id == "PH-7"
        assert line.image_ref == "https://img/7.png"
        assert line.available_stock == 4


class TestCartSetQuantity:

    def test_set_within_stock(self):
        cart = Cart()
        cart.add(_item(stock=5))
        change = cart.set_quantity("p1", 4)
        assert change.outcome == CartOutcome.QUANTITY_UPDATED
        assert cart.get("p1").quantity == 4

    def test_set_above_stock_is_clamped(self):
        cart = Cart()
        cart.add(_item(stock=3))
        change = cart.set_quantity("p1", 10)
        assert change.outcome == CartOutcome.QUANTITY_LIMITED
        assert change.requested_quantity == 10
        assert cart.get("p1").quantity == 3

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_set_zero_or_negative_removes(self, quantity):
        cart = Cart()
        cart.add(_item())
        change = cart.set_quantity("p1", quantity)
        assert change.outcome == CartOutcome.REMOVED
        assert not cart.contains("p1")

    def test_set_unknown_item_is_noop(self):
        cart = Cart()
        change = cart.set_quantity("missing", 2)
        assert change.outcome == CartOutcome.NOT_IN_CART
        assert cart.is_empty


class TestCartRemoveAndClear:

    def test_remove_returns_removed_line(self):
        cart = Cart()
        cart.add(_item(name="Phone X"))
        change = cart.remove("p1")
        assert change.outcome == CartOutcome.REMOVED
        assert change.line.display_name == "Phone X"
        assert cart.is_empty

    def test_remove_absent_is_noop(self):
        change = Cart().remove("nope")
        assert change.outcome == CartOutcome.NOT_IN_CART

    def test_clear_empties(self):
        cart = Cart()
        cart.add(_item("a"))
        cart.add(_item("b"))
        assert cart.clear().outcome == CartOutcome.CLEARED
        assert cart.is_empty
        assert cart.subtotal == Money.zero()


class TestCartInvariants:

    def test_quantity_stays_within_stock_for_any_sequence(self):
        cart = Cart()
        ops = [("add", None), ("set", 9), ("add", None), ("set", 1), ("add", None),
               ("add", None), ("add", None), ("set", 0), ("add", None)]
        for op, qty in ops:
            if op == "add":
                cart.add(_item(stock=3))
            else:
                cart.set_quantity("p1", qty)
            line = cart.get("p1")
            if line is not None:
                assert 1 <= line.quantity <= 3

    def test_lines_preserve_insertion_order(self):
        cart = Cart()
        for item_id in ("c", "a", "b"):
            cart.add(_item(item_id))
        assert [line.item_id for line in cart.lines] == ["c", "a", "b"]

    def test_lines_are_copies(self):
        cart = Cart()
        cart.add(_item(stock=5))
        cart.lines[0].quantity = 5
        assert cart.get("p1").quantity == 1

    def test_duplicate_lines_rejected_on_construction(self):
        line = CartLine("p1", "C1", "Phone", Money.of("1"), available_stock=2)
        with pytest.raises(ValidationError, match="Duplicate"):
            Cart([line, line])

    def test_line_quantity_above_stock_rejected(self):
        with pytest.raises(ValidationError, match="exceeds available stock"):
            CartLine("p1", "C1", "Phone", Money.of("1"), available_stock=1, quantity=2)


class TestCartTotals:

    def test_totals_on_empty_cart(self):
        cart = Cart()
        assert cart.total_item_count == 0
        assert cart.subtotal == Money.zero()

    def test_subtotal_grows_by_price_times_quantity(self):
        cart = Cart()
        cart.add(_item("a", price="1000", stock=5))
        before = cart.subtotal
        cart.add(_item("b", price="250", stock=5))
        cart.set_quantity("b", 3)
        assert cart.subtotal == before + Money.of("750")
        assert cart.total_item_count == 4

    def test_two_adds_then_rejected_then_removed(self):
        cart = Cart()
        cart.add(_item(price="45000", stock=2))
        cart.add(_item(price="45000", stock=2))
        assert len(cart) == 1
        assert cart.get("p1").quantity == 2
        assert cart.subtotal == Money.of("90000")

        assert cart.add(_item(price="45000", stock=2)).outcome == CartOutcome.STOCK_EXCEEDED
        assert cart.get("p1").quantity == 2

        cart.set_quantity("p1", 0)
        assert cart.is_empty
        assert cart.subtotal == Money.zero()
