"""Unit tests for OrderDraft validation and order identifiers."""

import pytest

from storefront.domain.model.cart import Cart, CartItemInput
from storefront.domain.model.order_draft import CustomerInfo, OrderDraft, PaymentMethod
from storefront.domain.model.shipping import ShippingMethod
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_numbers import OrderNumberGenerator


def _customer(**overrides) -> CustomerInfo:
    fields = dict(
        full_name="Amina B.",
        phone="0555 123 456",
        address="12 Rue Didouche Mourad",
        region="alger",
        sub_region="Sidi M'Hamed",
    )
    fields.update(overrides)
    return CustomerInfo(**fields)


def _cart() -> Cart:
    cart = Cart()
    cart.add(CartItemInput("p1", "PH-1", "Phone X", Money.of("45000"), available_stock=3))
    return cart


class TestOrderDraftProblems:

    def test_complete_draft_has_no_problems(self):
        draft = OrderDraft.from_cart(_cart(), _customer())
        assert draft.problems() == []

    def test_empty_cart_reported(self):
        draft = OrderDraft.from_cart(Cart(), _customer())
        assert "Cart is empty" in draft.problems()

    @pytest.mark.parametrize(
        "field,label",
        [
            ("full_name", "full name"),
            ("phone", "phone"),
            ("address", "address"),
            ("region", "region"),
            ("sub_region", "sub-region"),
        ],
    )
    def test_blank_required_field_reported(self, field, label):
        draft = OrderDraft.from_cart(_cart(), _customer(**{field: "   "}))
        assert draft.problems() == [f"Missing required field: {label}"]

    def test_optional_fields_may_be_blank(self):
        draft = OrderDraft.from_cart(_cart(), _customer(email="", notes=None))
        assert draft.problems() == []

    def test_card_payment_not_available(self):
        draft = OrderDraft.from_cart(_cart(), _customer(), payment_method=PaymentMethod.CARD)
        assert draft.problems() == ["Payment method 'Bank card' is not available yet"]

    def test_all_problems_listed_together(self):
        draft = OrderDraft.from_cart(Cart(), _customer(full_name="", phone=""))
        assert len(draft.problems()) == 3


class TestOrderDraftSnapshot:

    def test_lines_do_not_follow_later_cart_edits(self):
        cart = _cart()
        draft = OrderDraft.from_cart(cart, _customer())
        cart.set_quantity("p1", 3)
        cart.add(CartItemInput("p2", "PH-2", "Case", Money.of("900"), available_stock=1))
        assert len(draft.lines) == 1
        assert draft.lines[0].quantity == 1

    def test_line_items_snapshot_prices(self):
        draft = OrderDraft.from_cart(_cart(), _customer())
        [item] = draft.line_items()
        assert item.product_name == "Phone X"
        assert item.quantity.value == 1
        assert item.line_total == Money.of("45000")


class TestSummaryNotes:

    def test_notes_carry_contact_payment_and_shipping(self):
        draft = OrderDraft.from_cart(
            _cart(),
            _customer(email="amina@example.com", notes="Call after 5pm"),
            payment_method=PaymentMethod.CASH_ON_DELIVERY,
            shipping_method=ShippingMethod.EXPRESS,
        )
        notes = draft.summary_notes()
        assert "Customer: Amina B." in notes
        assert "Phone: 0555 123 456" in notes
        assert "Email: amina@example.com" in notes
        assert "Address: 12 Rue Didouche Mourad, Sidi M'Hamed, alger" in notes
        assert "Payment method: Cash on delivery" in notes
        assert "Shipping method: Express" in notes
        assert "Notes: Call after 5pm" in notes

    def test_missing_notes_say_none(self):
        draft = OrderDraft.from_cart(_cart(), _customer())
        assert draft.summary_notes().endswith("Notes: none")
        assert "Email:" not in draft.summary_notes()


class TestOrderNumberGenerator:

    def test_uses_prefix_and_clock(self):
        gen = OrderNumberGenerator(clock=lambda: 1718000000000)
        assert gen.next_id() == "ORD-1718000000000"

    def test_strictly_increasing_within_same_millisecond(self):
        gen = OrderNumberGenerator(clock=lambda: 1000)
        ids = [gen.next_id() for _ in range(3)]
        assert ids == ["ORD-1000", "ORD-1001", "ORD-1002"]

    def test_default_clock_produces_unique_ids(self):
        gen = OrderNumberGenerator()
        assert len({gen.next_id() for _ in range(50)}) == 50
