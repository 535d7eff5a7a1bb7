"""End-to-end tests for the click CLI against a temporary data directory."""

import re

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOREFRONT_SHIPPING_STANDARD", raising=False)
    monkeypatch.delenv("STOREFRONT_SHIPPING_EXPRESS", raising=False)
    return CliRunner()


def _seed(runner: CliRunner) -> None:
    result = runner.invoke(
        cli, ["product", "add", "--name", "Phone X", "--code", "PH-1", "--price", "45000", "--stock", "2"]
    )
    assert result.exit_code == 0, result.output


CHECKOUT_ARGS = [
    "checkout",
    "--name", "Amina B.",
    "--phone", "0555 123 456",
    "--address", "12 Rue Didouche Mourad",
    "--region", "alger",
    "--sub-region", "Sidi M'Hamed",
    "--shipping", "express",
]


class TestProductCommands:

    def test_add_and_list(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "Phone X" in result.output
        assert "45,000.00 DZD" in result.output

    def test_duplicate_code_is_an_error(self, runner):
        _seed(runner)
        result = runner.invoke(
            cli, ["product", "add", "--name", "Other", "--code", "PH-1", "--price", "1"]
        )
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestCartCommands:

    def test_cart_persists_between_invocations(self, runner):
        _seed(runner)
        assert "Added to cart" in runner.invoke(cli, ["cart", "add", "--id", "1"]).output
        assert "Cart updated" in runner.invoke(cli, ["cart", "add", "--id", "1"]).output

        third = runner.invoke(cli, ["cart", "add", "--id", "1"])
        assert third.exit_code == 0
        assert "Insufficient stock" in third.output

        shown = runner.invoke(cli, ["cart", "show", "--shipping", "express"])
        assert "90,000.00 DZD" in shown.output
        assert "91,000.00 DZD" in shown.output

    def test_set_and_remove(self, runner):
        _seed(runner)
        runner.invoke(cli, ["cart", "add", "--id", "1"])
        limited = runner.invoke(cli, ["cart", "set", "--id", "1", "--quantity", "5"])
        assert "Limited stock" in limited.output

        removed = runner.invoke(cli, ["cart", "set", "--id", "1", "--quantity", "0"])
        assert "Removed from cart" in removed.output
        assert "Your cart is empty." in runner.invoke(cli, ["cart", "show"]).output

    def test_remove_missing_item(self, runner):
        result = runner.invoke(cli, ["cart", "remove", "--id", "42"])
        assert result.exit_code == 0
        assert "not in the cart" in result.output

    def test_add_unknown_product(self, runner):
        result = runner.invoke(cli, ["cart", "add", "--id", "42"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCheckoutCommands:

    def test_checkout_places_order_and_empties_cart(self, runner):
        _seed(runner)
        runner.invoke(cli, ["cart", "add", "--id", "1"])

        result = runner.invoke(cli, CHECKOUT_ARGS)
        assert result.exit_code == 0, result.output
        match = re.search(r"Order (ORD-\d+) placed", result.output)
        assert match is not None
        assert "46,000.00 DZD" in result.output

        assert "Your cart is empty." in runner.invoke(cli, ["cart", "show"]).output

        shown = runner.invoke(cli, ["order", "show", "--id", match.group(1)])
        assert shown.exit_code == 0
        assert "payment=pending" in shown.output
        assert "Customer: Amina B." in shown.output

    def test_checkout_with_missing_fields_fails(self, runner):
        _seed(runner)
        runner.invoke(cli, ["cart", "add", "--id", "1"])
        result = runner.invoke(cli, ["checkout", "--name", "Amina"])
        assert result.exit_code == 1
        assert "Missing required field: phone" in result.output
        assert "Order validation failed" not in result.output
        assert "Phone X" in runner.invoke(cli, ["cart", "show"]).output

    def test_checkout_with_empty_cart_fails(self, runner):
        result = runner.invoke(cli, CHECKOUT_ARGS)
        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_unreadable_order_store_reports_failure(self, runner, tmp_path):
        _seed(runner)
        runner.invoke(cli, ["cart", "add", "--id", "1"])
        (tmp_path / "orders.json").write_text('{"not": "a list"}', encoding="utf-8")

        result = runner.invoke(cli, CHECKOUT_ARGS)
        assert result.exit_code == 1
        assert result.output.count("Order not sent") == 1
        assert "Error:" not in result.output
        assert "Phone X" in runner.invoke(cli, ["cart", "show"]).output

    def test_shipping_rate_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("STOREFRONT_SHIPPING_EXPRESS", "2000")
        _seed(runner)
        runner.invoke(cli, ["cart", "add", "--id", "1"])
        result = runner.invoke(cli, CHECKOUT_ARGS)
        assert "47,000.00 DZD" in result.output
