"""Tests for cart items and cart sources."""

from decimal import Decimal

import pytest

from checkout.cart import CartItem, MemoryCart, ProductType, cart_from
from tests._fakes import adobo, lechon_belly


class TestFromMapping:
    def test_lechon_entry(self):
        item = CartItem.from_mapping({
            "productType": "lechon",
            "productlechon_id": 7,
            "price": 1200,
            "quantity": 1,
            "name": "Lechon Belly",
        })

        assert item.product_type is ProductType.LECHON
        assert item.product_id == 7
        assert item.unit_price == Decimal("1200")
        assert item.quantity == 1
        assert item.name == "Lechon Belly"

    def test_viands_entry_uses_its_own_id_field(self):
        item = CartItem.from_mapping({
            "productType": "viands",
            "productviands_id": "v-21",
            "productlechon_id": "ignored",
            "price": "180.50",
            "quantity": "2",
        })

        assert item.product_id == "v-21"
        assert item.unit_price == Decimal("180.50")
        assert item.quantity == 2
        assert item.line_total == Decimal("361.00")

    def test_float_price(self):
        item = CartItem.from_mapping({"productType": "viands", "price": 99.5, "quantity": 2.0})

        assert item.unit_price == Decimal("99.5")
        assert item.quantity == 2

    @pytest.mark.parametrize("price", ["abc", None, -1, True, [], "nan"])
    def test_bad_price_becomes_none(self, price):
        item = CartItem.from_mapping({"productType": "lechon", "price": price, "quantity": 1})

        assert item.unit_price is None
        assert item.line_total == Decimal(0)

    @pytest.mark.parametrize("quantity", ["two", None, 0, -3, 1.5, False])
    def test_bad_quantity_becomes_none(self, quantity):
        item = CartItem.from_mapping({"productType": "lechon", "price": 10, "quantity": quantity})

        assert item.quantity is None
        assert item.line_total == Decimal(0)

    def test_checked_numbers_drop_invalid_values(self):
        item = CartItem(ProductType.LECHON, 11, -2, Decimal("NaN"))

        assert item.checked_price is None
        assert item.checked_quantity is None
        assert lechon_belly(3).checked_price == Decimal("1200")
        assert lechon_belly(3).checked_quantity == 3

    def test_unknown_product_type_raises(self):
        with pytest.raises(ValueError):
            CartItem.from_mapping({"productType": "dessert", "price": 1, "quantity": 1})


class TestMemoryCart:
    async def test_items_in_insertion_order(self):
        cart = MemoryCart([lechon_belly()])
        await cart.add(adobo())

        items = await cart.items()

        assert [item.name for item in items] == ["Lechon Belly", "Pork Adobo"]
        assert len(cart) == 2

    async def test_items_is_a_snapshot(self):
        cart = MemoryCart([lechon_belly()])
        snapshot = await cart.items()

        await cart.clear()

        assert len(snapshot) == 1
        assert await cart.items() == ()

    async def test_clear(self):
        cart = MemoryCart([lechon_belly(), adobo()])

        await cart.clear()

        assert len(cart) == 0


class TestFunctionalCart:
    async def test_wraps_callables(self):
        store = {"items": [lechon_belly()]}

        async def load():
            return list(store["items"])

        async def reset():
            store["items"] = []

        cart = cart_from(items=load, clear=reset)

        assert len(await cart.items()) == 1
        await cart.clear()
        assert await cart.items() == []
