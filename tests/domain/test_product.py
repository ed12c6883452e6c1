"""Unit tests for the Product entity."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, to_price


class TestProductCreation:

    def test_fields(self):
        p = Product(name="Widget", price=Decimal("9.99"), id=1)
        assert p.id == 1
        assert p.name == "Widget"
        assert p.price == Decimal("9.99")

    def test_id_defaults_to_unassigned(self):
        assert Product(name="Widget", price=Decimal("1")).id is None

    def test_price_coerced_from_string(self):
        assert Product(name="Widget", price="9.99").price == Decimal("9.99")

    def test_price_coerced_from_float_without_rounding_noise(self):
        assert Product(name="Widget", price=9.99).price == Decimal("9.99")

    def test_price_coerced_from_int(self):
        assert Product(name="Widget", price=10).price == Decimal("10")

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product(name="Widget", price="cheap")

    def test_none_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(name=None, price="1")

    def test_empty_name_accepted(self):
        assert Product(name="", price="1").name == ""

    def test_negative_price_accepted(self):
        assert Product(name="Refund", price="-5").price == Decimal("-5")


class TestProductId:

    def test_unassigned_id_can_be_set(self):
        p = Product(name="Widget", price="1")
        p.id = 7
        assert p.id == 7

    def test_assigned_id_cannot_change(self):
        p = Product(name="Widget", price="1", id=3)
        with pytest.raises(ValidationError, match="immutable"):
            p.id = 4
        assert p.id == 3

    def test_reassigning_same_id_is_allowed(self):
        p = Product(name="Widget", price="1", id=3)
        p.id = 3
        assert p.id == 3


class TestProductMutators:

    def test_rename(self):
        p = Product(name="Widget", price="1", id=1)
        p.rename("Gizmo")
        assert p.name == "Gizmo"

    def test_rename_to_none_rejected(self):
        p = Product(name="Widget", price="1", id=1)
        with pytest.raises(ValidationError):
            p.rename(None)
        assert p.name == "Widget"

    def test_reprice(self):
        p = Product(name="Widget", price="1", id=1)
        p.reprice("2.50")
        assert p.price == Decimal("2.50")

    def test_reprice_invalid_keeps_old_price(self):
        p = Product(name="Widget", price="1", id=1)
        with pytest.raises(ValidationError):
            p.reprice("n/a")
        assert p.price == Decimal("1")

    def test_copy_is_equal_but_independent(self):
        p = Product(name="Widget", price="1", id=1)
        c = p.copy()
        assert c == p
        c.rename("Other")
        assert p.name == "Widget"


class TestToPrice:

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            to_price(True)

    def test_decimal_passthrough(self):
        assert to_price(Decimal("3.10")) == Decimal("3.10")

    @pytest.mark.parametrize("raw", ["NaN", "sNaN", "Infinity", "-Infinity", float("nan"), float("inf")])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product(name="Widget", price=raw)
