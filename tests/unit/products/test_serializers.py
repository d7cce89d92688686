"""Unit tests for Product serializers.

Covers:
- ProductSerializer output fields and JSON-number price.
- Rule serializers: every rule on a field reports, missing fields included.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import (
    ProductCreateRules,
    ProductIdRules,
    ProductReplaceRules,
    ProductSerializer,
)

pytestmark = pytest.mark.unit


def _messages(serializer_class, data) -> dict:
    serializer = serializer_class(data=data)
    serializer.is_valid()
    return {field: [str(m) for m in msgs] for field, msgs in serializer.errors.items()}


# ===========================================================================
# ProductSerializer
# ===========================================================================


class TestProductSerializer:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        assert set(serializer.fields.keys()) == {
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        }

    def test_all_fields_read_only(self):
        serializer = ProductSerializer()
        assert all(field.read_only for field in serializer.fields.values())

    def test_serializes_product(self):
        product = Product.objects.create(name="Widget", price=Decimal("19.99"))
        data = ProductSerializer(product).data
        assert data["id"] == product.id
        assert data["name"] == "Widget"
        assert data["price"] == Decimal("19.99")
        assert data["availability"] is True


# ===========================================================================
# Rule serializers
# ===========================================================================


class TestProductIdRules:
    def test_integer_text_passes(self):
        assert ProductIdRules(data={"id": "2000"}).is_valid()

    @pytest.mark.parametrize("value", ["not-valid-url", "1.5", "", "1e3", "1\n"])
    def test_non_integer_rejected(self, value):
        assert _messages(ProductIdRules, {"id": value}) == {"id": ["ID no válido"]}


class TestProductCreateRules:
    def test_valid_body(self):
        assert ProductCreateRules(data={"name": "Monitor", "price": 200}).is_valid()

    def test_empty_body_reports_every_rule(self):
        assert _messages(ProductCreateRules, {}) == {
            "name": ["El nombre del producto no puede ir vacío"],
            "price": [
                "Valor no válido",
                "El precio del producto no puede ir vacío",
                "Precio no válido",
            ],
        }

    def test_zero_price(self):
        errors = _messages(ProductCreateRules, {"name": "Monitor", "price": 0})
        assert errors == {"price": ["Precio no válido"]}

    def test_non_numeric_price(self):
        errors = _messages(ProductCreateRules, {"name": "Monitor", "price": "hola"})
        assert errors == {"price": ["Valor no válido", "Precio no válido"]}

    def test_numeric_text_price_passes(self):
        assert ProductCreateRules(data={"name": "Monitor", "price": "49.90"}).is_valid()

    def test_price_with_trailing_newline(self):
        errors = _messages(ProductCreateRules, {"name": "Monitor", "price": "5\n"})
        assert errors == {"price": ["Valor no válido"]}

    @pytest.mark.parametrize("value", [True, False, "true", "0"])
    def test_boolean_like_availability_passes(self, value):
        data = {"name": "Monitor", "price": 1, "availability": value}
        assert ProductCreateRules(data=data).is_valid()

    @pytest.mark.parametrize("value", ["quizas", None])
    def test_invalid_availability(self, value):
        data = {"name": "Monitor", "price": 1, "availability": value}
        assert _messages(ProductCreateRules, data) == {
            "availability": ["Valor para disponibilidad no válido"]
        }


class TestProductReplaceRules:
    def test_empty_body_reports_five_errors(self):
        errors = _messages(ProductReplaceRules, {})
        assert sum(len(msgs) for msgs in errors.values()) == 5
        assert errors["availability"] == ["Valor para disponibilidad no válido"]

    @pytest.mark.parametrize("value", [True, False, "true", "false", 1, 0])
    def test_boolean_like_availability_passes(self, value):
        data = {"name": "Monitor", "price": 1, "availability": value}
        assert ProductReplaceRules(data=data).is_valid()

    def test_non_boolean_availability(self):
        data = {"name": "Monitor", "price": 1, "availability": "si"}
        assert _messages(ProductReplaceRules, data) == {
            "availability": ["Valor para disponibilidad no válido"]
        }
