"""Product DRF serializers.

``ProductSerializer`` renders products in responses.  The ``*Rules``
serializers hold the request validation rules consumed by
``validate_request``; they never convert values, the DTOs do that.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.validation import (
    RuleField,
    custom,
    greater_than_zero,
    is_boolean,
    is_int,
    is_numeric,
    not_empty,
)
from modules.products import constants
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Request validation rules
# ---------------------------------------------------------------------------


class ProductIdRules(serializers.Serializer):
    id = RuleField(rules=[is_int(constants.INVALID_ID)])


class ProductCreateRules(serializers.Serializer):
    name = RuleField(rules=[not_empty(constants.EMPTY_NAME)])
    price = RuleField(
        rules=[
            is_numeric(constants.INVALID_VALUE),
            not_empty(constants.EMPTY_PRICE),
            custom(greater_than_zero, constants.INVALID_PRICE),
        ]
    )
    availability = RuleField(
        rules=[is_boolean(constants.INVALID_AVAILABILITY)], optional=True
    )


class ProductReplaceRules(ProductCreateRules):
    availability = RuleField(rules=[is_boolean(constants.INVALID_AVAILABILITY)])
