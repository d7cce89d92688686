"""Product model.

Invariants:
- ``name`` is never empty.
- ``price`` is strictly greater than zero (check constraint + ``clean``).
- ``availability`` defaults to ``True``.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import TimeStampedModel
from modules.products.constants import MAX_NAME_LENGTH


class Product(TimeStampedModel):
    """The only resource exposed by the API."""

    name = models.CharField(max_length=MAX_NAME_LENGTH)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="products_name_not_empty",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None:
            self.name = self.name.strip()
        if not self.name:
            raise ValidationError({"name": "El nombre del producto no puede ir vacío"})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Precio no válido"})

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def toggle_availability(self) -> bool:
        self.availability = not self.availability
        return self.availability

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
