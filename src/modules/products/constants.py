"""Literal messages returned by the Products API."""

from decimal import Decimal

PRODUCT_NOT_FOUND = "Producto no encontrado"
PRODUCT_DELETED = "Producto eliminado"

INVALID_ID = "ID no válido"
EMPTY_NAME = "El nombre del producto no puede ir vacío"
NAME_TOO_LONG = "El nombre del producto no puede superar los 100 caracteres"
INVALID_VALUE = "Valor no válido"
EMPTY_PRICE = "El precio del producto no puede ir vacío"
INVALID_PRICE = "Precio no válido"
INVALID_AVAILABILITY = "Valor para disponibilidad no válido"

MAX_NAME_LENGTH = 100

# Largest value a DecimalField(max_digits=10, decimal_places=2) can hold.
MAX_PRICE = Decimal("99999999.99")
