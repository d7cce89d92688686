"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.  Every operation on
a single product starts with an existence check and raises
``ProductNotFound`` when the product is missing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import models, transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import EntityId
    from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        product = Product(
            name=dto.name,
            price=dto.price,
            availability=dto.availability,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def replace_product(self, id: EntityId, dto: ReplaceProductDTO) -> Product:
        """Overwrite every writable field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability

        product = self._repo.save(product)
        logger.info("product.replaced", product_id=product.id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: EntityId) -> Product:
        """Flip ``availability`` of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        product.toggle_availability()
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=product.id,
            availability=product.availability,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: EntityId) -> None:
        """Remove a product permanently.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self._get_or_raise(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> "models.QuerySet[Product]":
        """Return every product ordered by id ascending."""
        return self._repo.list()

    def get_product(self, id: EntityId) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=product.id)
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: EntityId) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound()
        return product
