from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def sample_product():
    """A persisted, available Product."""
    return Product.objects.create(
        name="Monitor Curvo de 49 pulgadas",
        price=Decimal("300.00"),
    )
