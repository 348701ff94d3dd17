"""Application tests for adding products to the catalogue."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.catalogue.management import AddProduct
from storefront.catalogue.product import Product


class TestAddProductCommand:
    def test_add_product_persists(self):
        product_id = current_domain.process(
            AddProduct(name="TV", price=10000, quantity=3, weight=15.0),
            asynchronous=False,
        )
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "TV"
        assert product.quantity == 3
        assert product.weight == 15.0
        assert product.requires_shipping() is True

    def test_add_expiring_product_persists_expiry(self):
        expiry = datetime.now(UTC) + timedelta(days=7)
        product_id = current_domain.process(
            AddProduct(name="Cheese", price=100, quantity=10, expires_at=expiry, weight=0.4),
            asynchronous=False,
        )
        product = current_domain.repository_for(Product).get(product_id)
        assert product.is_expirable is True
        assert product.is_expired() is False

    def test_add_product_without_capabilities(self):
        product_id = current_domain.process(
            AddProduct(name="Mobile scratch card", price=50, quantity=100),
            asynchronous=False,
        )
        product = current_domain.repository_for(Product).get(product_id)
        assert product.requires_shipping() is False
        assert product.is_expirable is False

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            current_domain.process(
                AddProduct(name="Broken", price=1, quantity=-5),
                asynchronous=False,
            )

    def test_weightless_shippable_product_rejected(self):
        with pytest.raises(ValidationError):
            current_domain.process(
                AddProduct(name="Feather", price=1, quantity=1, weight=0.0),
                asynchronous=False,
            )
