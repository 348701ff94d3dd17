"""Product aggregate root.

Capabilities are optional fields rather than product subclasses: a product
with ``expires_at`` is expirable, a product with ``weight`` (kilograms) is
shippable. Any combination of the two is valid.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from storefront.catalogue.events import ProductAdded, StockReduced
from storefront.domain import storefront
from storefront.errors import OutOfStock


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@storefront.aggregate
class Product:
    """A sellable item with a unit price and an on-hand quantity."""

    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=0)
    expires_at = DateTime()
    weight = Float(min_value=0.0)
    added_at = DateTime()

    @invariant.post
    def shippable_products_have_weight(self):
        if self.weight is not None and self.weight <= 0:
            raise ValidationError({"weight": ["Shippable products must weigh more than zero"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name, price, quantity, expires_at=None, weight=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            price=price,
            quantity=quantity,
            expires_at=expires_at,
            weight=weight,
            added_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                price=price,
                quantity=quantity,
                expires_at=expires_at,
                weight=weight,
                added_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------
    @property
    def is_expirable(self) -> bool:
        return self.expires_at is not None

    def requires_shipping(self) -> bool:
        return self.weight is not None

    def is_expired(self, at: datetime | None = None) -> bool:
        """True once ``at`` (default: now) is past the expiry timestamp."""
        if self.expires_at is None:
            return False
        now = as_utc(at) if at is not None else datetime.now(UTC)
        return now > as_utc(self.expires_at)

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def reduce_stock(self, quantity):
        """Take ``quantity`` units off the shelf."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.quantity:
            raise OutOfStock({"quantity": [f"Product {self.name} is out of stock"]})

        previous_quantity = self.quantity
        self.quantity = previous_quantity - quantity

        self.raise_(
            StockReduced(
                product_id=str(self.id),
                quantity=quantity,
                previous_quantity=previous_quantity,
                new_quantity=self.quantity,
                reduced_at=datetime.now(UTC),
            )
        )
