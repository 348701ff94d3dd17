"""Shopping Cart aggregate — ordered (product, quantity) entries awaiting checkout.

Entries snapshot the product's name, unit price and weight when first
added; stock and expiry are always read from the live product, both when
adding and again at checkout.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.errors import CartCheckedOut, ExpiredProduct, InsufficientStock
from storefront.fulfillment.shipping import ShippableUnit
from storefront.ordering.events import CartItemAdded, CheckoutCompleted


@storefront.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    weight = Float(min_value=0.0)  # kg, only for shippable products
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    def requires_shipping(self) -> bool:
        return self.weight is not None


@storefront.aggregate
class ShoppingCart:
    customer_id = Identifier()
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()
    checked_out_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id=None):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    @property
    def is_checked_out(self) -> bool:
        return self.checked_out_at is not None

    def ensure_open(self):
        if self.is_checked_out:
            raise CartCheckedOut({"cart": ["Cart is already checked out"]})

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def item_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product, quantity, at=None):
        """Add ``quantity`` units of ``product`` (or top up the existing entry).

        Stock is only checked here, never reserved; it is taken at checkout.
        """
        self.ensure_open()
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > product.quantity:
            raise InsufficientStock({"quantity": [f"Not enough stock for {product.name}"]})
        if product.is_expired(at):
            raise ExpiredProduct({"product": [f"Product {product.name} is expired"]})

        now = datetime.now(UTC)
        existing = self.item_for(product.id)

        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(
                product_id=str(product.id),
                name=product.name,
                unit_price=product.price,
                weight=product.weight,
                quantity=quantity,
                added_at=now,
            )
            self.add_items(item)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product.id),
                quantity=quantity,
                cart_quantity=item.quantity,
            )
        )
        return item

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def is_empty(self) -> bool:
        return not self.items

    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def shippable_units(self) -> list[ShippableUnit]:
        """One unit per item to ship, in cart order."""
        units = []
        for item in self.items:
            if not item.requires_shipping():
                continue
            unit = ShippableUnit(product_id=str(item.product_id), name=item.name, weight=item.weight)
            units.extend([unit] * item.quantity)
        return units

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def record_checkout(self, customer_id, subtotal, shipping_fee, amount):
        now = datetime.now(UTC)
        self.checked_out_at = now
        self.updated_at = now

        self.raise_(
            CheckoutCompleted(
                cart_id=str(self.id),
                customer_id=str(customer_id),
                subtotal=subtotal,
                shipping_fee=shipping_fee,
                amount=amount,
                completed_at=now,
            )
        )
