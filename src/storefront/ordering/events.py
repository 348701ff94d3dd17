"""Domain events for the ShoppingCart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the cart, or its quantity was topped up."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    cart_quantity = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CheckoutCompleted:
    """The cart was paid for and its stock taken off the shelf."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    subtotal = Float(required=True)
    shipping_fee = Float(required=True)
    amount = Float(required=True)
    completed_at = DateTime(required=True)
