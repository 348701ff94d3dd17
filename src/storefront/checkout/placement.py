"""Checkout placement — command and handler.

Loads the cart, the customer and every product in the cart, runs the
checkout and persists all of them. The handler runs inside a unit of work,
so a rejected checkout persists nothing.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.checkout.checkout import checkout
from storefront.domain import storefront
from storefront.identity.customer import Customer
from storefront.ordering.cart import ShoppingCart


@storefront.command(part_of="ShoppingCart")
class PlaceCheckout:
    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)


@storefront.command_handler(part_of=ShoppingCart)
class PlaceCheckoutHandler:
    @handle(PlaceCheckout)
    def place_checkout(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        customer_repo = current_domain.repository_for(Customer)
        product_repo = current_domain.repository_for(Product)

        cart = cart_repo.get(command.cart_id)
        customer = customer_repo.get(command.customer_id)
        products = [product_repo.get(item.product_id) for item in cart.items]

        receipt = checkout(customer, cart, products)

        customer_repo.add(customer)
        for product in products:
            product_repo.add(product)
        cart_repo.add(cart)

        return receipt
