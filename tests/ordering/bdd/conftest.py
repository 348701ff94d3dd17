"""Shared BDD fixtures and step definitions for the cart."""

from datetime import UTC, datetime, timedelta

import pytest
from pytest_bdd import given, parsers, then
from storefront.catalogue.product import Product
from storefront.ordering.cart import ShoppingCart
from storefront.ordering.events import CartItemAdded

EVENTS_BY_NAME = {cls.__name__: cls for cls in (CartItemAdded,)}


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def products():
    """Products on the shelf, keyed by name."""
    return {}


@pytest.fixture()
def error():
    """Holds the error raised by the last cart action, if any."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an active cart", target_fixture="cart")
def active_cart():
    cart = ShoppingCart.create(customer_id="cust-001")
    cart._events.clear()
    return cart


@given(parsers.cfparse('a product "{name}" priced {price:d} with {quantity:d} in stock'))
def product_in_stock(products, name, price, quantity):
    products[name] = Product.create(
        name=name,
        price=price,
        quantity=quantity,
        expires_at=datetime.now(UTC) + timedelta(days=7),
        weight=0.4,
    )


@given(parsers.cfparse('an expired product "{name}" priced {price:d} with {quantity:d} in stock'))
def expired_product(products, name, price, quantity):
    products[name] = Product.create(
        name=name,
        price=price,
        quantity=quantity,
        expires_at=datetime.now(UTC) - timedelta(days=1),
        weight=0.4,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cart action fails with "{kind}"'))
def cart_action_fails(error, kind):
    assert error["exc"] is not None, "cart action succeeded"
    assert error["exc"].kind == kind


@then(parsers.cfparse("a {event_name} cart event is raised"))
def cart_event_raised(cart, event_name):
    raised = [type(event).__name__ for event in cart._events]
    assert any(isinstance(event, EVENTS_BY_NAME[event_name]) for event in cart._events), raised
