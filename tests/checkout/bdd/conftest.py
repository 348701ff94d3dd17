"""Shared BDD fixtures and step definitions for checkout."""

from datetime import UTC, datetime, timedelta

import pytest
from pytest_bdd import given, parsers, then
from storefront.catalogue.product import Product
from storefront.identity.customer import Customer
from storefront.ordering.cart import ShoppingCart


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def shelf():
    """Products on the shelf, keyed by name."""
    return {}


@pytest.fixture()
def outcome():
    """Container for the checkout receipt or the captured error."""
    return {"receipt": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the shelf holds "{name}" priced {price:d} weighing {weight:f} kg with {quantity:d} in stock'))
def shippable_product(shelf, name, price, weight, quantity):
    shelf[name] = Product.create(
        name=name,
        price=price,
        quantity=quantity,
        expires_at=datetime.now(UTC) + timedelta(days=7),
        weight=weight,
    )


@given(parsers.cfparse('the shelf holds digital "{name}" priced {price:d} with {quantity:d} in stock'))
def digital_product(shelf, name, price, quantity):
    shelf[name] = Product.create(name=name, price=price, quantity=quantity)


@given(parsers.cfparse("a customer with a balance of {balance:d}"), target_fixture="customer")
def customer_with_balance(balance):
    return Customer.register(name="Shopper", balance=balance)


@pytest.fixture()
def cart():
    return ShoppingCart.create(customer_id="cust-001")


@given(parsers.cfparse('the cart holds {quantity:d} of "{name}"'))
def cart_holds(cart, shelf, name, quantity):
    cart.add_item(shelf[name], quantity)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the checkout fails with "{kind}"'))
def checkout_fails(outcome, kind):
    assert outcome["exc"] is not None, "Expected a validation error but none was raised"
    assert outcome["exc"].kind == kind


@then(parsers.cfparse("the customer has {balance:d} left"))
def customer_has_left(customer, balance):
    assert customer.balance == balance


@then(parsers.cfparse('"{name}" has {quantity:d} in stock'))
def product_has_stock(shelf, name, quantity):
    assert shelf[name].quantity == quantity
