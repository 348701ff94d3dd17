"""Storefront command line.

Usage:
    storefront demo                 # Run the sample checkout scenario
    python -m storefront.cli demo
"""

import argparse
import sys
from datetime import UTC, datetime, timedelta

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.management import AddProduct
from storefront.checkout.placement import PlaceCheckout
from storefront.domain import storefront
from storefront.errors import describe
from storefront.identity.registration import RegisterCustomer
from storefront.ordering.items import AddToCart, CreateCart
from storefront.output import get_output
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def _stock_shelves():
    now = datetime.now(UTC)
    shelves = {
        "cheese": AddProduct(name="Cheese", price=100, quantity=10, expires_at=now + timedelta(days=7), weight=0.4),
        "biscuits": AddProduct(
            name="Biscuits", price=150, quantity=5, expires_at=now + timedelta(days=14), weight=0.7
        ),
        "tv": AddProduct(name="TV", price=10000, quantity=3, weight=15.0),
        "scratch_card": AddProduct(name="Mobile scratch card", price=50, quantity=100),
    }
    return {key: current_domain.process(command, asynchronous=False) for key, command in shelves.items()}


def _open_cart(customer_name, balance, items):
    customer_id = current_domain.process(RegisterCustomer(name=customer_name, balance=balance), asynchronous=False)
    cart_id = current_domain.process(CreateCart(customer_id=customer_id), asynchronous=False)
    for product_id, quantity in items:
        current_domain.process(
            AddToCart(cart_id=cart_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
    return customer_id, cart_id


def run_demo():
    """Check out a grocery cart, then try a TV on a balance that cannot cover it.

    Expects the domain to be initialized already.
    """
    output = get_output()
    add_context(run="demo")
    logger.info("demo.started")

    try:
        with storefront.domain_context():
            _run_checkouts(output)
    finally:
        clear_context()


def _run_checkouts(output):
    products = _stock_shelves()

    customer_id, cart_id = _open_cart(
        "Ahmed",
        2000,
        [(products["cheese"], 2), (products["biscuits"], 1), (products["scratch_card"], 1)],
    )
    try:
        current_domain.process(PlaceCheckout(cart_id=cart_id, customer_id=customer_id), asynchronous=False)
    except ValidationError as exc:
        output.write_line(f"Error during checkout: {describe(exc)}")

    customer_id, cart_id = _open_cart("Poor", 100, [(products["tv"], 1)])
    try:
        current_domain.process(PlaceCheckout(cart_id=cart_id, customer_id=customer_id), asynchronous=False)
    except ValidationError as exc:
        output.write_line(f"Expected error: {describe(exc)}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront checkout simulation")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Run the sample checkout scenario")

    args = parser.parse_args(argv)

    if args.command == "demo":
        storefront.init()
        run_demo()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
