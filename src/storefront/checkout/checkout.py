"""Checkout — turns a cart into a charged customer, reduced stock and a receipt.

Flow:
    1. Validate: the cart is still open and has entries, and every product
       still has the stock and is not expired (re-checked here because state
       may have moved on since the items were added).
    2. Price: subtotal + shipping fee for the shippable units.
    3. Authorize: the customer can afford the total.
    4. Commit: debit the customer, reduce stock in cart order.
    5. Report: receipt, then the shipment notice when anything ships.

Nothing is mutated before step 4, so a rejected checkout leaves customer,
products and cart exactly as they were.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from protean.exceptions import ValidationError

from storefront.errors import (
    CheckoutIntegrityError,
    EmptyCart,
    ExpiredProduct,
    InsufficientFunds,
    OutOfStock,
)
from storefront.fulfillment.shipping import ShippableUnit, report_shipment, shipping_fee
from storefront.output import get_output
from storefront.templates.receipt import ReceiptTemplate
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    name: str
    line_total: float


@dataclass(frozen=True)
class Receipt:
    """What the customer paid for and what is left on their balance."""

    cart_id: str
    customer_id: str
    lines: tuple[ReceiptLine, ...]
    subtotal: float
    shipping: float
    amount: float
    remaining_balance: float
    shipment: tuple[ShippableUnit, ...] = ()


def _index_products(products) -> Mapping:
    if isinstance(products, Mapping):
        return {str(key): product for key, product in products.items()}
    return {str(product.id): product for product in products}


def _product_for(catalogue, item):
    product = catalogue.get(str(item.product_id))
    if product is None:
        raise ValidationError({"product_id": [f"Product {item.name} is not in the catalogue"]})
    return product


def validate(cart, catalogue, at=None) -> None:
    cart.ensure_open()
    if cart.is_empty():
        raise EmptyCart({"cart": ["Cannot checkout with empty cart"]})

    for item in cart.items:
        product = _product_for(catalogue, item)
        if item.quantity > product.quantity:
            raise OutOfStock({"quantity": [f"Product {product.name} is out of stock"]})
        if product.is_expired(at):
            raise ExpiredProduct({"product": [f"Product {product.name} is expired"]})


def authorize(customer, amount) -> None:
    if not customer.can_afford(amount):
        raise InsufficientFunds({"balance": ["Insufficient customer balance"]})


def commit(customer, cart, catalogue, amount) -> None:
    try:
        customer.debit(amount)
        for item in cart.items:
            _product_for(catalogue, item).reduce_stock(item.quantity)
    except ValidationError as exc:
        raise CheckoutIntegrityError(f"Checkout of cart {cart.id} failed after authorization: {exc}") from exc


def checkout(customer, cart, products, output=None, rates=None, at=None) -> Receipt:
    """Check ``cart`` out for ``customer``.

    Args:
        products: Products referenced by the cart, as a mapping keyed by
            product id or as an iterable of Product aggregates.
        output: OutputPort for the receipt and shipment notice; defaults to
            the configured adapter.
        rates: ShippingRates override.
        at: Point in time to check expiry against; defaults to now.

    Raises:
        CartCheckedOut, EmptyCart, OutOfStock, ExpiredProduct,
            InsufficientFunds: checkout rejected, nothing changed.
        CheckoutIntegrityError: commit failed after authorization.
    """
    log = logger.bind(cart_id=str(cart.id), customer_id=str(customer.id))
    catalogue = _index_products(products)

    try:
        validate(cart, catalogue, at=at)
        log.debug("checkout.validated", items=len(cart.items))

        subtotal = cart.subtotal()
        units = cart.shippable_units()
        fee = shipping_fee(units, rates)
        amount = subtotal + fee

        authorize(customer, amount)
        log.debug("checkout.authorized", subtotal=subtotal, shipping_fee=fee, amount=amount)
    except ValidationError as exc:
        log.info("checkout.rejected", kind=getattr(exc, "kind", "validation_error"), messages=exc.messages)
        raise

    commit(customer, cart, catalogue, amount)
    cart.record_checkout(customer.id, subtotal, fee, amount)
    log.info("checkout.committed", amount=amount, remaining_balance=customer.balance)

    receipt = Receipt(
        cart_id=str(cart.id),
        customer_id=str(customer.id),
        lines=tuple(ReceiptLine(item.quantity, item.name, item.line_total) for item in cart.items),
        subtotal=subtotal,
        shipping=fee,
        amount=amount,
        remaining_balance=customer.balance,
        shipment=tuple(units),
    )

    if output is None:
        output = get_output()
    output.write_lines(ReceiptTemplate.render(receipt))
    report_shipment(units, output)

    return receipt
