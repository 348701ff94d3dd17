"""Checkout error taxonomy.

Every recoverable failure is a ``ValidationError`` carrying the usual
``{field: [message]}`` payload plus a machine-readable ``kind``. A broken
invariant while committing a checkout is a ``CheckoutIntegrityError``, which
callers are not expected to recover from.
"""

from protean.exceptions import ValidationError


class StorefrontError(ValidationError):
    kind = "storefront_error"


class InsufficientStock(StorefrontError):
    """More units were requested than the product has available."""

    kind = "insufficient_stock"


class OutOfStock(InsufficientStock):
    """Stock shortfall detected while checking out."""

    kind = "out_of_stock"


class ExpiredProduct(StorefrontError):
    kind = "expired_product"


class EmptyCart(StorefrontError):
    kind = "empty_cart"


class CartCheckedOut(StorefrontError):
    """The cart was already paid for and cannot change or be charged again."""

    kind = "cart_checked_out"


class InsufficientBalance(StorefrontError):
    """A debit exceeds the customer's balance."""

    kind = "insufficient_balance"


class InsufficientFunds(InsufficientBalance):
    """The checkout total exceeds the customer's balance."""

    kind = "insufficient_funds"


class CheckoutIntegrityError(RuntimeError):
    """Commit failed after the checkout was validated and authorized."""


def describe(exc: ValidationError) -> str:
    """Flatten a validation error payload into a human-readable message."""
    messages = exc.messages
    if isinstance(messages, dict):
        flat = []
        for value in messages.values():
            if isinstance(value, list | tuple):
                flat.extend(str(v) for v in value)
            else:
                flat.append(str(value))
        return "; ".join(flat)
    return str(messages)
