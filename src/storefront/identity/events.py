"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A new customer was registered with an opening balance."""

    __version__ = 1

    customer_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    opening_balance = Float(required=True)
    registered_at = DateTime(required=True)


@storefront.event(part_of="Customer")
class BalanceDebited:
    """Money was taken from the customer's balance."""

    __version__ = 1

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    previous_balance = Float(required=True)
    new_balance = Float(required=True)
    debited_at = DateTime(required=True)
