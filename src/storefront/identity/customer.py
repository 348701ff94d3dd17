"""Customer aggregate root."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String

from storefront.domain import storefront
from storefront.errors import InsufficientBalance
from storefront.identity.events import BalanceDebited, CustomerRegistered


@storefront.aggregate
class Customer:
    """A shopper paying from a prepaid balance.

    The balance never goes negative: it only decreases through ``debit``,
    which refuses any amount larger than what is left.
    """

    name = String(required=True, max_length=100)
    balance = Float(required=True, min_value=0.0)
    registered_at = DateTime()

    @classmethod
    def register(cls, name, balance):
        now = datetime.now(UTC)
        customer = cls(name=name, balance=balance, registered_at=now)
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                name=name,
                opening_balance=balance,
                registered_at=now,
            )
        )
        return customer

    def can_afford(self, amount) -> bool:
        return amount <= self.balance

    def debit(self, amount):
        """Take ``amount`` from the balance, all or nothing."""
        if amount < 0:
            raise ValidationError({"amount": ["Debit amount cannot be negative"]})
        if not self.can_afford(amount):
            raise InsufficientBalance({"balance": ["Insufficient balance"]})

        previous_balance = self.balance
        self.balance = previous_balance - amount

        self.raise_(
            BalanceDebited(
                customer_id=str(self.id),
                amount=amount,
                previous_balance=previous_balance,
                new_balance=self.balance,
                debited_at=datetime.now(UTC),
            )
        )
