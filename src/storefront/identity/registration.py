"""Customer registration — command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.customer import Customer


@storefront.command(part_of="Customer")
class RegisterCustomer:
    """Register a customer with an opening balance."""

    name = String(required=True, max_length=100)
    balance = Float(required=True, min_value=0.0)


@storefront.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(name=command.name, balance=command.balance)
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)
