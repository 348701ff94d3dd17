"""Storefront bounded context — catalogue, customers, shopping carts and checkout.

Products, carts and customers are plain CQRS aggregates kept in the
in-memory provider. Checkout validates a cart against live stock, charges
the customer and writes a receipt and shipment notice to the output port.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
