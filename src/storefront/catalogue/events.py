"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue with its initial stock."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True)
    quantity = Integer(required=True)
    expires_at = DateTime()
    weight = Float()
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockReduced:
    """Units of a product left the shelf during checkout."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    reduced_at = DateTime(required=True)
