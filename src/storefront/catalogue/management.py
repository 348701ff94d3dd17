"""Catalogue management — commands and handler."""

from protean import handle
from protean.fields import DateTime, Float, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddProduct:
    """Put a new product on the shelf with its initial stock."""

    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=0)
    expires_at = DateTime()
    weight = Float(min_value=0.0)


@storefront.command_handler(part_of=Product)
class ManageCatalogueHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            quantity=command.quantity,
            expires_at=command.expires_at,
            weight=command.weight,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
