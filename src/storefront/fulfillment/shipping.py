"""Shipping fee calculation and shipment notices.

A shipment is described by a flat list of ``ShippableUnit`` values, one per
physical item. The fee is a flat rate per kilogram with a minimum charge.
"""

import os

from protean.fields import Float, String

from storefront.domain import storefront
from storefront.templates.shipment_notice import ShipmentNoticeTemplate

SHIPPING_RATE_PER_KG = 5.0
MINIMUM_SHIPPING_FEE = 10.0


@storefront.value_object
class ShippableUnit:
    """One physical item of a shippable product."""

    product_id = String(required=True, max_length=50)
    name = String(required=True, max_length=255)
    weight = Float(required=True, min_value=0.0)


@storefront.value_object
class ShippingRates:
    rate_per_kg = Float(required=True, min_value=0.0)
    minimum_fee = Float(required=True, min_value=0.0)


def default_rates() -> ShippingRates:
    """Rates from ``SHIPPING_RATE_PER_KG`` / ``SHIPPING_MINIMUM_FEE``, else the house rates."""
    return ShippingRates(
        rate_per_kg=float(os.environ.get("SHIPPING_RATE_PER_KG", SHIPPING_RATE_PER_KG)),
        minimum_fee=float(os.environ.get("SHIPPING_MINIMUM_FEE", MINIMUM_SHIPPING_FEE)),
    )


def total_weight(units) -> float:
    """Combined weight of all units, in kilograms."""
    return sum(unit.weight for unit in units)


def shipping_fee(units, rates: ShippingRates | None = None) -> float:
    """Fee for shipping ``units``; nothing to ship costs nothing."""
    units = list(units)
    if not units:
        return 0.0
    if rates is None:
        rates = default_rates()
    return max(rates.minimum_fee, total_weight(units) * rates.rate_per_kg)


def group_units(units) -> list[tuple[ShippableUnit, int]]:
    """Collapse units by product id, keeping first-appearance order."""
    groups: dict[str, list] = {}
    for unit in units:
        key = str(unit.product_id)
        if key in groups:
            groups[key][1] += 1
        else:
            groups[key] = [unit, 1]
    return [(unit, count) for unit, count in groups.values()]


def report_shipment(units, output) -> None:
    """Write the shipment notice for ``units`` to ``output``."""
    units = list(units)
    if not units:
        return
    output.write_lines(
        ShipmentNoticeTemplate.render(
            {
                "groups": group_units(units),
                "total_weight": total_weight(units),
            }
        )
    )
