"""Shipment notice template — lists what goes into the package."""

from storefront.utils.formatting import format_number


class ShipmentNoticeTemplate:
    header = "** Shipment notice **"

    @staticmethod
    def render(context: dict) -> list[str]:
        lines = [ShipmentNoticeTemplate.header]
        for unit, count in context.get("groups", []):
            # Weight is per item, in grams
            lines.append(f"{count}x {unit.name}    {format_number(unit.weight * 1000)}g")
        lines.append(f"Total package weight {format_number(context.get('total_weight', 0.0), 1)}kg")
        lines.append("")
        return lines
