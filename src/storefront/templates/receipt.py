"""Checkout receipt template — printed after a successful checkout."""

from storefront.utils.formatting import format_number


class ReceiptTemplate:
    header = "** Checkout receipt **"

    @staticmethod
    def render(receipt) -> list[str]:
        lines = [ReceiptTemplate.header]
        for line in receipt.lines:
            lines.append(f"{line.quantity}x {line.name}    {format_number(line.line_total)}")
        lines.extend(
            [
                "---",
                f"Subtotal    {format_number(receipt.subtotal)}",
                f"Shipping    {format_number(receipt.shipping)}",
                f"Amount    {format_number(receipt.amount)}",
                f"Remaining balance: {format_number(receipt.remaining_balance)}",
                "",
            ]
        )
        return lines
