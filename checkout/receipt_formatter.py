"""Receipt formatting utilities."""

from .items import Taxable

SEPARATOR = "-" * 18


def format_cents(cents: int) -> str:
    """Format integer cents as dollars, e.g. 199 -> "$1.99"."""
    return f"${cents / 100:.2f}"


def format_receipt(receipt) -> str:
    """Format a human-readable receipt."""
    lines = ["Receipt:"]

    for item in receipt.items():
        lines.append(f"{item.name}: {format_cents(item.price())}")
        if isinstance(item, Taxable):
            lines.append(f"Tax: {format_cents(item.tax())}")

    lines.append(SEPARATOR)
    lines.append(f"TAX: {format_cents(receipt.tax())}")
    lines.append(f"TOTAL: {format_cents(receipt.total())}")

    return "\n".join(lines)
