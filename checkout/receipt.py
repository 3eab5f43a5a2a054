"""Receipt: the ordered log of scanned items for one transaction."""

from .items import PricedItem, Taxable, is_two_for_one, name_key
from .receipt_formatter import format_receipt


class Receipt:
    """Scanned items in scan order, with subtotal, tax and text rendering.

    Items are only ever appended. Same-named items are treated as fungible:
    a two-for-one group is charged at its first item's unit price.
    """

    def __init__(self):
        self._items: list[PricedItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: PricedItem) -> None:
        self._items.append(item)

    def items(self) -> tuple[PricedItem, ...]:
        return tuple(self._items)

    def group_by_name(self) -> dict[str, list[PricedItem]]:
        """Partition items by name key, groups in first-scanned order."""
        groups: dict[str, list[PricedItem]] = {}
        for item in self._items:
            groups.setdefault(name_key(item.name), []).append(item)
        return groups

    def subtotal(self) -> int:
        subtotal = 0
        for group in self.group_by_name().values():
            first = group[0]
            if is_two_for_one(first):
                count = len(group)
                chargeable = count // 2 + count % 2
                subtotal += chargeable * first.price()
            else:
                subtotal += sum(item.price() for item in group)
        return subtotal

    def tax(self) -> int:
        return sum(item.tax() for item in self._items if isinstance(item, Taxable))

    def total(self) -> int:
        return self.subtotal() + self.tax()

    def output(self) -> str:
        return format_receipt(self)
