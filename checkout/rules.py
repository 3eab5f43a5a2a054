"""Order-level pricing rules.

A pricing rule replaces the total of a whole item collection. An override
rule replaces the price of a single item and passes every other item through
at its own price. Discount math runs in floating point and truncates toward
zero back to whole cents.
"""

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from .items import PricedItem, name_key


class PricingRule(Protocol):
    def apply(self, items: Iterable[PricedItem]) -> int: ...


class ItemOverrideRule(Protocol):
    def apply(self, item: PricedItem) -> int: ...


def discounted(cents: int, discount: float) -> int:
    """Take ``discount`` (a fraction) off ``cents``, truncating to a cent."""
    return int(cents * (1 - discount))


@dataclass(frozen=True)
class PricingScheme:
    """Grouped discount over a named set of items.

    ``apply`` returns only the discounted total of the member items; items
    outside the group are not added back.
    """

    item_names: frozenset[str] = field(default_factory=frozenset)
    discount: float = 0.0

    def __post_init__(self):
        names = self.item_names
        if isinstance(names, str):
            names = (names,)
        object.__setattr__(self, "item_names", frozenset(name_key(n) for n in names))

    def covers(self, item: PricedItem) -> bool:
        return name_key(item.name) in self.item_names

    def apply(self, items: Iterable[PricedItem]) -> int:
        grouped = sum(item.price() for item in items if self.covers(item))
        return discounted(grouped, self.discount)


@dataclass(frozen=True)
class Coupon:
    item_name: str
    discount: float

    def matches(self, item: PricedItem) -> bool:
        return name_key(item.name) == name_key(self.item_name)

    def apply(self, item: PricedItem) -> int:
        if self.matches(item):
            return discounted(item.price(), self.discount)
        return item.price()


@dataclass(frozen=True)
class RainCheck:
    """Fixed replacement price for one item name."""

    item_name: str
    price_cents: int

    def matches(self, item: PricedItem) -> bool:
        return name_key(item.name) == name_key(self.item_name)

    def apply(self, item: PricedItem) -> int:
        if self.matches(item):
            return self.price_cents
        return item.price()
