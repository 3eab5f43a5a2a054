"""Priced item variants.

Every item exposes ``name``, ``key`` and ``price()`` in integer cents.
Two-for-one eligibility is a plain ``two_for_one`` attribute and taxability
is the ``Taxable`` protocol, so neither is tied to one concrete type.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol, runtime_checkable

DEFAULT_TAX_RATE = Decimal("0.10")


def name_key(name: str) -> str:
    """Return the matching key for an item name.

    Grouping and rule matching both use this key. Matching is exact and
    case-sensitive, so the key is the name itself.
    """
    return name


@runtime_checkable
class PricedItem(Protocol):
    """Anything that can be scanned."""

    name: str

    def price(self) -> int: ...


@runtime_checkable
class Taxable(Protocol):
    """An item carrying its own per-unit tax."""

    def tax(self) -> int: ...


def is_two_for_one(item: PricedItem) -> bool:
    return bool(getattr(item, "two_for_one", False))


@dataclass(frozen=True)
class FlatItem:
    name: str
    price_each: int
    two_for_one: bool = False

    @property
    def key(self) -> str:
        return name_key(self.name)

    def price(self) -> int:
        return self.price_each


@dataclass(frozen=True)
class WeightedItem:
    """Item sold by the pound; price truncates toward zero."""

    name: str
    price_per_pound: int
    weight: float

    @property
    def key(self) -> str:
        return name_key(self.name)

    def price(self) -> int:
        return int(self.price_per_pound * self.weight)


@dataclass(frozen=True)
class TaxableItem:
    """Item with a flat price that may be taxed.

    Edible items are never taxed. Everything else pays ``tax_rate`` on the
    unit price, rounded half-up to the cent.
    """

    name: str
    price_each: int
    edible: bool
    two_for_one: bool = False
    tax_rate: Decimal = DEFAULT_TAX_RATE

    @property
    def key(self) -> str:
        return name_key(self.name)

    def price(self) -> int:
        return self.price_each

    def tax(self) -> int:
        if self.edible:
            return 0
        amount = Decimal(self.price_each) * Decimal(str(self.tax_rate))
        return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))
