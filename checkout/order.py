"""Order documents: scans and rules described as plain data.

An order is a mapping such as::

    {
        "items": [
            {"name": "Beans (8oz Can)", "price": 199, "two_for_one": true},
            {"type": "weighted", "name": "Steak", "price_per_pound": 899, "weight": 1.1},
            {"type": "taxable", "name": "Pencil", "price": 99, "edible": false}
        ],
        "pricing_schemes": [{"items": ["Pencil", "Eraser"], "discount": 0.1}],
        "coupons": [{"item": "Pencil", "discount": 0.5}],
        "rain_checks": [{"item": "Steak", "price": 500}]
    }

Shapes are checked here; values are not range-checked.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from collections.abc import Mapping
from typing import Any

from .errors import InvalidOrderError, errmsg
from .items import DEFAULT_TAX_RATE, FlatItem, PricedItem, TaxableItem, WeightedItem
from .register import Register
from .rules import Coupon, PricingScheme, RainCheck


@dataclass
class Order:
    items: list[PricedItem] = field(default_factory=list)
    pricing_schemes: list[PricingScheme] = field(default_factory=list)
    coupons: list[Coupon] = field(default_factory=list)
    rain_checks: list[RainCheck] = field(default_factory=list)

    def ring_up(self, register: Register) -> Register:
        """Scan every item, then register every rule."""
        for item in self.items:
            register.scan(item)
        for scheme in self.pricing_schemes:
            register.apply_pricing_scheme(scheme)
        for coupon in self.coupons:
            register.apply_coupon(coupon)
        for rain_check in self.rain_checks:
            register.apply_rain_check(rain_check)
        return register


def _field(entry: Mapping[str, Any], name: str, where: str) -> Any:
    if name not in entry:
        raise InvalidOrderError(f"{where}: {errmsg.MISSING_FIELD} {name!r}")
    return entry[name]


def _cents(entry: Mapping[str, Any], name: str, where: str) -> int:
    value = _field(entry, name, where)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOrderError(f"{where}.{name}: {errmsg.BAD_NUMBER}, expected whole cents")
    return value


def _number(entry: Mapping[str, Any], name: str, where: str) -> float:
    value = _field(entry, name, where)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOrderError(f"{where}.{name}: {errmsg.BAD_NUMBER}")
    return float(value)


def _flag(entry: Mapping[str, Any], name: str, where: str, default: bool = False) -> bool:
    value = entry.get(name, default)
    if not isinstance(value, bool):
        raise InvalidOrderError(f"{where}.{name}: {errmsg.BAD_BOOLEAN}, got {value!r}")
    return value


def _entries(data: Mapping[str, Any], section: str) -> list:
    entries = data.get(section, [])
    if not isinstance(entries, list):
        raise InvalidOrderError(f"{section}: {errmsg.SECTION_NOT_LIST}")
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise InvalidOrderError(f"{section}[{i}]: {errmsg.ENTRY_NOT_MAPPING}")
    return entries


def parse_item(entry: Mapping[str, Any], where: str = "item", tax_rate: Decimal = DEFAULT_TAX_RATE) -> PricedItem:
    kind = entry.get("type", "flat")
    name = str(_field(entry, "name", where))

    if kind == "flat":
        return FlatItem(
            name=name,
            price_each=_cents(entry, "price", where),
            two_for_one=_flag(entry, "two_for_one", where),
        )
    elif kind == "weighted":
        return WeightedItem(
            name=name,
            price_per_pound=_cents(entry, "price_per_pound", where),
            weight=_number(entry, "weight", where),
        )
    elif kind == "taxable":
        return TaxableItem(
            name=name,
            price_each=_cents(entry, "price", where),
            edible=_flag(entry, "edible", where),
            two_for_one=_flag(entry, "two_for_one", where),
            tax_rate=tax_rate,
        )
    else:
        raise InvalidOrderError(f"{where}: {errmsg.UNKNOWN_ITEM_TYPE} {kind!r}")


def load_order(data: Any, tax_rate: Decimal = DEFAULT_TAX_RATE) -> Order:
    """Build an Order from a decoded JSON document."""
    if not isinstance(data, Mapping):
        raise InvalidOrderError(errmsg.ORDER_NOT_MAPPING)

    order = Order()

    for i, entry in enumerate(_entries(data, "items")):
        order.items.append(parse_item(entry, f"items[{i}]", tax_rate))

    for i, entry in enumerate(_entries(data, "pricing_schemes")):
        where = f"pricing_schemes[{i}]"
        names = _field(entry, "items", where)
        if not isinstance(names, list):
            raise InvalidOrderError(f"{where}.items: {errmsg.SECTION_NOT_LIST}")
        order.pricing_schemes.append(
            PricingScheme(
                item_names=frozenset(str(n) for n in names),
                discount=_number(entry, "discount", where),
            )
        )

    for i, entry in enumerate(_entries(data, "coupons")):
        where = f"coupons[{i}]"
        order.coupons.append(
            Coupon(
                item_name=str(_field(entry, "item", where)),
                discount=_number(entry, "discount", where),
            )
        )

    for i, entry in enumerate(_entries(data, "rain_checks")):
        where = f"rain_checks[{i}]"
        order.rain_checks.append(
            RainCheck(
                item_name=str(_field(entry, "item", where)),
                price_cents=_cents(entry, "price", where),
            )
        )

    return order
