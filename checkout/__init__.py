"""Supermarket checkout: item pricing, order-level rules, tax and receipts."""

__version__ = "0.1"

from .errors import CheckoutError, ConfigError, InvalidOrderError
from .items import (
    DEFAULT_TAX_RATE,
    FlatItem,
    PricedItem,
    Taxable,
    TaxableItem,
    WeightedItem,
    name_key,
)
from .receipt import Receipt
from .register import Register
from .rules import Coupon, ItemOverrideRule, PricingRule, PricingScheme, RainCheck

__all__ = [
    "CheckoutError",
    "ConfigError",
    "InvalidOrderError",
    "DEFAULT_TAX_RATE",
    "FlatItem",
    "PricedItem",
    "Taxable",
    "TaxableItem",
    "WeightedItem",
    "name_key",
    "Receipt",
    "Register",
    "Coupon",
    "ItemOverrideRule",
    "PricingRule",
    "PricingScheme",
    "RainCheck",
]
