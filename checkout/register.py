"""Register: scans items into the open receipt and prices the transaction."""

import structlog

from .items import PricedItem
from .receipt import Receipt
from .rules import Coupon, PricingScheme, RainCheck

logger = structlog.get_logger()


class Register:
    """One checkout lane.

    Holds exactly one open Receipt plus the active pricing schemes, coupons
    and rain checks. ``total()`` hands back the open receipt and starts a new
    one. Rules survive ``total()`` unless ``reset_rules_on_total`` is set.
    """

    def __init__(self, reset_rules_on_total: bool = False):
        self.reset_rules_on_total = reset_rules_on_total
        self._receipt = Receipt()
        self.pricing_schemes: list[PricingScheme] = []
        self.coupons: list[Coupon] = []
        self.rain_checks: list[RainCheck] = []

    def scan(self, item: PricedItem) -> None:
        self._receipt.add(item)
        logger.debug("item_scanned", name=item.name, price_cents=item.price())

    def apply_pricing_scheme(self, scheme: PricingScheme) -> None:
        self.pricing_schemes.append(scheme)
        logger.info(
            "pricing_scheme_applied",
            item_names=sorted(scheme.item_names),
            discount=scheme.discount,
        )

    def apply_coupon(self, coupon: Coupon) -> None:
        self.coupons.append(coupon)
        logger.info("coupon_applied", item_name=coupon.item_name, discount=coupon.discount)

    def apply_rain_check(self, rain_check: RainCheck) -> None:
        self.rain_checks.append(rain_check)
        logger.info(
            "rain_check_applied",
            item_name=rain_check.item_name,
            price_cents=rain_check.price_cents,
        )

    def clear_rules(self) -> None:
        self.pricing_schemes.clear()
        self.coupons.clear()
        self.rain_checks.clear()
        logger.info("rules_cleared")

    def subtotal(self) -> int:
        """Return the live figure for the open transaction.

        Starts from the receipt total (subtotal plus tax). Each rule then
        overwrites the running figure in turn: pricing schemes first, then
        coupons, then rain checks, so the last rule applied wins.
        """
        items = self._receipt.items()
        total = self._receipt.total()

        for scheme in self.pricing_schemes:
            total = scheme.apply(items)
        for coupon in self.coupons:
            total = sum(coupon.apply(item) for item in items)
        for rain_check in self.rain_checks:
            total = sum(rain_check.apply(item) for item in items)

        return total

    def total(self) -> Receipt:
        """Finalize the open receipt and open a fresh one."""
        completed = self._receipt
        self._receipt = Receipt()

        logger.info(
            "transaction_finalized",
            item_count=len(completed),
            total_cents=completed.total(),
        )

        if self.reset_rules_on_total:
            self.clear_rules()

        return completed
