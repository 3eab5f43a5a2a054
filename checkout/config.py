"""Runtime configuration from the environment, and logging setup."""

import logging
import os
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

import structlog

from .errors import ConfigError, errmsg
from .items import DEFAULT_TAX_RATE

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    tax_rate: Decimal = DEFAULT_TAX_RATE
    log_level: str = "INFO"
    reset_rules_on_total: bool = False


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"{errmsg.BAD_LOG_LEVEL} {name!r}")
    return level


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"{name}: {errmsg.BAD_BOOLEAN}, got {value!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Environment variables:
        CHECKOUT_TAX_RATE: Tax rate for non-edible taxable items (default: 0.10)
        CHECKOUT_LOG_LEVEL: Minimum log level (default: INFO)
        CHECKOUT_RESET_RULES_ON_TOTAL: Clear rules when a receipt is
            finalized (default: false)
    """
    env = os.environ if environ is None else environ

    raw_rate = env.get("CHECKOUT_TAX_RATE", str(DEFAULT_TAX_RATE))
    try:
        tax_rate = Decimal(raw_rate)
    except InvalidOperation as e:
        raise ConfigError(f"CHECKOUT_TAX_RATE: {errmsg.BAD_TAX_RATE}", e) from e
    if not tax_rate.is_finite():
        raise ConfigError(f"CHECKOUT_TAX_RATE: {errmsg.BAD_TAX_RATE}")

    log_level = env.get("CHECKOUT_LOG_LEVEL", "INFO").upper()
    parse_log_level(log_level)

    reset_rules = _parse_bool(
        "CHECKOUT_RESET_RULES_ON_TOTAL",
        env.get("CHECKOUT_RESET_RULES_ON_TOTAL", "false"),
    )

    return Settings(
        tax_rate=tax_rate,
        log_level=log_level,
        reset_rules_on_total=reset_rules,
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog with JSON rendering and ISO timestamps.

    Log lines go to stderr so receipts on stdout stay clean.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(parse_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
