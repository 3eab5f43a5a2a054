"""Command-line checkout: ring up an order document and print the receipt."""

import argparse
import json
import sys
from typing import Optional, Sequence

import structlog

from .config import configure_logging, load_settings
from .errors import CheckoutError, InvalidOrderError
from .order import load_order
from .receipt_formatter import format_cents
from .register import Register

logger = structlog.get_logger()


def _read_document(path: str):
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path, encoding="utf-8") as fp:
            return json.load(fp)
    except UnicodeDecodeError as e:
        raise InvalidOrderError(f"{path} is not valid UTF-8 JSON", e) from e
    except json.JSONDecodeError as e:
        raise InvalidOrderError(f"{path} is not valid JSON", e) from e
    except OSError as e:
        raise InvalidOrderError(f"cannot read {path}", e) from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Ring up an order and print its receipt")
    parser.add_argument(
        "order",
        help="Path to an order JSON document, or - for stdin",
    )
    parser.add_argument(
        "--subtotal",
        action="store_true",
        help="Print the rule-adjusted subtotal instead of the receipt",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: CHECKOUT_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        configure_logging(args.log_level or settings.log_level)

        order = load_order(_read_document(args.order), tax_rate=settings.tax_rate)
        register = order.ring_up(Register(reset_rules_on_total=settings.reset_rules_on_total))
    except CheckoutError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.subtotal:
        print(format_cents(register.subtotal()))
    else:
        print(register.total().output())

    logger.debug("checkout_done", subtotal_only=args.subtotal)
    return 0


if __name__ == "__main__":
    sys.exit(main())
