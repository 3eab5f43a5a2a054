"""Error types and error message constants.

Pricing itself never raises; these are raised only where outside input
enters: environment configuration and order documents.
"""

from typing import Optional


class errmsg:
    """Error message constants."""

    ORDER_NOT_MAPPING = "order must be an object"
    SECTION_NOT_LIST = "section must be a list"
    ENTRY_NOT_MAPPING = "entry must be an object"
    MISSING_FIELD = "missing field"
    UNKNOWN_ITEM_TYPE = "unknown item type"
    BAD_NUMBER = "not a number"
    BAD_TAX_RATE = "tax rate must be a decimal number"
    BAD_LOG_LEVEL = "unknown log level"
    BAD_BOOLEAN = "expected a boolean"


class CheckoutError(Exception):
    """Base class for checkout errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigError(CheckoutError):
    """Malformed environment configuration."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid configuration: {message}", cause)


class InvalidOrderError(CheckoutError):
    """Malformed order document."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid order: {message}", cause)
