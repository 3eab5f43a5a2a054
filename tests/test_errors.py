"""Tests for error types."""

from checkout.errors import CheckoutError, ConfigError, InvalidOrderError


class TestCheckoutError:
    """Tests for the CheckoutError base class."""

    def test_message_only(self):
        """Error with message only."""
        err = CheckoutError("something went wrong")
        assert err.message == "something went wrong"
        assert err.cause is None
        assert str(err) == "something went wrong"

    def test_with_cause(self):
        """Error with underlying cause."""
        cause = ValueError("underlying issue")
        err = CheckoutError("wrapper", cause)
        assert err.cause is cause
        assert str(err) == "wrapper: underlying issue"


class TestSubclasses:
    """Tests for the boundary errors."""

    def test_config_error_prefix(self):
        """ConfigError prefixes its message."""
        err = ConfigError("bad rate")
        assert str(err) == "invalid configuration: bad rate"
        assert isinstance(err, CheckoutError)

    def test_invalid_order_prefix(self):
        """InvalidOrderError prefixes its message."""
        err = InvalidOrderError("missing items")
        assert str(err) == "invalid order: missing items"
        assert isinstance(err, CheckoutError)
