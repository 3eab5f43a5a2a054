"""Shared pytest fixtures for checkout tests."""

import pytest
import structlog

from checkout import FlatItem, Register, TaxableItem


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any logging configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def register():
    return Register()


@pytest.fixture
def beans():
    return FlatItem("Beans (8oz Can)", 199)


@pytest.fixture
def pencil():
    return FlatItem("Pencil", 99)


@pytest.fixture
def granola():
    return FlatItem("Granola Bars (Box, 8ct)", 499)


@pytest.fixture
def detergent():
    """A non-edible taxable item priced at $10.00."""
    return TaxableItem("Detergent", 1000, edible=False)
