"""Pytest configuration and fixtures."""

import logging

import pytest

from bank_demo.models import Account, Customer


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def customer() -> Customer:
    """Customer without accounts."""
    return Customer(name="Rahul Sharma", tax_id="ABCDE1234F")


@pytest.fixture
def savings(customer: Customer) -> Account:
    """Empty savings account attached to ``customer``."""
    account = Account.savings("SA001", customer)
    customer.add_account(account)
    return account


@pytest.fixture
def current(customer: Customer) -> Account:
    """Empty current account with a 25000 overdraft attached to ``customer``."""
    account = Account.current("CA001", customer, 25000)
    customer.add_account(account)
    return account


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    package = logging.getLogger("bank_demo")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
