"""Generators for synthetic customers and account numbers."""

from bank_demo.generators.account import AccountNumberGenerator
from bank_demo.generators.customer import CustomerGenerator

__all__ = ["AccountNumberGenerator", "CustomerGenerator"]
