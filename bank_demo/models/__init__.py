"""Domain models for customers, accounts and transactions."""

from bank_demo.models.account import (
    Account,
    AccountPolicy,
    CurrentPolicy,
    SavingsPolicy,
)
from bank_demo.models.base import format_money, positive_amount, to_decimal, to_money
from bank_demo.models.customer import Customer
from bank_demo.models.enums import AccountKind, TransactionKind
from bank_demo.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountKind",
    "AccountPolicy",
    "CurrentPolicy",
    "Customer",
    "SavingsPolicy",
    "Transaction",
    "TransactionKind",
    "format_money",
    "positive_amount",
    "to_decimal",
    "to_money",
]
