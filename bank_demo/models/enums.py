"""Enumeration types for the banking domain."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
