"""In-memory store for customers and their accounts."""

from bank_demo.store.bank import BankStore

__all__ = ["BankStore"]
