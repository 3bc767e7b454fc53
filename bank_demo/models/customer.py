"""Customer model for the banking domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from bank_demo.exceptions import (
    AccountNotFoundError,
    AccountOwnershipError,
    DuplicateAccountError,
)

if TYPE_CHECKING:
    from bank_demo.models.account import Account


@dataclass(eq=False)
class Customer:
    """Bank customer and the accounts it holds, in the order they were added."""

    name: str
    tax_id: str  # PAN, e.g. ABCDE1234F
    accounts: list[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        """Attach an account opened for this customer.

        Raises
        ------
        AccountOwnershipError
            If the account was opened for a different customer.
        DuplicateAccountError
            If the customer already holds an account with the same number.
        """
        if account.owner is not self:
            raise AccountOwnershipError(
                f"Account {account.account_number} does not belong to {self.name}"
            )
        if any(a.account_number == account.account_number for a in self.accounts):
            raise DuplicateAccountError(f"Account {account.account_number} already exists")
        self.accounts.append(account)

    def get_account(self, account_number: str) -> Account:
        for account in self.accounts:
            if account.account_number == account_number:
                return account
        raise AccountNotFoundError(f"Account {account_number} not found")

    def display_accounts(self, currency_symbol: str = "") -> list[str]:
        """One ``<number> - Balance: <symbol><balance>`` line per account."""
        return [account.summary_line(currency_symbol) for account in self.accounts]

    @property
    def total_balance(self) -> Decimal:
        return sum((a.balance for a in self.accounts), Decimal("0.00"))
