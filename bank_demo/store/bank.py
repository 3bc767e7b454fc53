"""In-memory bank store with referential integrity."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from bank_demo.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    DuplicateCustomerError,
    ReferentialIntegrityError,
)
from bank_demo.generators.account import AccountNumberGenerator
from bank_demo.models import Account, AccountKind, Customer
from bank_demo.models.account import SAVINGS_INTEREST_RATE

logger = logging.getLogger(__name__)


@dataclass
class BankStore:
    """Registry of customers (by tax id) and accounts (by number)."""

    default_overdraft_limit: Decimal = Decimal("25000")
    interest_rate: Decimal = SAVINGS_INTEREST_RATE

    customers: dict[str, Customer] = field(default_factory=dict)
    accounts: dict[str, Account] = field(default_factory=dict)

    _numbers: AccountNumberGenerator = field(default_factory=AccountNumberGenerator)

    def add_customer(self, customer: Customer) -> None:
        """Add a customer to the store."""
        if customer.tax_id in self.customers:
            raise DuplicateCustomerError(f"Customer {customer.tax_id} already exists")
        self.customers[customer.tax_id] = customer
        logger.debug("Registered customer %s", customer.tax_id)

    def open_savings_account(self, tax_id: str, account_number: str | None = None) -> Account:
        """Open a savings account for a registered customer."""
        customer = self.get_customer(tax_id)
        number = self._claim_number(AccountKind.SAVINGS, account_number)
        account = Account.savings(number, customer, interest_rate=self.interest_rate)
        return self._attach(customer, account)

    def open_current_account(
        self,
        tax_id: str,
        overdraft_limit: object = None,
        account_number: str | None = None,
    ) -> Account:
        """Open a current account; the overdraft defaults to the store's limit."""
        customer = self.get_customer(tax_id)
        if overdraft_limit is None:
            overdraft_limit = self.default_overdraft_limit
        number = self._claim_number(AccountKind.CURRENT, account_number)
        account = Account.current(number, customer, overdraft_limit)
        return self._attach(customer, account)

    # Query methods
    def get_customer(self, tax_id: str) -> Customer:
        try:
            return self.customers[tax_id]
        except KeyError:
            raise ReferentialIntegrityError(f"Customer {tax_id} not found") from None

    def get_account(self, account_number: str) -> Account:
        try:
            return self.accounts[account_number]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_number} not found") from None

    def get_customer_accounts(self, tax_id: str) -> list[Account]:
        """Get all accounts for a customer, in the order they were opened."""
        return list(self.get_customer(tax_id).accounts)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "customers": len(self.customers),
            "accounts": len(self.accounts),
            "transactions": sum(len(a.transactions) for a in self.accounts.values()),
        }

    def _claim_number(self, kind: AccountKind, account_number: str | None) -> str:
        if account_number is None:
            account_number = self._numbers.next_number(kind)
            while account_number in self.accounts:
                account_number = self._numbers.next_number(kind)
        elif account_number in self.accounts:
            raise DuplicateAccountError(f"Account {account_number} already exists")
        else:
            self._numbers.reserve(account_number)
        return account_number

    def _attach(self, customer: Customer, account: Account) -> Account:
        customer.add_account(account)
        self.accounts[account.account_number] = account
        logger.info(
            "Opened %s account %s for %s",
            account.kind.value.lower(),
            account.account_number,
            customer.name,
        )
        return account
