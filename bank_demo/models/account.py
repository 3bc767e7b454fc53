"""Account model for the banking domain.

There is a single :class:`Account` type. What differs between savings and
current accounts (how much may be withdrawn, whether interest is paid) lives
in a policy object attached to the account:

- :class:`SavingsPolicy`: no overdraft, pays a fixed percentage of the
  balance when interest is calculated.
- :class:`CurrentPolicy`: balance may drop to ``-overdraft_limit``, pays no
  interest.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from bank_demo.exceptions import InsufficientFunds, InvalidAmount
from bank_demo.models.base import format_money, positive_amount, to_decimal, to_money
from bank_demo.models.enums import AccountKind, TransactionKind
from bank_demo.models.transaction import Transaction

if TYPE_CHECKING:
    from bank_demo.models.customer import Customer

logger = logging.getLogger(__name__)

SAVINGS_INTEREST_RATE = Decimal("3.5")


class AccountPolicy(ABC):
    """Rules that vary between account kinds."""

    kind: AccountKind
    insufficient_funds_message: str
    pays_interest: bool
    no_interest_message: str = ""

    @abstractmethod
    def available_funds(self, balance: Decimal) -> Decimal:
        """Largest amount a single withdrawal may take from ``balance``."""

    @abstractmethod
    def interest(self, balance: Decimal) -> Decimal:
        """Interest earned on ``balance``; zero when none is paid."""


@dataclass(frozen=True)
class SavingsPolicy(AccountPolicy):
    """Savings account: no overdraft, fixed percentage interest."""

    interest_rate: Decimal = SAVINGS_INTEREST_RATE

    kind = AccountKind.SAVINGS
    insufficient_funds_message = "Insufficient funds in savings account"
    pays_interest = True

    def available_funds(self, balance: Decimal) -> Decimal:
        return balance

    def interest(self, balance: Decimal) -> Decimal:
        # Rounded half up to whole cents; nothing is paid on a non-positive balance.
        if balance <= 0:
            return Decimal("0.00")
        return to_money(balance * self.interest_rate / 100)


@dataclass(frozen=True)
class CurrentPolicy(AccountPolicy):
    """Current account: overdraft facility, no interest."""

    overdraft_limit: Decimal = Decimal("0.00")

    kind = AccountKind.CURRENT
    insufficient_funds_message = "Exceeds overdraft limit"
    pays_interest = False
    no_interest_message = "Current accounts don't earn interest"

    def __post_init__(self) -> None:
        limit = to_decimal(self.overdraft_limit)
        if limit < 0:
            raise InvalidAmount(f"Overdraft limit must not be negative, got {limit}")
        if limit != to_money(limit):
            raise InvalidAmount(f"Overdraft limit must be in whole cents, got {limit}")
        object.__setattr__(self, "overdraft_limit", to_money(limit))

    def available_funds(self, balance: Decimal) -> Decimal:
        return balance + self.overdraft_limit

    def interest(self, balance: Decimal) -> Decimal:
        return Decimal("0.00")


Policy = SavingsPolicy | CurrentPolicy


class Account:
    """Bank account owned by a single customer.

    The balance can only change through :meth:`deposit`, :meth:`withdraw`
    and :meth:`calculate_interest`; each successful call appends exactly one
    :class:`Transaction` to the log.

    Parameters
    ----------
    account_number : str
        Identifier, unique within the owning customer.
    owner : Customer
        Customer that holds the account.
    policy : SavingsPolicy | CurrentPolicy
        Withdrawal and interest rules.
    """

    def __init__(self, account_number: str, owner: Customer, policy: Policy) -> None:
        self._account_number = account_number
        self._owner = owner
        self._policy = policy
        self._balance = Decimal("0.00")
        self._transactions: list[Transaction] = []

    @classmethod
    def savings(
        cls,
        account_number: str,
        owner: Customer,
        interest_rate: Decimal = SAVINGS_INTEREST_RATE,
    ) -> Account:
        """Create a savings account."""
        return cls(account_number, owner, SavingsPolicy(interest_rate=Decimal(interest_rate)))

    @classmethod
    def current(cls, account_number: str, owner: Customer, overdraft_limit: object) -> Account:
        """Create a current account with an overdraft facility."""
        return cls(account_number, owner, CurrentPolicy(overdraft_limit=overdraft_limit))

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def owner(self) -> Customer:
        return self._owner

    @property
    def policy(self) -> Policy:
        return self._policy

    @property
    def kind(self) -> AccountKind:
        return self._policy.kind

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def available_funds(self) -> Decimal:
        return self._policy.available_funds(self._balance)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def deposit(self, amount: object) -> Transaction:
        """Add ``amount`` to the balance.

        Raises
        ------
        InvalidAmount
            If ``amount`` is not a positive number.
        """
        value = positive_amount(amount)
        self._balance += value
        logger.debug("Deposited %s into %s", value, self._account_number)
        return self._record(TransactionKind.DEPOSIT, value)

    def withdraw(self, amount: object) -> Transaction:
        """Take ``amount`` from the balance if the policy allows it.

        Raises
        ------
        InvalidAmount
            If ``amount`` is not a positive number.
        InsufficientFunds
            If ``amount`` exceeds the available funds. The balance is
            left unchanged.
        """
        value = positive_amount(amount)
        if value > self.available_funds:
            logger.warning(
                "Withdrawal of %s from %s rejected (available %s)",
                value,
                self._account_number,
                self.available_funds,
            )
            raise InsufficientFunds(self._policy.insufficient_funds_message)
        self._balance -= value
        logger.debug("Withdrew %s from %s", value, self._account_number)
        return self._record(TransactionKind.WITHDRAWAL, -value)

    def calculate_interest(self) -> Decimal:
        """Credit interest on the current balance and return it."""
        interest = self._policy.interest(self._balance)
        if not self._policy.pays_interest:
            logger.info(self._policy.no_interest_message)
            return interest
        if interest <= 0:
            logger.info("No interest earned on %s", self._account_number)
            return interest
        self.deposit(interest)
        logger.info("Interest added: %s", interest, extra={"account_number": self._account_number})
        return interest

    def transaction_history(self, currency_symbol: str = "") -> list[str]:
        """Transaction log as display lines, oldest first."""
        return [t.format(currency_symbol) for t in self._transactions]

    def summary_line(self, currency_symbol: str = "") -> str:
        return f"{self._account_number} - Balance: {format_money(self._balance, currency_symbol)}"

    def _record(self, kind: TransactionKind, amount: Decimal) -> Transaction:
        transaction = Transaction(kind=kind, amount=amount)
        self._transactions.append(transaction)
        return transaction

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number!r}, kind={self.kind.value}, "
            f"balance={self._balance})"
        )
