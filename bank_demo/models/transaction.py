"""Transaction model for the banking domain."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_demo.models.base import format_money
from bank_demo.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry.

    ``amount`` is signed: positive for deposits, negative for withdrawals.
    """

    kind: TransactionKind
    amount: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def magnitude(self) -> Decimal:
        return abs(self.amount)

    def format(self, currency_symbol: str = "") -> str:
        """Render as ``<KIND>: <symbol><absolute amount>``."""
        return f"{self.kind.value}: {format_money(self.magnitude, currency_symbol)}"

    def __str__(self) -> str:
        return self.format()
