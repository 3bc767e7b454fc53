"""Console sink for printing account state."""

import json
import sys
from typing import TextIO

from bank_demo.models import Account, Customer
from bank_demo.sinks.serialization import customer_to_dict


class ConsoleSink:
    """Print customers, accounts and transaction histories to a text stream."""

    def __init__(self, currency_symbol: str = "₹", stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        currency_symbol : str
            Symbol printed in front of every amount.
        stream : TextIO | None
            Output stream; ``sys.stdout`` at write time when not given.
        """
        self.currency_symbol = currency_symbol
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def print_accounts(self, customer: Customer) -> None:
        self._write(f"\nAccounts for {customer.name}")
        for line in customer.display_accounts(self.currency_symbol):
            self._write(line)

    def print_transaction_history(self, account: Account) -> None:
        self._write(f"\nTransaction History for {account.account_number}")
        for line in account.transaction_history(self.currency_symbol):
            self._write(line)

    def print_error(self, error: Exception) -> None:
        self._write(f"Error: {error}")

    def write_snapshot(self, customer: Customer, pretty: bool = True) -> None:
        """Print the customer and its accounts as JSON."""
        data = customer_to_dict(customer)
        if pretty:
            self._write(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            self._write(json.dumps(data, ensure_ascii=False))

    def _write(self, line: str) -> None:
        print(line, file=self.stream)
