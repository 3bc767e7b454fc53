"""Customer generator."""

from __future__ import annotations

import string
from typing import Iterator

from bank_demo.generators.base import BaseGenerator
from bank_demo.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate customers with a realistic name and a PAN-shaped tax id."""

    # Five letters, four digits, one letter (e.g. ABCDE1234F)
    TAX_ID_PATTERN = "?????####?"

    def generate(self) -> Customer:
        """Generate a single customer without accounts."""
        return Customer(name=self.fake.name(), tax_id=self._tax_id())

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate ``count`` customers with distinct tax ids.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        seen: set[str] = set()
        while len(seen) < count:
            customer = self.generate()
            if customer.tax_id in seen:
                continue
            seen.add(customer.tax_id)
            yield customer

    def _tax_id(self) -> str:
        return self.fake.bothify(self.TAX_ID_PATTERN, letters=string.ascii_uppercase)
