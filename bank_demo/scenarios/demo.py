"""Fixed demonstration run over one customer's savings and current accounts."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from bank_demo.config import BankConfig
from bank_demo.exceptions import BankingError
from bank_demo.generators import CustomerGenerator
from bank_demo.models import Account, Customer
from bank_demo.sinks import ConsoleSink
from bank_demo.store import BankStore

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    """State left behind by :meth:`DemoScenario.run`."""

    store: BankStore
    customer: Customer
    savings: Account
    current: Account
    error: BankingError | None = None


class DemoScenario:
    """Open a savings and a current account and run a fixed set of operations.

    The sequence is:

    - savings: deposit 50000, withdraw 10000, calculate interest
    - current: deposit 100000, withdraw 120000, withdraw 10000

    The first domain error aborts the rest of the sequence and is reported
    once. Balances and transaction histories are printed afterwards either
    way. With the default 25000 overdraft the last withdrawal fails.
    """

    CUSTOMER_NAME = "Rahul Sharma"
    CUSTOMER_TAX_ID = "ABCDE1234F"

    def __init__(
        self,
        config: BankConfig | None = None,
        sink: ConsoleSink | None = None,
        fake_customer: bool = False,
    ) -> None:
        """Initialize the demo.

        Parameters
        ----------
        config : BankConfig | None
            Currency symbol, interest rate and overdraft limit.
        sink : ConsoleSink | None
            Where to print results.
        fake_customer : bool
            Use a Faker-generated customer instead of the fixed one.
        """
        self.config = config or BankConfig()
        self.sink = sink or ConsoleSink(currency_symbol=self.config.currency_symbol)
        self.fake_customer = fake_customer

    def run(self) -> DemoResult:
        result = self.setup()

        try:
            result.savings.deposit(50000)
            result.savings.withdraw(10000)
            result.savings.calculate_interest()

            result.current.deposit(100000)
            result.current.withdraw(120000)
            result.current.withdraw(10000)
        except BankingError as e:
            logger.debug("Demo sequence stopped: %s", e)
            result.error = e
            self.sink.print_error(e)

        self.report(result)
        return result

    def setup(self) -> DemoResult:
        """Register the customer and open both accounts."""
        store = BankStore(
            default_overdraft_limit=Decimal(self.config.default_overdraft_limit),
            interest_rate=Decimal(self.config.savings_interest_rate),
        )
        customer = self._make_customer()
        store.add_customer(customer)

        savings = store.open_savings_account(customer.tax_id, "SA001")
        current = store.open_current_account(customer.tax_id, account_number="CA001")
        return DemoResult(store=store, customer=customer, savings=savings, current=current)

    def report(self, result: DemoResult) -> None:
        self.sink.print_accounts(result.customer)
        self.sink.print_transaction_history(result.savings)
        self.sink.print_transaction_history(result.current)

    def _make_customer(self) -> Customer:
        if self.fake_customer:
            generator = CustomerGenerator(seed=self.config.seed, locale=self.config.locale)
            return generator.generate()
        return Customer(name=self.CUSTOMER_NAME, tax_id=self.CUSTOMER_TAX_ID)
