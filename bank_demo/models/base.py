"""Money helpers shared across models."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bank_demo.exceptions import InvalidAmount

CENTS = Decimal("0.01")


def to_decimal(value: object) -> Decimal:
    """Parse ``int``/``str``/``float``/``Decimal`` into a finite Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Raises
    ------
    InvalidAmount
        If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmount(f"Amount must be a number, got {value!r}")
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidAmount(f"Amount must be a number, got {value!r}") from exc
    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {value}")
    return value


def to_money(value: object) -> Decimal:
    """Round a number to two decimal places, half up."""
    amount = to_decimal(value)
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmount(f"Amount is out of range, got {amount}") from exc


def positive_amount(value: object) -> Decimal:
    """Validate a caller-supplied amount without rounding it.

    Raises
    ------
    InvalidAmount
        If the value is not a number, has fractions of a cent, or is not
        greater than zero.
    """
    amount = to_decimal(value)
    try:
        whole_cents = amount.quantize(CENTS)
    except InvalidOperation as exc:
        raise InvalidAmount(f"Amount is out of range, got {amount}") from exc
    if amount != whole_cents:
        raise InvalidAmount(f"Amount must be in whole cents, got {amount}")
    if amount <= 0:
        raise InvalidAmount(f"Amount must be positive, got {amount}")
    return whole_cents


def format_money(amount: Decimal, currency_symbol: str = "") -> str:
    """Render an amount with its currency symbol, e.g. ``₹41400.00``."""
    return f"{currency_symbol}{amount}"
