"""Account number generator."""

from bank_demo.models.enums import AccountKind


class AccountNumberGenerator:
    """Hand out sequential account numbers per kind: SA001, SA002, CA001, ..."""

    PREFIXES = {
        AccountKind.SAVINGS: "SA",
        AccountKind.CURRENT: "CA",
    }

    def __init__(self, width: int = 3) -> None:
        self.width = width
        self._counters: dict[AccountKind, int] = {kind: 0 for kind in AccountKind}

    def next_number(self, kind: AccountKind) -> str:
        self._counters[kind] += 1
        return f"{self.PREFIXES[kind]}{self._counters[kind]:0{self.width}d}"

    def reserve(self, account_number: str) -> None:
        """Skip past a number that was assigned by hand."""
        for kind, prefix in self.PREFIXES.items():
            suffix = account_number[len(prefix):]
            if account_number.startswith(prefix) and suffix.isdigit():
                self._counters[kind] = max(self._counters[kind], int(suffix))
