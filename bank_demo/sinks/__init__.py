"""Output sinks for account state."""

from bank_demo.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
