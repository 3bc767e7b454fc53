"""Command-line entry point for the banking demo."""

import argparse
import logging
import sys
from dataclasses import replace

from bank_demo.config import BankConfig
from bank_demo.exceptions import ConfigurationError
from bank_demo.logging import setup_logging
from bank_demo.scenarios import DemoScenario
from bank_demo.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the savings/current account demo")
    parser.add_argument(
        "--fake-customer",
        action="store_true",
        help="Use a generated customer instead of the fixed one",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --fake-customer")
    parser.add_argument("--json", action="store_true", help="Also print a JSON snapshot of the customer")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT or standard)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = BankConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    if args.log_format:
        config = replace(config, log_format=args.log_format)

    setup_logging(level=config.log_level, format_type=config.log_format)

    sink = ConsoleSink(currency_symbol=config.currency_symbol)
    result = DemoScenario(config=config, sink=sink, fake_customer=args.fake_customer).run()

    if args.json:
        sink.write_snapshot(result.customer)

    logger.debug("Store summary: %s", result.store.summary())
    return 0
