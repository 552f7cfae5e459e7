"""Command line entry point: compute and print an amortization schedule.

Values not given as flags are prompted for interactively.

Usage:
    amortize
    amortize --amount 250000 --rate 6.5 --years 30
    amortize --amount 1000 --rate 12 --years 1 --format json --pretty
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from amortize.config import AmortizeConfig, EngineConfig, OutputFormat
from amortize.engine import ScheduleEngine
from amortize.exceptions import ConfigurationError, InputAbortedError, LoanTermsError, ScheduleLimitError
from amortize.interactive import InteractiveSession, StreamLineReader, StreamLineWriter
from amortize.logging import get_logger, setup_logging
from amortize.models import LoanTerms
from amortize.sinks.console import ConsoleSink

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amortize",
        description="Compute a fixed-rate loan amortization schedule.",
    )
    parser.add_argument("--amount", type=float, help="Amount to borrow, in dollars")
    parser.add_argument("--rate", type=float, help="Annual percentage rate (5 means 5%%)")
    parser.add_argument("--years", type=int, help="Term in whole years")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: table, or OUTPUT_FORMAT)",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--max-records", type=positive_int, default=None, help="Print at most N table rows")
    parser.add_argument("--no-summary", action="store_true", help="Omit the totals after the table")
    parser.add_argument(
        "--max-periods",
        type=positive_int,
        default=None,
        help="Refuse loans that could need more than N payment periods (or AMORTIZE_MAX_PERIODS)",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO, or LOG_LEVEL)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: standard, or LOG_FORMAT)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> AmortizeConfig:
    """Environment configuration with command line overrides applied."""
    config = AmortizeConfig.from_env()

    if args.format is not None:
        config.output.format = OutputFormat(args.format)
    if args.pretty:
        config.output.pretty_json = True
    if args.no_summary:
        config.output.show_summary = False
    if args.max_records is not None:
        config.output.max_records = args.max_records
    if args.max_periods is not None:
        config.engine = EngineConfig(max_periods=args.max_periods)
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logging(level=config.log_level, format_type=config.log_format)

    stdout = stdout or sys.stdout
    writer = StreamLineWriter(stdout)
    session = InteractiveSession(StreamLineReader(stdin or sys.stdin, writer), writer, config.bounds)

    try:
        inputs = session.run(amount=args.amount, rate=args.rate, years=args.years)
    except InputAbortedError as e:
        logger.warning("%s", e)
        writer.write("\nAn error was encountered reading input. Terminating program.\n")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        writer.write("\n")
        return EXIT_INTERRUPTED

    try:
        terms = LoanTerms.create(inputs.amount, inputs.rate, inputs.years, bounds=config.bounds)
        schedule = ScheduleEngine(config.engine).build(terms)
    except (LoanTermsError, ScheduleLimitError) as e:
        logger.info("Rejected loan: %s", e)
        writer.write(f"Unable to process the values entered. {e}\n")
        return EXIT_FAILURE

    logger.info(
        "Computed %d payments of %d cents for %d cents at %s%% over %d years",
        schedule.number_of_payments,
        schedule.monthly_payment_cents,
        terms.principal_cents,
        terms.annual_percentage_rate,
        terms.term_years,
    )
    ConsoleSink.from_config(config.output, stream=stdout).write_schedule(schedule)
    return EXIT_OK
