"""Console sink for rendering schedules as a text table or JSON."""

import json
import sys
from typing import TextIO

from amortize.config import OutputConfig, OutputFormat
from amortize.models import PaymentRecord, Schedule, cents_to_dollars
from amortize.sinks.serialization import schedule_to_dict

COLUMNS = (
    "PaymentNumber",
    "PaymentAmount",
    "PaymentInterest",
    "CurrentBalance",
    "TotalPayments",
    "TotalInterestPaid",
)
PERIOD_WIDTH = 14
AMOUNT_WIDTH = 20


def format_dollars(cents: int) -> str:
    """Format cents as dollars with two decimals."""
    return f"{cents_to_dollars(cents):.2f}"


class ConsoleSink:
    """Write schedules to a text stream (stdout by default)."""

    def __init__(
        self,
        stream: TextIO | None = None,
        output_format: OutputFormat = OutputFormat.TABLE,
        pretty: bool = False,
        max_records: int | None = None,
        show_summary: bool = True,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Destination stream; ``None`` resolves to ``sys.stdout`` on write.
        output_format : OutputFormat
            Table or JSON rendering.
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum table rows to print (None for all). Must be positive.
        show_summary : bool
            Print totals after the table.
        """
        if max_records is not None and max_records < 1:
            raise ValueError(f"max_records must be positive, got {max_records}")

        self.stream = stream
        self.output_format = OutputFormat(output_format)
        self.pretty = pretty
        self.max_records = max_records
        self.show_summary = show_summary
        self._count = 0

    @classmethod
    def from_config(cls, config: OutputConfig, stream: TextIO | None = None) -> "ConsoleSink":
        """Create a sink from output configuration."""
        return cls(
            stream=stream,
            output_format=config.format,
            pretty=config.pretty_json,
            max_records=config.max_records,
            show_summary=config.show_summary,
        )

    @property
    def schedules_written(self) -> int:
        return self._count

    def write_schedule(self, schedule: Schedule) -> None:
        """Render a schedule in the configured format."""
        if self.output_format == OutputFormat.JSON:
            self._write_json(schedule)
        else:
            self._write_table(schedule)
        self._count += 1

    def format_row(self, record: PaymentRecord) -> str:
        """Format one record as a table row."""
        amounts = (
            record.payment_amount_cents,
            record.interest_portion_cents,
            record.remaining_balance_cents,
            record.cumulative_payment_cents,
            record.cumulative_interest_cents,
        )
        return f"{record.period_number:<{PERIOD_WIDTH}}" + "".join(
            f"{format_dollars(cents):>{AMOUNT_WIDTH}}" for cents in amounts
        )

    def format_header(self) -> str:
        return f"{COLUMNS[0]:<{PERIOD_WIDTH}}" + "".join(f"{name:>{AMOUNT_WIDTH}}" for name in COLUMNS[1:])

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream or sys.stdout)

    def _write_table(self, schedule: Schedule) -> None:
        records = schedule.records
        display_records = records[: self.max_records] if self.max_records is not None else records

        self._print(self.format_header())
        for record in display_records:
            self._print(self.format_row(record))

        if self.max_records is not None and len(records) > self.max_records:
            self._print(f"... and {len(records) - self.max_records} more records")

        if self.show_summary:
            self._print()
            self._print(f"Monthly payment:   {format_dollars(schedule.monthly_payment_cents)}")
            self._print(f"Payments:          {schedule.number_of_payments}")
            self._print(f"Total paid:        {format_dollars(schedule.total_payment_cents)}")
            self._print(f"Total interest:    {format_dollars(schedule.total_interest_cents)}")

    def _write_json(self, schedule: Schedule) -> None:
        data = schedule_to_dict(schedule)
        if self.pretty:
            self._print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            self._print(json.dumps(data, ensure_ascii=False))
