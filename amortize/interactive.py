"""Interactive prompting for loan inputs.

The session never touches the terminal directly: it reads and writes
through injected :class:`LineReader` / :class:`LineWriter` objects, so the
same loop drives a real console, a pipe or a test double.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, TextIO

from amortize.config import BoundsConfig, Range
from amortize.exceptions import InputAbortedError, InvalidFieldError
from amortize.logging import get_logger
from amortize.validation import parse_amount, parse_rate, parse_term

logger = get_logger(__name__)

AMOUNT_PROMPT = "Please enter the amount you would like to borrow: "
RATE_PROMPT = "Please enter the annual percentage rate used to repay the loan: "
TERM_PROMPT = "Please enter the term, in years, over which the loan is repaid: "


class LineReader(Protocol):
    def read_line(self, prompt: str) -> str | None:
        """Show ``prompt`` and return the next line, or None at end of input."""
        ...


class LineWriter(Protocol):
    def write(self, text: str) -> None: ...


class StreamLineWriter:
    """LineWriter over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class StreamLineReader:
    """LineReader over a text stream; prompts go to ``writer``."""

    def __init__(self, stream: TextIO, writer: LineWriter) -> None:
        self.stream = stream
        self.writer = writer

    def read_line(self, prompt: str) -> str | None:
        self.writer.write(prompt)
        line = self.stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


@dataclass(frozen=True)
class LoanInputs:
    """Validated raw inputs: dollars, annual percent, whole years."""

    amount: float
    rate: float
    years: int


class InteractiveSession:
    """Prompt for amount, rate and term until each one is valid.

    Parameters
    ----------
    reader : LineReader
        Source of user input.
    writer : LineWriter
        Destination for re-prompt messages.
    bounds : BoundsConfig | None
        Accepted ranges (defaults to the standard bounds).
    """

    def __init__(self, reader: LineReader, writer: LineWriter, bounds: BoundsConfig | None = None) -> None:
        self.reader = reader
        self.writer = writer
        self.bounds = bounds or BoundsConfig()

    def prompt_amount(self) -> float:
        return self._ask(AMOUNT_PROMPT, parse_amount, self.bounds.amount, "a positive value")

    def prompt_rate(self) -> float:
        return self._ask(RATE_PROMPT, parse_rate, self.bounds.rate, "a positive value")

    def prompt_term(self) -> int:
        return self._ask(TERM_PROMPT, parse_term, self.bounds.term_years, "a positive integer value")

    def run(
        self,
        amount: float | None = None,
        rate: float | None = None,
        years: int | None = None,
    ) -> LoanInputs:
        """Collect all three inputs, prompting only for those not given.

        Raises
        ------
        InputAbortedError
            If input ends before every value has been entered.
        """
        return LoanInputs(
            amount=self.prompt_amount() if amount is None else amount,
            rate=self.prompt_rate() if rate is None else rate,
            years=self.prompt_term() if years is None else years,
        )

    def _ask(
        self,
        prompt: str,
        parser: Callable[[str, BoundsConfig], Any],
        bounds: Range,
        kind: str,
    ) -> Any:
        while True:
            line = self.reader.read_line(prompt)
            if line is None:
                raise InputAbortedError("Input ended before all values were entered")
            try:
                return parser(line, self.bounds)
            except InvalidFieldError as e:
                logger.debug("Re-prompting for %s after %r", e.field, line)
                self.writer.write(
                    f"Please enter {kind} between {bounds.describe()}. An invalid value was entered.\n"
                )
