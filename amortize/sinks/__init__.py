"""Output sinks for rendering schedules."""

from amortize.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
