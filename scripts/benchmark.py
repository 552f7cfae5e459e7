#!/usr/bin/env python3
"""Benchmark schedule generation and rendering.

Measures:
- Schedule build rate (schedules/sec and records/sec) per loan profile
- Table and JSON rendering rate
- Build time for one very long term

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --count 5000
    python scripts/benchmark.py --long-term-years 10000
"""

import argparse
import io
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from amortize.config import OutputFormat
from amortize.engine import ScheduleEngine
from amortize.generators import LoanTermsGenerator
from amortize.models import LoanProfile, LoanTerms, Schedule
from amortize.sinks.console import ConsoleSink

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def benchmark_build(count: int, seed: int) -> list[Schedule]:
    """Benchmark schedule generation per profile.

    Parameters
    ----------
    count : int
        Number of loans per profile.
    seed : int
        Random seed.

    Returns
    -------
    list[Schedule]
        Built schedules (for rendering benchmarks).
    """
    engine = ScheduleEngine()
    generator = LoanTermsGenerator(seed=seed)
    schedules: list[Schedule] = []

    for profile in LoanProfile:
        terms = list(generator.generate_batch(count, profile))
        t0 = time.perf_counter()
        built = [engine.build(t) for t in terms]
        elapsed = time.perf_counter() - t0
        records = sum(len(s) for s in built)
        print(
            f"  {profile.value:<10} {count:>7,} schedules in {elapsed:.2f}s  "
            f"({count / elapsed:,.0f}/sec, {records / elapsed:,.0f} records/sec)"
        )
        schedules.extend(built)

    return schedules


def benchmark_render(schedules: list[Schedule]) -> None:
    """Benchmark table and JSON rendering into memory."""
    for output_format in OutputFormat:
        buffer = io.StringIO()
        sink = ConsoleSink(stream=buffer, output_format=output_format)
        t0 = time.perf_counter()
        for schedule in schedules:
            sink.write_schedule(schedule)
        elapsed = time.perf_counter() - t0
        size_mb = len(buffer.getvalue()) / (1024 * 1024)
        print(
            f"  {output_format.value:<10} {len(schedules):>7,} schedules in {elapsed:.2f}s  "
            f"({len(schedules) / elapsed:,.0f}/sec, {size_mb:.1f} MB)"
        )


def benchmark_long_term(years: int) -> None:
    """Benchmark one schedule with a very long term."""
    terms = LoanTerms.create(amount=1_000_000, rate=5.0, years=years)
    t0 = time.perf_counter()
    schedule = ScheduleEngine().build(terms)
    elapsed = time.perf_counter() - t0
    print(f"  {years:,} years: {len(schedule):,} records in {elapsed:.2f}s")


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark amortize")
    parser.add_argument("--count", type=int, default=1000, help="Loans per profile")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--long-term-years", type=int, default=1000, help="Term for the long schedule")
    args = parser.parse_args()

    print("=" * 60)
    print("Schedule build")
    print("=" * 60)
    schedules = benchmark_build(args.count, args.seed)

    print("=" * 60)
    print("Rendering")
    print("=" * 60)
    benchmark_render(schedules)

    print("=" * 60)
    print("Long term")
    print("=" * 60)
    benchmark_long_term(args.long_term_years)


if __name__ == "__main__":
    main()
