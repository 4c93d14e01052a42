#!/usr/bin/env python3
"""
Basic Usage Example - Fortune K-Line Generator

This script demonstrates the basic usage of the fortune engine. It shows how to:
- Initialize the engine with a seeded random source
- Generate a series, chart payload and narrative for a birth date
- Regenerate, which releases the previous chart first
- Handle invalid input

Run: python examples/basic_usage.py
"""

from fortune_app.engine import FortuneEngine
from fortune_app.errors import InputError
from fortune_app.logging import configure_logging
from fortune_app.synthesis import seeded_source


def print_report(report) -> None:
    """Print the key parts of a fortune report."""
    print(f"Birth date: {report.birth.solar_date} (Year of the {report.birth.sign.english})")
    print(f"Months: {len(report.series)}  {report.series.labels[0]} .. {report.series.labels[-1]}")
    print(f"First sample: {report.series[0].as_values()}")
    print(f"Trend: {report.summary.trend.value}, relation: {report.summary.relation.value}")
    for line in report.narrative.lines():
        print(f"  {line}")


def main():
    configure_logging(level="WARNING")
    engine = FortuneEngine(random_source=seeded_source(2026))

    print("=== Horse, self-year in 2026 ===")
    print_report(engine.generate("1990-06-15"))

    print("\n=== Rat, opposition-year in 2026 ===")
    report = engine.generate("1996-08-01")
    print_report(report)
    print(f"Live chart: {engine.current_chart.handle_id}")

    print("\n=== Invalid date ===")
    try:
        engine.generate("2023-02-29")
    except InputError as e:
        print(f"Rejected: {e}")

    engine.close()


if __name__ == "__main__":
    main()
