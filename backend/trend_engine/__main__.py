"""CLI entry point for the trend engine.

Reads a numeric series from a file (or stdin) and prints the trend report,
adaptive threshold and volatility risk as camelCase JSON.

Usage:
    python -m trend_engine series.json
    echo "10 12 11 14 15 13 16" | python -m trend_engine --short 3 --long 5
    python -m trend_engine orders.csv --period 7 --multiplier 1.5 -v
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import Any, TextIO

from trend_engine.analysis import TrendAnalyzer
from trend_engine.config import get_settings

logger = logging.getLogger(__name__)


def parse_series(text: str) -> list[Any]:
    """Parse a JSON array, or numbers separated by commas/whitespace.

    Tokens that are not numbers are kept as-is so the engine's sanitizer
    drops them.
    """
    text = text.strip()
    if not text:
        return []

    if text.startswith("["):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Input looked like JSON but failed to parse: {e}")
        else:
            return data if isinstance(data, list) else []

    series: list[Any] = []
    for token in re.split(r"[\s,;]+", text):
        if not token:
            continue
        try:
            series.append(float(token))
        except ValueError:
            series.append(token)
    return series


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="python -m trend_engine",
        description="Trend, volatility and adaptive threshold report for a series",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m trend_engine series.json
  echo "10 12 11 14 15 13 16" | python -m trend_engine --short 3 --long 5
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="File with a JSON array or delimited numbers (default: stdin)",
    )
    parser.add_argument(
        "--short",
        type=int,
        default=settings.short_period,
        help=f"Short moving average window (default: {settings.short_period})",
    )
    parser.add_argument(
        "--long",
        type=int,
        default=settings.long_period,
        help=f"Long moving average window (default: {settings.long_period})",
    )
    parser.add_argument(
        "--period",
        type=int,
        default=settings.threshold_period,
        help=f"Adaptive threshold EMA period (default: {settings.threshold_period})",
    )
    parser.add_argument(
        "--multiplier",
        type=float,
        default=settings.threshold_multiplier,
        help=f"Adaptive threshold multiplier (default: {settings.threshold_multiplier})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(argv)


def build_output(series: list[Any], args: argparse.Namespace, analyzer: TrendAnalyzer) -> dict:
    """Run the engine over a series and collect the JSON payload."""
    report = analyzer.analyze(series, args.short, args.long)
    threshold = analyzer.adaptive_threshold(series, args.period, args.multiplier)
    return {
        "report": report.model_dump(mode="json", by_alias=True),
        "threshold": threshold.model_dump(mode="json", by_alias=True),
        "volatilityRisk": analyzer.volatility_risk(report.volatility_score).value,
    }


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    stdout = stdout or sys.stdout

    level = logging.DEBUG if args.verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    series = parse_series(args.input.read())
    if args.input is not sys.stdin:
        args.input.close()
    logger.debug(f"Read {len(series)} observations")

    analyzer = TrendAnalyzer(settings.engine_config(), logging.getLogger("trend_engine"))
    json.dump(build_output(series, args, analyzer), stdout, indent=args.indent)
    stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
