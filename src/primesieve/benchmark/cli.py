"""Command-line interface for the sieve benchmark.

Provides the `primesieve-benchmark` command with subcommands for:
- Running the timed benchmark
- Showing the known prime counts
- Listing the primes below a limit
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from primesieve.benchmark.config import ConfigError, SieveConfig, load_config
from primesieve.benchmark.runner import (
    BenchmarkProgress,
    format_report,
    run_benchmark,
)
from primesieve.engine import SieveEngine
from primesieve.known import KNOWN_PRIME_COUNTS, Validation, expected_count, validate_count


def cmd_run(args: argparse.Namespace) -> int:
    """Run the timed benchmark."""
    try:
        config = load_config(Path(args.config)) if args.config else SieveConfig()
        config = config.with_overrides(
            sieve_size=args.size,
            time_limit_seconds=args.time_limit,
            verbose=True if args.verbose else None,
            max_show_primes=args.show,
            label=args.label,
        ).validate()
    except (ConfigError, OSError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}")
        return 1

    # Progress callback
    def progress(p: BenchmarkProgress) -> None:
        print(
            f"  {p.passes} passes, {p.elapsed:.1f}s / {p.time_limit:.1f}s",
            end="\r",
            flush=True,
        )

    run = run_benchmark(config, progress_callback=None if args.quiet else progress)

    if not args.quiet:
        # Clear progress line
        print(" " * 50, end="\r")
    print("\n".join(format_report(run)))

    return 1 if run.validation is Validation.MISMATCH else 0


def cmd_known(args: argparse.Namespace) -> int:
    """Show the known prime counts."""
    print("Known Prime Counts")
    print("=" * 28)
    print(f"{'Limit':>14} {'Primes':>12}")
    print("-" * 28)
    for limit, count in sorted(KNOWN_PRIME_COUNTS.items()):
        print(f"{limit:>14} {count:>12}")
    return 0


def cmd_primes(args: argparse.Namespace) -> int:
    """Sieve once and list primes."""
    if args.limit < 0:
        print(f"Error: limit must be non-negative, got {args.limit}")
        return 1

    engine = SieveEngine(args.limit).run_sieve()
    counted = engine.total_primes()
    print(f"Primes below {args.limit}: {counted}")

    if args.show > 0:
        print(", ".join(str(p) for p in engine.get_primes(args.show)))

    validation = validate_count(args.limit, counted)
    if validation is Validation.MISMATCH:
        print(f"Error: expected {expected_count(args.limit)} primes")
        return 1
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="primesieve-benchmark",
        description="Timed bit-packed Sieve of Eratosthenes benchmark",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Run the timed benchmark")
    run_parser.add_argument(
        "--size",
        type=int,
        help="Sieve size: count primes below this limit (default: 1000000)",
    )
    run_parser.add_argument(
        "--time-limit",
        type=float,
        help="Benchmark duration in seconds (default: 5)",
    )
    run_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show primes and timing details",
    )
    run_parser.add_argument(
        "--show",
        type=int,
        help="Number of primes to show in verbose mode (default: 100)",
    )
    run_parser.add_argument(
        "--label",
        help="Label for the result line (default: primesieve)",
    )
    run_parser.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    run_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    run_parser.set_defaults(func=cmd_run)

    # known command
    known_parser = subparsers.add_parser("known", help="Show known prime counts")
    known_parser.set_defaults(func=cmd_known)

    # primes command
    primes_parser = subparsers.add_parser("primes", help="List primes below a limit")
    primes_parser.add_argument(
        "limit",
        type=int,
        help="Count primes below this limit",
    )
    primes_parser.add_argument(
        "--show",
        type=int,
        default=20,
        help="Number of primes to list (default: 20)",
    )
    primes_parser.set_defaults(func=cmd_primes)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
