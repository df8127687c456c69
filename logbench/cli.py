#!/usr/bin/env python3
"""
Compare insert latency of logging backends: a flat file, PostgreSQL with and
without an id column, and SQLite with synchronous writes off.
"""

import argparse
import logging
import re
import sys

from colorama import Fore, Style, init

from logbench import charts
from logbench.backends import build_backends
from logbench.config import (
    ALL_BACKENDS,
    BACKEND_FILE,
    BACKEND_RDBMS,
    COMPARISON_BACKENDS,
    DEFAULT_DSN,
    DEFAULT_IMAGES_DIR,
    DEFAULT_ITERATIONS,
    DEFAULT_LOG_FILE,
    DEFAULT_SQLITE_FILE,
)
from logbench.exceptions import EmptySeriesError, LogBenchError
from logbench.report import print_summary
from logbench.results import load_results, save_results
from logbench.runner import run_all

logger = logging.getLogger(__name__)


def parse_iterations(value) -> int:
    """Parse the iteration count, falling back to the default when it is not a non-negative integer"""
    if value is None:
        return DEFAULT_ITERATIONS
    if not re.fullmatch(r"\+?[0-9]+", value):
        logger.warning("Invalid iteration count %r, using %d", value, DEFAULT_ITERATIONS)
        return DEFAULT_ITERATIONS
    return int(value)


def parse_backends(value: str) -> list:
    names = [name.strip() for name in value.split(",") if name.strip()]
    unknown = [name for name in names if name not in ALL_BACKENDS]
    if unknown:
        raise argparse.ArgumentTypeError(
            f"unknown backend(s) {', '.join(unknown)}; choose from {', '.join(ALL_BACKENDS)}"
        )
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark single-record inserts into logging backends")
    parser.add_argument("iterations", nargs="?", default=None,
                        help=f"Number of inserts per backend (default: {DEFAULT_ITERATIONS})")
    parser.add_argument("--dsn", default=DEFAULT_DSN,
                        help=f"PostgreSQL connection string (default: {DEFAULT_DSN})")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE,
                        help=f"Flat log file (default: {DEFAULT_LOG_FILE})")
    parser.add_argument("--sqlite-file", default=DEFAULT_SQLITE_FILE,
                        help=f"SQLite database file (default: {DEFAULT_SQLITE_FILE})")
    parser.add_argument("--images-dir", default=DEFAULT_IMAGES_DIR,
                        help=f"Directory for PNG charts (default: {DEFAULT_IMAGES_DIR})")
    parser.add_argument("--backends", type=parse_backends, default=list(ALL_BACKENDS),
                        help=f"Comma-separated backends to run (default: {','.join(ALL_BACKENDS)})")
    parser.add_argument("--save-results", metavar="PATH",
                        help="Write raw durations to a JSON file after measuring")
    parser.add_argument("--from-results", metavar="PATH",
                        help="Skip measuring and render charts from a saved JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def render_charts(results: dict, images_dir: str) -> list:
    """Write one chart per backend plus the comparison charts that can be drawn"""
    written = []
    for name, nanos in results.items():
        written.append(charts.generate_plot(nanos, name, images_dir))

    if BACKEND_RDBMS not in results or BACKEND_FILE not in results:
        logger.info("Comparison charts need both %s and %s results", BACKEND_RDBMS, BACKEND_FILE)
        return written

    for other_name in COMPARISON_BACKENDS:
        if other_name not in results:
            continue
        try:
            written.append(charts.generate_comparison_plot(
                results[BACKEND_RDBMS], results[BACKEND_FILE], results[other_name], other_name, images_dir
            ))
        except EmptySeriesError as e:
            logger.warning("Skipping comparison chart for %s: %s", other_name, e)
    return written


def run(args) -> dict:
    if args.from_results:
        results, iterations = load_results(args.from_results)
        print(f"{Fore.CYAN}Loaded {len(results)} series ({iterations} iterations) from {args.from_results}{Style.RESET_ALL}")
    else:
        iterations = parse_iterations(args.iterations)
        print(f"{Fore.YELLOW}🚀 Starting logging backend benchmark{Style.RESET_ALL}")
        print(f"{Fore.CYAN}Iterations: {iterations}, Backends: {', '.join(args.backends)}{Style.RESET_ALL}")

        backends = build_backends(args.backends, args.dsn, args.log_file, args.sqlite_file)
        results = run_all(backends, iterations)

        if args.save_results:
            save_results(args.save_results, results, iterations)

    print_summary(results)
    for path in render_charts(results, args.images_dir):
        print(f"{Fore.GREEN}Chart saved to {path}{Style.RESET_ALL}")
    return results


def main(argv=None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    init()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}Benchmark interrupted by user{Style.RESET_ALL}")
        sys.exit(130)
    except LogBenchError as e:
        logger.error("%s", e)
        print(f"{Fore.RED}Error during benchmark: {e}{Style.RESET_ALL}")
        sys.exit(1)


if __name__ == "__main__":
    main()
