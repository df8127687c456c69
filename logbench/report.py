"""Console summary of a benchmark run."""

import statistics
from typing import Dict, List

from colorama import Fore, Style
from tabulate import tabulate


def summarize(nanos: List[int]) -> Dict[str, float]:
    """Calculate statistics for a list of durations"""
    if not nanos:
        return {"count": 0, "avg": 0, "median": 0, "min": 0, "max": 0, "total": 0}

    return {
        "count": len(nanos),
        "avg": statistics.mean(nanos),
        "median": statistics.median(nanos),
        "min": min(nanos),
        "max": max(nanos),
        "total": sum(nanos),
    }


def _color_for(multiplier: float) -> str:
    return Fore.GREEN if multiplier < 2 else Fore.YELLOW if multiplier < 5 else Fore.RED


def summary_rows(results: Dict[str, List[int]]) -> List[list]:
    stats = {name: summarize(nanos) for name, nanos in results.items()}
    averages = [s["avg"] for s in stats.values() if s["avg"] > 0]
    fastest = min(averages) if averages else 0

    rows = []
    for name, s in stats.items():
        multiplier = s["avg"] / fastest if fastest > 0 else 0
        rows.append([
            name,
            s["count"],
            f"{s['avg'] / 1000:.3f}",
            f"{s['median'] / 1000:.3f}",
            f"{s['min'] / 1000:.3f}",
            f"{s['max'] / 1000:.3f}",
            f"{s['total'] / 1_000_000:.3f}",
            f"{_color_for(multiplier)}{multiplier:.1f}x{Style.RESET_ALL}",
        ])
    return rows


def print_summary(results: Dict[str, List[int]]):
    """Print one row per backend, latencies in microseconds"""
    print(f"\n{Fore.GREEN}{'=' * 80}{Style.RESET_ALL}")
    print(f"{Fore.YELLOW}LOGGING BACKEND INSERT LATENCY{Style.RESET_ALL}")
    print(f"{Fore.GREEN}{'=' * 80}{Style.RESET_ALL}")

    headers = ["Backend", "Count", "Avg (µs)", "Median (µs)", "Min (µs)", "Max (µs)", "Total (ms)", "vs fastest"]
    print(tabulate(summary_rows(results), headers=headers, tablefmt="grid", disable_numparse=True))
