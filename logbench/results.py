"""Save raw duration sequences so charts can be re-rendered without re-measuring."""

import json
import logging
from typing import Dict, List, Tuple

from logbench.exceptions import ResultsError

logger = logging.getLogger(__name__)


def save_results(path: str, results: Dict[str, List[int]], iterations: int):
    data = {"iterations": iterations, "results": results}
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise ResultsError(f"Could not write results to {path}: {e}") from e
    logger.info("Results saved to %s", path)


def load_results(path: str) -> Tuple[Dict[str, List[int]], int]:
    """Load ``(results, iterations)`` from a file written by save_results"""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ResultsError(f"Could not read results from {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("results"), dict):
        raise ResultsError(f"{path} has no 'results' mapping")

    results = data["results"]
    for name, nanos in results.items():
        if not isinstance(nanos, list) or not all(
            isinstance(n, int) and not isinstance(n, bool) and n >= 0 for n in nanos
        ):
            raise ResultsError(f"Series '{name}' in {path} must be a list of non-negative integers")

    iterations = data.get("iterations")
    if not isinstance(iterations, int):
        iterations = max((len(nanos) for nanos in results.values()), default=0)
    return results, iterations
