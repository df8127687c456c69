"""
Line charts of insert latency.

Charts are rendered off-screen with matplotlib's Agg backend and written as
PNG files of CANVAS_WIDTH x CANVAS_HEIGHT pixels.
"""

import logging
import os
from typing import List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from logbench.config import (  # noqa: E402
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CHART_DPI,
    DEFAULT_IMAGES_DIR,
    FILE_COLOR,
    OTHER_COLOR,
    RDBMS_COLOR,
)
from logbench.exceptions import ChartError, EmptySeriesError  # noqa: E402

logger = logging.getLogger(__name__)


def average_nanos(nanos: List[int]) -> int:
    """Integer mean of a duration sequence"""
    if not nanos:
        raise EmptySeriesError("Cannot average an empty duration sequence")
    return sum(nanos) // len(nanos)


def average_label(nanos: List[int]) -> str:
    return f"{average_nanos(nanos)}ns"


def _new_figure():
    return plt.figure(figsize=(CANVAS_WIDTH / CHART_DPI, CANVAS_HEIGHT / CHART_DPI), dpi=CHART_DPI)


def _save(path: str):
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        plt.savefig(path, dpi=CHART_DPI, facecolor="white")
    except (OSError, ValueError) as e:
        raise ChartError(f"Could not write chart {path}: {e}") from e
    finally:
        plt.close()
    logger.info("Chart saved to %s", path)
    return path


def generate_plot(nanos: List[int], plot_name: str, images_dir: str = DEFAULT_IMAGES_DIR) -> str:
    """Draw one duration sequence and write it to ``<images_dir>/<plot_name>.png``"""
    path = os.path.join(images_dir, f"{plot_name}.png")

    _new_figure()
    plt.plot(range(len(nanos)), nanos, color=RDBMS_COLOR, linewidth=1)
    plt.xlim(0, max(len(nanos), 1))
    plt.ylim(0, max(nanos, default=0) or 1)
    plt.xlabel("Iteration")
    plt.ylabel("Latency (ns)")
    plt.title(plot_name, fontsize=24)
    plt.grid(True, linestyle='--', alpha=0.6)
    plt.tight_layout()

    return _save(path)


def generate_comparison_plot(
    results_rdbms: List[int],
    results_file: List[int],
    other: List[int],
    other_name: str,
    images_dir: str = DEFAULT_IMAGES_DIR,
) -> str:
    """Overlay rdbms, file and one other sequence with their mean latency in the legend.

    Axes are sized to the rdbms series. Written to
    ``<images_dir>/comparison_<other_name>.png``.
    Raises EmptySeriesError before drawing if any sequence is empty.
    """
    series = [
        ("rdbms", results_rdbms, RDBMS_COLOR),
        (other_name, other, OTHER_COLOR),
        ("files", results_file, FILE_COLOR),
    ]
    labels = [f"{label} (avg {average_label(nanos)})" for label, nanos, _ in series]
    path = os.path.join(images_dir, f"comparison_{other_name}.png")

    _new_figure()
    for (_, nanos, color), label in zip(series, labels):
        plt.plot(range(len(nanos)), nanos, color=color, linewidth=1, label=label)
    plt.xlim(0, len(results_rdbms))
    plt.ylim(0, max(results_rdbms) or 1)
    plt.xlabel("Iteration")
    plt.ylabel("Latency (ns)")
    plt.title(f"rdbms vs file vs {other_name} for logging", fontsize=24)
    plt.legend(loc="upper right")
    plt.grid(True, linestyle='--', alpha=0.6)
    plt.tight_layout()

    return _save(path)
