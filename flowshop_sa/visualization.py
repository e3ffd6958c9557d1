"""Reporting: text tables and matplotlib charts for evaluated orders."""

import logging
import os
from typing import Dict, List, Optional

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from flowshop_sa.models import (  # noqa: E402
    DeadlineReport,
    JobMatrix,
    Permutation,
    ScheduleResult,
)

logger = logging.getLogger("flowshop")


def format_text_gantt(order: Permutation, result: ScheduleResult) -> str:
    """Render a unit-per-cell Gantt chart, one line per machine.

    Busy units show the job id, idle units show ``-``. Cells are padded to
    the width of the largest job id so machine rows stay aligned.
    """
    width = len(str(max(order))) if order else 1
    lines = []
    for begin_row, end_row in zip(result.job_begin, result.job_end):
        cells: List[str] = []
        clock = 0
        for job_id, start, end in zip(order, begin_row, end_row):
            cells.extend(["-"] * (start - clock))
            cells.extend([str(job_id)] * (end - start))
            clock = end
        lines.append("".join(f"{c:>{width}}|" for c in cells))
    return "\n\n".join(lines)


def format_deadline_table(report: DeadlineReport) -> str:
    """Tabulate Ci, di, Li and Ti per job with a sum row."""
    sep = "-" * 48
    rows = [
        f"{'Ji':>5}{'Ci':>10}{'di':>10}{'Li':>10}{'Ti':>10}",
        sep,
    ]
    for job_id, c, d, li, ti in zip(
        report.job_ids, report.end_times, report.deadlines, report.lateness, report.tardiness
    ):
        rows.append(f"{'J' + str(job_id):>5}{c:>10}{d:>10}{li:>10}{ti:>10}")
    rows.append(sep)
    rows.append(f"{'SUM':>5}{'':>20}{report.total_lateness:>10}{report.total_tardiness:>10}")
    return "\n".join(rows)


def format_summary(
    label: str,
    initial_order: Permutation,
    best_order: Permutation,
    result: ScheduleResult,
) -> str:
    return "\n".join(
        [
            f"{label} data:",
            "Initial order: " + " ".join(map(str, initial_order)),
            "Best order: " + " ".join(map(str, best_order)),
            f"C-max: {result.makespan}",
            f"T-sum: {result.total_tardiness}",
        ]
    )


def plot_gantt(
    jobs: JobMatrix,
    order: Permutation,
    result: ScheduleResult,
    save_path: str,
    title: Optional[str] = None,
    show_legend: Optional[bool] = None,
) -> str:
    """Create and save a Gantt chart for an evaluated order.

    Figure size adapts to the number of machines and jobs; the legend is
    only drawn for small instances unless forced.
    """
    m = len(result.job_begin)
    n = len(order)
    base_w, base_h = 10, 0.5 * m + 2
    fig, ax = plt.subplots(
        figsize=(min(base_w + n * 0.05, 18), min(base_h, 16)),
        constrained_layout=True,
    )
    cmap = plt.get_cmap("tab20")
    colors = {job_id: cmap((job_id - 1) % 20) for job_id in order}
    for i in range(m):
        for k, job_id in enumerate(order):
            ax.barh(
                i,
                jobs[job_id - 1][i],
                left=result.job_begin[i][k],
                height=0.8,
                color=colors[job_id],
                alpha=0.85,
                edgecolor="black",
                linewidth=0.6,
            )
    ax.set_xlabel("Time", fontsize=12)
    ax.set_ylabel("Machine", fontsize=12)
    if title is None:
        title = f"Gantt Chart - Cmax = {result.makespan}"
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_yticks(range(m))
    ax.set_yticklabels([f"M{i + 1}" for i in range(m)])
    ax.invert_yaxis()
    ax.grid(True, alpha=0.25, axis="x", linestyle="--", linewidth=0.7)

    if show_legend is None:
        show_legend = n <= 40
    if show_legend:
        legend_elements = [
            plt.Rectangle(
                (0, 0),
                1,
                1,
                facecolor=colors[job_id],
                alpha=0.85,
                edgecolor="black",
                label=f"Job {job_id}",
            )
            for job_id in sorted(colors)
        ]
        ax.legend(
            handles=legend_elements,
            bbox_to_anchor=(1.02, 1),
            loc="upper left",
            borderaxespad=0.0,
            fontsize=8,
            frameon=False,
            ncol=1 if n <= 25 else 2,
        )

    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    logger.info("Gantt chart saved as: %s", save_path)
    return save_path


def plot_convergence(histories: Dict[str, List[int]], save_path: str) -> str:
    """Plot per-round base cost for several runs on one figure."""
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    for label, values in histories.items():
        ax.plot(range(len(values)), values, label=label, linewidth=2)
        if values:
            ax.annotate(
                f"{min(values)}",
                xy=(len(values) - 1, values[-1]),
                xytext=(6, -10),
                textcoords="offset points",
                fontsize=9,
                bbox=dict(boxstyle="round,pad=0.2", facecolor="white", alpha=0.55),
            )
    ax.set_xlabel("Iteration", fontsize=12)
    ax.set_ylabel("Cost", fontsize=12)
    ax.set_title("Convergence", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(frameon=False, fontsize=9)
    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    logger.info("Convergence plot saved as: %s", save_path)
    return save_path


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)
