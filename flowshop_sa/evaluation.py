"""Objective evaluation for the permutation flow shop.

``evaluate`` simulates an order through all machines and returns both
objectives (Cmax and total tardiness). ``schedule_span`` is the deadline-free
variant used to size deadlines against an unoptimised order.
"""

from __future__ import annotations

from flowshop_sa.models import (
    DeadlineReport,
    Deadlines,
    JobMatrix,
    Permutation,
    ScheduleResult,
)
from flowshop_sa.operations import validate_permutation


def evaluate(
    jobs: JobMatrix,
    order: Permutation,
    deadlines: Deadlines,
) -> ScheduleResult:
    """Simulate ``order`` on every machine and compute both objectives.

    A job starts on a machine once it has left the previous machine and the
    preceding job of ``order`` has left the current one.

    Args:
        jobs: Processing times, ``jobs[job_id - 1][machine]``.
        order: Permutation of 1-based job ids.
        deadlines: ``deadlines[job_id - 1]``.

    Returns:
        ScheduleResult with start/end matrices (machines x positions),
        makespan and total tardiness.

    Raises:
        ValueError: If ``order`` is not a permutation of the jobs or the
            deadlines do not match the number of jobs.
    """
    n = len(jobs)
    if len(deadlines) != n:
        raise ValueError(f"Expected {n} deadlines, got {len(deadlines)}")
    validate_permutation(order, n)
    m = len(jobs[0]) if n else 0

    job_begin = [[0] * n for _ in range(m)]
    job_end = [[0] * n for _ in range(m)]
    # completion time of each position on the previous machine
    ready = [0] * n
    for i in range(m):
        begin_row = job_begin[i]
        end_row = job_end[i]
        machine_free = 0
        for k in range(n):
            start = max(ready[k], machine_free)
            machine_free = start + jobs[order[k] - 1][i]
            begin_row[k] = start
            end_row[k] = machine_free
            ready[k] = machine_free

    t_sum = 0
    for k in range(n):
        late = ready[k] - deadlines[order[k] - 1]
        if late > 0:
            t_sum += late

    makespan = ready[n - 1] if n else 0
    return ScheduleResult(
        job_begin=job_begin,
        job_end=job_end,
        makespan=makespan,
        total_tardiness=t_sum,
    )


def schedule_span(jobs: JobMatrix, order: Permutation) -> int:
    """Makespan of ``order`` (same timing rule as ``evaluate``)."""
    validate_permutation(order, len(jobs))
    n = len(order)
    if n == 0:
        return 0
    ready = [0] * n
    for i in range(len(jobs[0])):
        machine_free = 0
        for k in range(n):
            machine_free = max(ready[k], machine_free) + jobs[order[k] - 1][i]
            ready[k] = machine_free
    return ready[n - 1]


def deadline_report(
    order: Permutation,
    result: ScheduleResult,
    deadlines: Deadlines,
) -> DeadlineReport:
    """Build the Ci / di / Li / Ti table for an evaluated order."""
    end_times = list(result.job_end[-1]) if result.job_end else [0] * len(order)
    job_deadlines = [deadlines[job_id - 1] for job_id in order]
    lateness = [c - d for c, d in zip(end_times, job_deadlines)]
    tardiness = [max(0, li) for li in lateness]
    return DeadlineReport(
        job_ids=list(order),
        end_times=end_times,
        deadlines=job_deadlines,
        lateness=lateness,
        tardiness=tardiness,
        total_lateness=sum(lateness),
        total_tardiness=sum(tardiness),
    )
