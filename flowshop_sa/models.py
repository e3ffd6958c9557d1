"""Core data structures for permutation flow-shop runs.

This module defines:
    JobMatrix      -- processing times, ``jobs[job_id - 1][machine]``.
    Permutation    -- order of 1-based job ids, identical on every machine.
    Deadlines      -- one deadline per job id, ``deadlines[job_id - 1]``.
    ScheduleResult -- immutable outcome of a single evaluation.
    DeadlineReport -- per-job lateness / tardiness table.
    SearchFailure  -- where and why an annealing run stopped early.
    SearchResult   -- best order found plus run statistics.
"""

from dataclasses import dataclass, field
from typing import Optional

JobMatrix = list[list[int]]  # jobs_num x machines_num processing times
Permutation = list[int]  # 1-based job ids
Deadlines = list[int]  # deadlines[job_id - 1]


@dataclass(frozen=True)
class ScheduleResult:
    """Timing of one job order on all machines.

    Attributes:
        job_begin: ``job_begin[machine][k]`` start time of the k-th job of the
            evaluated order on ``machine``.
        job_end: ``job_end[machine][k]`` completion time, same indexing.
        makespan: Completion time of the last job on the last machine (Cmax).
        total_tardiness: Sum of ``max(0, C_j - d_j)`` over all jobs.
    """

    job_begin: list[list[int]]
    job_end: list[list[int]]
    makespan: int
    total_tardiness: int


@dataclass(frozen=True)
class DeadlineReport:
    """Lateness table for a scheduled order.

    All lists follow the schedule order (k-th entry describes the k-th job
    processed). Lateness may be negative; tardiness is floored at zero.
    """

    job_ids: list[int]
    end_times: list[int]
    deadlines: list[int]
    lateness: list[int]
    tardiness: list[int]
    total_lateness: int
    total_tardiness: int


@dataclass(frozen=True)
class SearchFailure:
    """Arithmetic fault that cut an annealing run short."""

    step: int
    total_steps: int
    reason: str


@dataclass
class SearchResult:
    """Outcome of one annealing run.

    ``best_order`` is always usable, also when ``failure`` is set.
    """

    best_order: Permutation
    best_cost: int
    evaluations: int
    steps: int
    cost_history: list[int] = field(default_factory=list)
    failure: Optional[SearchFailure] = None

    @property
    def aborted(self) -> bool:
        return self.failure is not None
