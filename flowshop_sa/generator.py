"""Random instance generation: job matrices, start orders and deadlines."""

import random
from typing import Optional

from flowshop_sa.models import Deadlines, JobMatrix, Permutation
from flowshop_sa.operations import create_random_permutation


def generate_jobs(
    jobs_num: int,
    machines_num: int,
    rng: Optional[random.Random] = None,
    low: int = 1,
    high: int = 8,
) -> JobMatrix:
    """Generate a ``jobs_num x machines_num`` matrix of durations in [low, high]."""
    if jobs_num < 1 or machines_num < 1:
        raise ValueError(
            f"jobs_num and machines_num must be positive (got {jobs_num}, {machines_num})"
        )
    if low < 1 or high < low:
        raise ValueError(f"Invalid processing time range [{low}, {high}]")
    if rng is None:
        rng = random.Random()
    return [[rng.randint(low, high) for _ in range(machines_num)] for _ in range(jobs_num)]


def generate_initial_order(jobs_num: int, rng: Optional[random.Random] = None) -> Permutation:
    """Random start order for the search."""
    if jobs_num < 1:
        raise ValueError(f"jobs_num must be positive (got {jobs_num})")
    if rng is None:
        rng = random.Random()
    return create_random_permutation(jobs_num, rng=rng)


def generate_deadlines(
    jobs_num: int,
    span: int,
    rng: Optional[random.Random] = None,
) -> Deadlines:
    """Draw one deadline per job from ``[span // 5, 2 * (span // 5))``.

    ``span`` is normally ``schedule_span`` of the unoptimised start order,
    so deadlines are tight relative to the baseline makespan.

    Raises:
        ValueError: If ``span < 5`` (empty window) or ``jobs_num < 1``.
    """
    if jobs_num < 1:
        raise ValueError(f"jobs_num must be positive (got {jobs_num})")
    window = span // 5
    if window < 1:
        raise ValueError(f"Schedule span {span} too short to derive deadlines (need >= 5)")
    if rng is None:
        rng = random.Random()
    return [rng.randrange(window) + window for _ in range(jobs_num)]
