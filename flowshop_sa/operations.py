"""Permutation utilities: creation, validation and the swap move.

Concepts
--------
Permutation
    A list of 1-based job ids in which every id ``1..jobs_number`` appears
    exactly once. The flow-shop model processes jobs in this order on every
    machine, so the permutation alone determines the schedule.
"""

import random
from typing import Optional

from flowshop_sa.models import Permutation


def create_base_permutation(jobs_number: int) -> Permutation:
    """Create the canonical order ``[1, 2, ..., jobs_number]``."""
    return list(range(1, jobs_number + 1))


def create_random_permutation(
    jobs_number: int,
    *,
    rng: Optional[random.Random] = None,
) -> Permutation:
    """Generate a uniformly shuffled order of ``1..jobs_number``.

    Args:
        jobs_number: Number of jobs.
        rng: Optional random.Random instance (for reproducibility). If
            None uses module-level random.
    """
    if rng is None:
        rng = random
    perm = create_base_permutation(jobs_number)
    rng.shuffle(perm)
    return perm


def validate_permutation(permutation: Permutation, jobs_number: int) -> bool:
    """Validate that ``permutation`` holds each job id exactly once.

    Returns:
        True if the permutation is valid (so it can be used inside
        assertions / conditional flows).

    Raises:
        ValueError: If the length is wrong, a job id is out of range or
            repeated.
    """
    if len(permutation) != jobs_number:
        raise ValueError(
            f"Permutation length {len(permutation)} does not match jobs number {jobs_number}"
        )
    seen = [False] * jobs_number
    for job_id in permutation:
        if not (1 <= job_id <= jobs_number):
            raise ValueError(f"Job id out of range: {job_id}")
        if seen[job_id - 1]:
            raise ValueError(f"Duplicate job id in permutation: {job_id}")
        seen[job_id - 1] = True
    return True


def swap_positions(permutation: Permutation, i: int, j: int) -> Permutation:
    """Return a copy of ``permutation`` with positions ``i`` and ``j`` swapped.

    ``i == j`` is allowed and yields an unchanged copy.

    Raises:
        IndexError: If either index is out of bounds.
    """
    n = len(permutation)
    if not (0 <= i < n and 0 <= j < n):
        raise IndexError("swap index out of range")
    newp = permutation[:]
    newp[i], newp[j] = newp[j], newp[i]
    return newp
