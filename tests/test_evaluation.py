"""Tests for the flow-shop objective evaluator."""

import random

import pytest

from flowshop_sa.evaluation import deadline_report, evaluate, schedule_span
from flowshop_sa.operations import create_random_permutation


def _random_orders(jobs_number: int, count: int, seed: int = 0) -> list[list[int]]:
    rng = random.Random(seed)
    return [create_random_permutation(jobs_number, rng=rng) for _ in range(count)]


def test_worked_example_timing(small_jobs) -> None:
    result = evaluate(small_jobs, [1, 2, 3], [100, 100, 100])
    assert result.job_end == [[3, 5, 9], [5, 8, 10]]
    assert result.job_begin == [[0, 3, 5], [3, 5, 9]]
    assert result.makespan == 10
    assert result.total_tardiness == 0


def test_worked_example_tardiness(small_jobs) -> None:
    result = evaluate(small_jobs, [1, 2, 3], [6, 6, 6])
    report = deadline_report([1, 2, 3], result, [6, 6, 6])
    assert report.tardiness == [0, 2, 4]
    assert report.lateness == [-1, 2, 4]
    assert report.total_tardiness == 6
    assert report.total_lateness == 5
    assert result.total_tardiness == 6


def test_deadlines_follow_job_ids(small_jobs) -> None:
    # order [3, 1, 2]: end times on last machine are 5, 9, 12
    result = evaluate(small_jobs, [3, 1, 2], [9, 100, 1])
    assert result.job_end[-1] == [5, 9, 12]
    # job3 -> d=1 (T=4), job1 -> d=9 (T=0), job2 -> d=100 (T=0)
    assert result.total_tardiness == 4
    report = deadline_report([3, 1, 2], result, [9, 100, 1])
    assert report.job_ids == [3, 1, 2]
    assert report.deadlines == [1, 9, 100]
    assert report.tardiness == [4, 0, 0]


def test_makespan_lower_bounds(random_jobs) -> None:
    deadlines = [0] * len(random_jobs)
    longest_job = max(sum(row) for row in random_jobs)
    machines = len(random_jobs[0])
    for order in _random_orders(len(random_jobs), 30):
        result = evaluate(random_jobs, order, deadlines)
        assert result.makespan >= longest_job
        for i in range(machines):
            assert result.makespan >= sum(random_jobs[j - 1][i] for j in order)


def test_tardiness_per_job(random_jobs) -> None:
    rng = random.Random(3)
    for order in _random_orders(len(random_jobs), 20, seed=1):
        deadlines = [rng.randint(1, 60) for _ in random_jobs]
        result = evaluate(random_jobs, order, deadlines)
        expected = 0
        for k, job_id in enumerate(order):
            end = result.job_end[-1][k]
            d = deadlines[job_id - 1]
            expected += 0 if d >= end else end - d
        assert result.total_tardiness == expected


def test_schedule_span_matches_evaluate(random_jobs) -> None:
    rng = random.Random(5)
    for order in _random_orders(len(random_jobs), 30, seed=2):
        deadlines = [rng.randint(1, 50) for _ in random_jobs]
        assert schedule_span(random_jobs, order) == evaluate(random_jobs, order, deadlines).makespan
        assert schedule_span(random_jobs, order) == evaluate(
            random_jobs, order, [10**6] * len(random_jobs)
        ).makespan


def test_schedule_span_worked_example(small_jobs) -> None:
    assert schedule_span(small_jobs, [1, 2, 3]) == 10


def test_evaluate_is_idempotent(random_jobs) -> None:
    order = _random_orders(len(random_jobs), 1, seed=9)[0]
    deadlines = [20] * len(random_jobs)
    first = evaluate(random_jobs, order, deadlines)
    second = evaluate(random_jobs, order, deadlines)
    assert first == second
    assert first is not second


def test_single_machine_and_single_job() -> None:
    jobs = [[4], [2], [5]]
    result = evaluate(jobs, [2, 3, 1], [1, 1, 1])
    assert result.job_end == [[2, 7, 11]]
    assert result.makespan == 11
    assert evaluate([[1, 2, 3]], [1], [0]).makespan == 6


@pytest.mark.parametrize("bad_order", [[1, 1, 2], [1, 2], [0, 1, 2], [1, 2, 4], [1, 2, 3, 3]])
def test_invalid_order_rejected(small_jobs, bad_order) -> None:
    with pytest.raises(ValueError):
        evaluate(small_jobs, bad_order, [6, 6, 6])
    with pytest.raises(ValueError):
        schedule_span(small_jobs, bad_order)


def test_deadline_length_mismatch_rejected(small_jobs) -> None:
    with pytest.raises(ValueError):
        evaluate(small_jobs, [1, 2, 3], [6, 6])


def test_schedule_span_empty_order_rejected() -> None:
    with pytest.raises(ValueError):
        evaluate([[1, 2]], [], [5])
    with pytest.raises(ValueError):
        schedule_span([[1, 2]], [])
    assert schedule_span([], []) == 0
