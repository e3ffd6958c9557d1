"""Simulated Annealing for the permutation flow shop (Cmax / total tardiness)."""

import logging
import random
from typing import Optional

from flowshop_sa.algorithms.base import (
    CostFunction,
    Evaluator,
    SearchState,
    makespan_cost,
    tardiness_cost,
)
from flowshop_sa.cooling import acceptance_probability, get_cooling_strategy
from flowshop_sa.evaluation import evaluate
from flowshop_sa.models import (
    Deadlines,
    JobMatrix,
    Permutation,
    SearchFailure,
    SearchResult,
)
from flowshop_sa.operations import swap_positions, validate_permutation

logger = logging.getLogger("flowshop")

DEFAULT_ALPHA = 0.8
DEFAULT_NEIGHBORS = 100


def simulated_annealing(
    jobs: JobMatrix,
    initial_order: Permutation,
    deadlines: Deadlines,
    cost: CostFunction,
    iterations: int,
    neighbors: int = DEFAULT_NEIGHBORS,
    initial_temp: float = 100.0,
    cooling_strategy: int = 1,
    rng: Optional[random.Random] = None,
    evaluator: Evaluator = evaluate,
    alpha: float = DEFAULT_ALPHA,
) -> SearchResult:
    """Simulated Annealing with random pairwise-swap neighbours.

    Each of ``iterations`` rounds samples ``neighbors`` swaps of the current
    base order. A strictly better neighbour replaces the round's best
    neighbour; otherwise it is accepted with the Metropolis probability at
    the temperature given by ``cooling_strategy``. The round's best neighbour
    becomes the next base and the historical best only ever improves.

    Parameters:
        jobs: jobs_num x machines_num processing times
        initial_order: start permutation (1-based job ids)
        deadlines: deadline per job id
        cost: extracts the objective from a ScheduleResult
        iterations: number of outer rounds
        neighbors: neighbours sampled per round
        initial_temp: t0 of the cooling schedule
        cooling_strategy: cooling strategy id (1..5)
        rng: random source; a fresh unseeded one when None
        evaluator: objective evaluator (injectable for tests)
        alpha: cooling rate

    Returns:
        SearchResult with the best order. An arithmetic fault (overflow,
        division by zero) stops the run early; the result then carries the
        best order found so far and ``failure`` with the step reached.

    Raises:
        ValueError: On invalid arguments (checked before the search starts).
    """
    strategy = get_cooling_strategy(cooling_strategy)
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0 (got {iterations})")
    if neighbors < 1:
        raise ValueError(f"neighbors must be >= 1 (got {neighbors})")
    if len(jobs) < 1:
        raise ValueError("jobs must hold at least one job")
    n = len(initial_order)
    validate_permutation(initial_order, len(jobs))
    if rng is None:
        rng = random.Random()

    total_steps = iterations * neighbors
    start_order = list(initial_order)
    start_cost = cost(evaluator(jobs, start_order, deadlines))
    state = SearchState(
        base_order=start_order,
        base_cost=start_cost,
        best_order=start_order.copy(),
        best_cost=start_cost,
        cost_history=[start_cost],
        evaluations=1,
    )
    logger.info(
        "[sa] start strategy=%s t0=%s iterations=%d neighbors=%d cost=%d",
        strategy.name,
        initial_temp,
        iterations,
        neighbors,
        start_cost,
    )

    failure = None
    try:
        for _ in range(iterations):
            round_order = state.base_order
            round_cost = state.base_cost
            for _ in range(neighbors):
                state.step += 1
                a = rng.randrange(n)
                b = rng.randrange(n)
                neighbor = swap_positions(state.base_order, a, b)
                neighbor_cost = cost(evaluator(jobs, neighbor, deadlines))
                state.evaluations += 1
                if neighbor_cost < round_cost:
                    round_order, round_cost = neighbor, neighbor_cost
                    continue
                temp = strategy.temperature(
                    round_cost, neighbor_cost, initial_temp, alpha, state.step
                )
                prob = acceptance_probability(round_cost, neighbor_cost, temp)
                if rng.randrange(99) < prob * 100:
                    round_order, round_cost = neighbor, neighbor_cost
            state.base_order = round_order
            state.base_cost = round_cost
            state.cost_history.append(round_cost)
            state.update_best()
    except ArithmeticError as e:
        failure = SearchFailure(step=state.step, total_steps=total_steps, reason=str(e))
        logger.warning(
            "[sa] arithmetic error - exited at %d/%d: %s", state.step, total_steps, e
        )

    logger.info(
        "[sa] done best=%d steps=%d/%d evals=%d",
        state.best_cost,
        state.step,
        total_steps,
        state.evaluations,
    )
    return SearchResult(
        best_order=state.best_order,
        best_cost=state.best_cost,
        evaluations=state.evaluations,
        steps=state.step,
        cost_history=state.cost_history,
        failure=failure,
    )


def simulated_annealing_cmax(
    jobs: JobMatrix,
    initial_order: Permutation,
    deadlines: Deadlines,
    iterations: int,
    neighbors: int = DEFAULT_NEIGHBORS,
    initial_temp: float = 100.0,
    cooling_strategy: int = 1,
    rng: Optional[random.Random] = None,
    evaluator: Evaluator = evaluate,
) -> SearchResult:
    """Minimise the makespan (Cmax)."""
    return simulated_annealing(
        jobs,
        initial_order,
        deadlines,
        makespan_cost,
        iterations,
        neighbors=neighbors,
        initial_temp=initial_temp,
        cooling_strategy=cooling_strategy,
        rng=rng,
        evaluator=evaluator,
    )


def simulated_annealing_tsum(
    jobs: JobMatrix,
    initial_order: Permutation,
    deadlines: Deadlines,
    iterations: int,
    neighbors: int = DEFAULT_NEIGHBORS,
    initial_temp: float = 100.0,
    cooling_strategy: int = 1,
    rng: Optional[random.Random] = None,
    evaluator: Evaluator = evaluate,
) -> SearchResult:
    """Minimise the total tardiness (sum of Ti)."""
    return simulated_annealing(
        jobs,
        initial_order,
        deadlines,
        tardiness_cost,
        iterations,
        neighbors=neighbors,
        initial_temp=initial_temp,
        cooling_strategy=cooling_strategy,
        rng=rng,
        evaluator=evaluator,
    )
