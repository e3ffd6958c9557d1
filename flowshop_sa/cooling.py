"""Cooling strategies for simulated annealing.

Every strategy maps ``(t0, alpha, t)`` to a temperature, where ``t0`` is the
initial temperature, ``alpha`` the cooling rate (conventionally between 0.8
and 0.9, not enforced) and ``t`` the global step counter. The non-monotonic
strategy additionally scales the linear schedule by the relative swing
between the current and the best cost.

Strategies are selected by integer id (1..5) through ``COOLING_STRATEGIES``.
"""

import math
from dataclasses import dataclass
from typing import Callable


def temp_lin_mult(t0: float, alpha: float, t: int) -> float:
    """Linear multiplicative cooling: ``t0 / (1 + alpha * t)``."""
    return t0 / (1 + alpha * t)


def temp_lin_mult2(t0: float, alpha: float, t: int) -> float:
    """Quadratic multiplicative cooling: ``t0 / (1 + alpha * t^2)``."""
    return t0 / (1 + alpha * (t * t))


def temp_exp_mult(t0: float, alpha: float, t: int) -> float:
    """Exponential multiplicative cooling: ``t0 * alpha^t``."""
    return t0 * alpha**t


def temp_log_mult(t0: float, alpha: float, t: int) -> float:
    """Logarithmical multiplicative cooling.

    The log term is ``log(1) == 0`` so the schedule reduces to
    ``t0 / (1 + t)`` and ignores ``alpha``. Kept in this exact form so runs
    stay comparable with earlier results.
    """
    return t0 / (1 + alpha * math.log(1) + t)


def temp_non_monotonic(
    best_cost: float, current_cost: float, t0: float, alpha: float, t: int
) -> float:
    """Linear schedule scaled by ``1 + (current - best) / current``.

    Raises:
        ZeroDivisionError: If ``current_cost`` is zero.
    """
    return (1 + (current_cost - best_cost) / current_cost) * temp_lin_mult(t0, alpha, t)


@dataclass(frozen=True)
class CoolingStrategy:
    """Registry entry: id, display name and temperature function."""

    strategy_id: int
    name: str
    func: Callable[..., float]
    cost_aware: bool = False

    def temperature(
        self, best_cost: float, current_cost: float, t0: float, alpha: float, t: int
    ) -> float:
        if self.cost_aware:
            return self.func(best_cost, current_cost, t0, alpha, t)
        return self.func(t0, alpha, t)


COOLING_STRATEGIES: dict[int, CoolingStrategy] = {
    1: CoolingStrategy(1, "Linear Multiplicative Type 1", temp_lin_mult),
    2: CoolingStrategy(2, "Linear Multiplicative Type 2", temp_lin_mult2),
    3: CoolingStrategy(3, "Exponential Multiplicative", temp_exp_mult),
    4: CoolingStrategy(4, "Logarithmical Multiplicative", temp_log_mult),
    5: CoolingStrategy(5, "Non-monotonic", temp_non_monotonic, cost_aware=True),
}


def get_cooling_strategy(strategy_id: int) -> CoolingStrategy:
    """Look up a strategy by id.

    Raises:
        ValueError: If ``strategy_id`` is not one of 1..5.
    """
    try:
        return COOLING_STRATEGIES[strategy_id]
    except (KeyError, TypeError):
        valid = ", ".join(str(k) for k in COOLING_STRATEGIES)
        raise ValueError(
            f"Unknown cooling strategy: {strategy_id!r} (expected one of {valid})"
        ) from None


def cooling_strategy_name(strategy_id: int) -> str:
    return get_cooling_strategy(strategy_id).name


def temperature(
    strategy_id: int,
    best_cost: float,
    current_cost: float,
    t0: float,
    alpha: float,
    t: int,
) -> float:
    """Temperature of strategy ``strategy_id`` at step ``t``.

    ``best_cost`` and ``current_cost`` are only read by the non-monotonic
    strategy (5).
    """
    return get_cooling_strategy(strategy_id).temperature(best_cost, current_cost, t0, alpha, t)


def acceptance_probability(best_cost: float, candidate_cost: float, temp: float) -> float:
    """Metropolis acceptance probability ``exp(-(candidate - best) / temp)``.

    Metropolis orientation: candidate minus best. With the operands swapped
    every worse candidate would get a probability of at least one.

    For a candidate that is not better than ``best_cost`` the result lies in
    (0, 1]; it shrinks as the degradation grows or the temperature drops.

    Raises:
        ZeroDivisionError: If ``temp`` is zero.
        OverflowError: If the exponent is too large to represent.
    """
    return math.exp(-(candidate_cost - best_cost) / temp)
