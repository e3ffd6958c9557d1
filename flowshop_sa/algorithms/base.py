"""Common structures and helper functions for search algorithms."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from flowshop_sa.models import Deadlines, JobMatrix, Permutation, ScheduleResult

logger = logging.getLogger("flowshop")

Evaluator = Callable[[JobMatrix, Permutation, Deadlines], ScheduleResult]
CostFunction = Callable[[ScheduleResult], int]


def makespan_cost(result: ScheduleResult) -> int:
    """Cmax objective."""
    return result.makespan


def tardiness_cost(result: ScheduleResult) -> int:
    """Total tardiness objective."""
    return result.total_tardiness


@dataclass
class SearchState:
    """Shared state for search algorithms."""

    base_order: Permutation
    base_cost: int
    best_order: Permutation
    best_cost: int
    cost_history: List[int] = field(default_factory=list)
    step: int = 0
    evaluations: int = 0

    def update_best(self) -> bool:
        """Promote the base to best when strictly better. Returns True if improved."""
        if self.base_cost < self.best_cost:
            self.best_cost = self.base_cost
            self.best_order = self.base_order.copy()
            logger.debug("[sa] new best=%d at step %d", self.best_cost, self.step)
            return True
        return False
