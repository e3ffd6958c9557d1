"""Search algorithms module for flow shop scheduling problem.

Contains:
- Simulated Annealing (SA), generic over the objective, with Cmax and
  total-tardiness entry points.
"""

from flowshop_sa.algorithms.base import makespan_cost, tardiness_cost
from flowshop_sa.algorithms.sa import (
    simulated_annealing,
    simulated_annealing_cmax,
    simulated_annealing_tsum,
)

__all__ = [
    "makespan_cost",
    "simulated_annealing",
    "simulated_annealing_cmax",
    "simulated_annealing_tsum",
    "tardiness_cost",
]
