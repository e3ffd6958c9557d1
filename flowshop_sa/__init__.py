"""Core package for flow-shop simulated annealing experiments.

Exports base data structures, the objective evaluator and the searches.
"""

from flowshop_sa.algorithms import (  # noqa: F401
    simulated_annealing,
    simulated_annealing_cmax,
    simulated_annealing_tsum,
)
from flowshop_sa.cooling import cooling_strategy_name, temperature  # noqa: F401
from flowshop_sa.evaluation import deadline_report, evaluate, schedule_span  # noqa: F401
from flowshop_sa.models import (  # noqa: F401
    DeadlineReport,
    ScheduleResult,
    SearchFailure,
    SearchResult,
)

__all__ = [
    "DeadlineReport",
    "ScheduleResult",
    "SearchFailure",
    "SearchResult",
    "cooling_strategy_name",
    "deadline_report",
    "evaluate",
    "schedule_span",
    "simulated_annealing",
    "simulated_annealing_cmax",
    "simulated_annealing_tsum",
    "temperature",
]
