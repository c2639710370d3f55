"""Recurring-investment schedules and annualized return (XIRR) solving.

Key modules:
- schedule: contribution schedule construction
- valuation: XIRR solver, NPV, summaries and the build-and-solve pipeline
- conventions: cadences and day count conventions
- config: solver defaults
"""

import logging as _logging

from .config import DEFAULT_GUESS, DEFAULT_SETTINGS, SolverSettings
from .conventions import Cadence
from .valuation import (
    CashFlow,
    FlowSummary,
    ScheduleParams,
    XirrError,
    XirrResult,
    XirrSolveError,
    npv,
    solve,
    summarize,
    xirr,
)
from .schedule import InvalidScheduleError, build_schedule, contribution_dates
from .valuation.pipeline import Evaluation, evaluate

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "__version__",
    "Cadence",
    "CashFlow",
    "DEFAULT_GUESS",
    "DEFAULT_SETTINGS",
    "Evaluation",
    "FlowSummary",
    "InvalidScheduleError",
    "ScheduleParams",
    "SolverSettings",
    "XirrError",
    "XirrResult",
    "XirrSolveError",
    "build_schedule",
    "contribution_dates",
    "evaluate",
    "npv",
    "solve",
    "summarize",
    "xirr",
]
