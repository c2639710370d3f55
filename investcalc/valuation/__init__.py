"""Cash-flow types, the XIRR solver and summary tables.

``pipeline`` is not re-exported here because it depends on
``investcalc.schedule``, which itself imports ``valuation.types``.
"""

from .summary import cashflow_frame, summarize, wealth_frame
from .types import (
    CashFlow,
    FlowSummary,
    ScheduleParams,
    XirrError,
    XirrResult,
    XirrSolveError,
)
from .xirr import npv, solve, xirr, year_fractions

__all__ = [
    "CashFlow",
    "FlowSummary",
    "ScheduleParams",
    "XirrError",
    "XirrResult",
    "XirrSolveError",
    "cashflow_frame",
    "npv",
    "solve",
    "summarize",
    "wealth_frame",
    "xirr",
    "year_fractions",
]
