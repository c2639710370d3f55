"""Aggregates and chart tables derived from a cash-flow list."""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from investcalc.conventions.daycount import get_day_count

from .types import FlowSummary
from .xirr import FlowLike, as_cashflows, year_fractions


def summarize(flows: Iterable[FlowLike]) -> FlowSummary:
    """Total invested, total redeemed and net profit over ``flows``."""
    cashflows = as_cashflows(flows)
    invested = sum(-flow.amount for flow in cashflows if flow.amount < 0)
    redeemed = sum(flow.amount for flow in cashflows if flow.amount > 0)
    net = redeemed - invested
    return FlowSummary(
        total_invested=float(invested),
        total_redeemed=float(redeemed),
        net_profit=float(net),
        absolute_return=float(net / invested) if invested > 0 else None,
    )


def cashflow_frame(
    flows: Iterable[FlowLike], day_count: str = "ACT/365F"
) -> pd.DataFrame:
    """Tabulate flows sorted by date.

    Columns: date, amount, year_fraction (from the first date) and
    cumulative_invested (running total of outflows, as a positive number).
    """
    cashflows = sorted(as_cashflows(flows))
    amounts = np.array([flow.amount for flow in cashflows], dtype=float)
    return pd.DataFrame(
        {
            "date": [flow.date for flow in cashflows],
            "amount": amounts,
            "year_fraction": year_fractions(cashflows, day_count),
            "cumulative_invested": np.cumsum(np.where(amounts < 0, -amounts, 0.0)),
        }
    )


def wealth_frame(
    flows: Iterable[FlowLike], rate: float, day_count: str = "ACT/365F"
) -> pd.DataFrame:
    """Growth of the contributions at ``rate``, one row per outflow date.

    ``invested`` is the running total paid in; ``value`` is every contribution
    made so far compounded at ``rate`` up to that row's date.
    """
    if 1.0 + rate <= 0.0:
        raise ValueError("rate must be greater than -100%")
    year_fraction = get_day_count(day_count)
    contributions = sorted(flow for flow in as_cashflows(flows) if flow.amount < 0)
    base = 1.0 + rate

    rows = []
    invested = 0.0
    for idx, flow in enumerate(contributions):
        invested += -flow.amount
        value = sum(
            -prior.amount * base ** year_fraction(prior.date, flow.date)
            for prior in contributions[: idx + 1]
        )
        rows.append({"date": flow.date, "invested": invested, "value": value})
    return pd.DataFrame(rows, columns=["date", "invested", "value"])
