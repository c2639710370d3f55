"""Recurring-contribution schedule construction."""

from __future__ import annotations

import math
from datetime import date
from typing import List

import logging

from investcalc.conventions.types import Cadence
from investcalc.utils.date import DateLike, to_date
from investcalc.valuation.types import CashFlow

logger = logging.getLogger(__name__)


class InvalidScheduleError(ValueError):
    """Raised when schedule amounts cannot produce a meaningful rate."""


def _validate_amount(name: str, value: float) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidScheduleError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(amount) or amount <= 0.0:
        raise InvalidScheduleError(f"{name} must be positive and finite, got {value!r}")
    return amount


def contribution_dates(
    start: DateLike, end: DateLike, cadence: Cadence | str
) -> List[date]:
    """Return contribution dates from ``start`` strictly before ``end``.

    Step k is ``start + k * step`` rather than the previous date plus one step,
    so month-end clamping never accumulates: a Jan 31 start gives Feb 28/29,
    Mar 31, Apr 30, ...
    """
    start_date = to_date(start)
    end_date = to_date(end)
    cadence = Cadence.parse(cadence)
    dates: List[date] = []
    if start_date >= end_date:
        return dates

    count = 0
    current = start_date
    while current < end_date:
        dates.append(current)
        count += 1
        current = cadence.shift(start_date, count)
    return dates


def build_schedule(
    start: DateLike,
    end: DateLike,
    cadence: Cadence | str,
    recurring_amount: float,
    maturity_amount: float,
) -> List[CashFlow]:
    """Build signed cash flows for a recurring investment held to maturity.

    One ``-recurring_amount`` flow per contribution date strictly before
    ``end``, then ``+maturity_amount`` dated exactly at ``end``. Returns an
    empty list when ``start >= end``.

    Raises:
        InvalidScheduleError: If either amount is non-positive or non-finite
        ValueError / TypeError: If a date or cadence cannot be interpreted
    """
    recurring = _validate_amount("recurring_amount", recurring_amount)
    maturity_value = _validate_amount("maturity_amount", maturity_amount)
    maturity = to_date(end)

    dates = contribution_dates(start, maturity, cadence)
    if not dates:
        logger.debug("Empty schedule: start %s is not before end %s", start, maturity)
        return []

    flows = [CashFlow(dt, -recurring) for dt in dates]
    flows.append(CashFlow(maturity, maturity_value))
    logger.debug(
        "Built %s contributions from %s to %s (%s)",
        len(dates),
        dates[0],
        maturity,
        Cadence.parse(cadence).name,
    )
    return flows
