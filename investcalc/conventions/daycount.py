"""Year-fraction conventions for annualizing cash-flow dates.

ACT/365F is computed directly from the day difference and works for any date.
The alternative bases used to reconcile against other XIRR implementations
delegate to QuantLib day counters, which only accept years 1901-2199.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict

import QuantLib as ql

from investcalc.utils.date import DateLike, to_date

DayCountFunc = Callable[[DateLike, DateLike], float]


def act_365f(start: DateLike, end: DateLike) -> float:
    """Actual days between the dates over 365 (negative if ``end`` precedes ``start``)."""
    return float((to_date(end) - to_date(start)).days) / 365.0


def _ql_date(value: date) -> ql.Date:
    return ql.Date(value.day, value.month, value.year)


def _quantlib_basis(name: str, counter: ql.DayCounter) -> DayCountFunc:
    def year_fraction(start: DateLike, end: DateLike) -> float:
        try:
            return counter.yearFraction(_ql_date(to_date(start)), _ql_date(to_date(end)))
        except RuntimeError as exc:
            raise ValueError(f"{name} cannot handle {start} -> {end}: {exc}") from exc

    year_fraction.__name__ = name
    return year_fraction


_ACT_360 = _quantlib_basis("ACT/360", ql.Actual360())
_ACT_ACT = _quantlib_basis("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))
_THIRTY_360 = _quantlib_basis("30/360", ql.Thirty360(ql.Thirty360.BondBasis))

_REGISTRY: Dict[str, DayCountFunc] = {
    "ACT/365F": act_365f,
    "ACT/365": act_365f,
    "ACT/360": _ACT_360,
    "ACT/ACT": _ACT_ACT,
    "ACT/ACT ISDA": _ACT_ACT,
    "30/360": _THIRTY_360,
}


def get_day_count(name: str) -> DayCountFunc:
    """Return the year-fraction function registered under ``name`` (case-insensitive).

    QuantLib-backed functions raise ``ValueError`` for dates QuantLib rejects.
    """
    try:
        return _REGISTRY[name.upper()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown day count convention: {name}. Available: {sorted(_REGISTRY)}"
        ) from exc
