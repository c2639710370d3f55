"""Annualized rate of return (XIRR) for dated cash flows.

The rate ``r`` solves

    NPV(r) = sum(amount_i / (1 + r) ** t_i) = 0

where ``t_i`` is the year fraction (ACT/365F by default) from the earliest
flow date to flow ``i``. Newton-Raphson iteration uses the analytic
derivative

    NPV'(r) = sum(-amount_i * t_i / (1 + r) ** (t_i + 1))

Failures come back as ``XirrResult`` error codes; ``solve`` does not raise for
degenerate flow lists.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import logging

import numpy as np

from investcalc.config import DEFAULT_GUESS, DEFAULT_SETTINGS, SolverSettings
from investcalc.conventions.daycount import get_day_count
from investcalc.utils.date import to_date
from investcalc.utils.rootfinding import (
    DomainError,
    RootFindingError,
    newton,
    newton_with_bisect,
)

from .types import CashFlow, XirrError, XirrResult, XirrSolveError

logger = logging.getLogger(__name__)

FlowLike = Union[CashFlow, Tuple[date, float]]


def as_cashflows(flows: Iterable[FlowLike]) -> List[CashFlow]:
    out: List[CashFlow] = []
    for flow in flows:
        if isinstance(flow, CashFlow):
            out.append(flow)
        else:
            dt, amount = flow
            out.append(CashFlow(to_date(dt), float(amount)))
    return out


def year_fractions(
    flows: Sequence[CashFlow], day_count: str = "ACT/365F"
) -> np.ndarray:
    """Year fractions from the earliest flow date to each flow, in input order.

    Raises ``ValueError`` if the convention cannot handle a date.
    """
    if not flows:
        return np.array([], dtype=float)
    year_fraction = get_day_count(day_count)
    anchor = min(flow.date for flow in flows)
    return np.array([year_fraction(anchor, flow.date) for flow in flows], dtype=float)


def _npv_and_derivative(
    amounts: np.ndarray, times: np.ndarray, rate: float
) -> Tuple[float, float]:
    base = 1.0 + rate
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        discount = np.power(base, -times)
        value = float(np.sum(amounts * discount))
        deriv = float(np.sum(-amounts * times * discount / base))
    return value, deriv


def npv(
    flows: Iterable[FlowLike], rate: float, day_count: str = "ACT/365F"
) -> float:
    """Net present value of ``flows`` at ``rate``, discounted to the earliest date."""
    if 1.0 + rate <= 0.0:
        raise ValueError("rate must be greater than -100%")
    cashflows = as_cashflows(flows)
    if not cashflows:
        return 0.0
    amounts = np.array([flow.amount for flow in cashflows], dtype=float)
    times = year_fractions(cashflows, day_count)
    return _npv_and_derivative(amounts, times, rate)[0]


def solve(
    flows: Iterable[FlowLike],
    initial_guess: float = DEFAULT_GUESS,
    *,
    settings: Optional[SolverSettings] = None,
) -> XirrResult:
    """Solve for the annualized rate that zeroes the NPV of ``flows``.

    Flows may be ``CashFlow`` instances or ``(date, amount)`` pairs in any
    order. Returns a converged ``XirrResult`` or one carrying:

    - ``INSUFFICIENT_FLOWS``: fewer than two flows
    - ``INVALID_AMOUNT``: an amount is NaN or infinite
    - ``NO_SIGN_CHANGE``: no positive or no negative amount
    - ``INVALID_DATE``: the day count convention rejects a flow date
    - ``DOMAIN_ERROR``: an iterate (or the guess) put ``1 + r`` at or below zero
    - ``DID_NOT_CONVERGE``: all flows on one date, a zero or non-finite
      derivative, an iterate beyond ``settings.max_abs_rate``, or the
      iteration cap was reached
    """
    settings = settings or DEFAULT_SETTINGS
    cashflows = as_cashflows(flows)
    if len(cashflows) < 2:
        return XirrResult.failed(XirrError.INSUFFICIENT_FLOWS)

    amounts = np.array([flow.amount for flow in cashflows], dtype=float)
    if not np.all(np.isfinite(amounts)):
        return XirrResult.failed(XirrError.INVALID_AMOUNT)
    if not (np.any(amounts > 0.0) and np.any(amounts < 0.0)):
        return XirrResult.failed(XirrError.NO_SIGN_CHANGE)

    try:
        times = year_fractions(cashflows, settings.day_count)
    except ValueError as exc:
        logger.debug("Cannot annualize flow dates: %s", exc)
        return XirrResult.failed(XirrError.INVALID_DATE)
    if not np.any(times != 0.0):
        # NPV is constant in the rate when every flow shares one date
        return XirrResult.failed(XirrError.DID_NOT_CONVERGE)

    def func_and_deriv(rate: float) -> Tuple[float, float]:
        return _npv_and_derivative(amounts, times, rate)

    options = dict(
        tol_step=settings.tolerance,
        max_iter=settings.max_iterations,
        max_abs=settings.max_abs_rate,
        floor=-1.0,
    )
    try:
        if settings.bracket_fallback:
            result = newton_with_bisect(
                func_and_deriv,
                initial_guess,
                bracket=(settings.bracket_lower, settings.bracket_upper),
                **options,
            )
        else:
            result = newton(func_and_deriv, initial_guess, **options)
    except DomainError as exc:
        logger.debug("XIRR domain error: %s", exc)
        return XirrResult.failed(XirrError.DOMAIN_ERROR, exc.iterations)
    except RootFindingError as exc:
        logger.debug("XIRR did not converge (%s): %s", exc.state.value, exc)
        return XirrResult.failed(XirrError.DID_NOT_CONVERGE, exc.iterations)

    logger.debug(
        "XIRR solved after %s iterations via %s: %s",
        result.iterations,
        result.method,
        result.root,
    )
    return XirrResult.converged(result.root, result.iterations)


def xirr(
    flows: Iterable[FlowLike],
    initial_guess: float = DEFAULT_GUESS,
    *,
    settings: Optional[SolverSettings] = None,
) -> float:
    """Like ``solve`` but returns the rate directly.

    Raises:
        XirrSolveError: carrying the ``XirrError`` code when no rate is found
    """
    result = solve(flows, initial_guess, settings=settings)
    if not result.ok:
        raise XirrSolveError(result.error, f"XIRR failed: {result.error.value}")
    return result.rate
