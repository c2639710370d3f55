"""Build a contribution schedule and solve its rate in one call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import logging

from investcalc.config import DEFAULT_GUESS, SolverSettings
from investcalc.conventions.types import Cadence
from investcalc.schedule.generator import InvalidScheduleError, build_schedule
from investcalc.utils.date import to_date

from .summary import summarize
from .types import CashFlow, FlowSummary, ScheduleParams, XirrError, XirrResult
from .xirr import solve

logger = logging.getLogger(__name__)

_EMPTY_SUMMARY = FlowSummary(0.0, 0.0, 0.0, None)


@dataclass(frozen=True)
class Evaluation:
    """Everything a calculator view needs for one set of inputs."""

    flows: List[CashFlow]
    result: XirrResult
    summary: FlowSummary


def _rejected(error: XirrError) -> Evaluation:
    return Evaluation([], XirrResult.failed(error), _EMPTY_SUMMARY)


def evaluate(
    params: ScheduleParams,
    initial_guess: float = DEFAULT_GUESS,
    *,
    settings: Optional[SolverSettings] = None,
) -> Evaluation:
    """Build the schedule for ``params`` and solve it.

    Bad inputs come back as a failed result with an empty flow list:

    - ``INVALID_DATE``: start or end cannot be read as a date
    - ``INVALID_CADENCE``: the cadence name is not recognised
    - ``INVALID_DATE_ORDER``: the end date is not after the start date
    - ``INVALID_AMOUNT``: an amount is non-positive or non-finite
    """
    try:
        start = to_date(params.start)
        end = to_date(params.end)
    except (TypeError, ValueError) as exc:
        logger.debug("Rejected schedule dates: %s", exc)
        return _rejected(XirrError.INVALID_DATE)
    try:
        cadence = Cadence.parse(params.cadence)
    except ValueError as exc:
        logger.debug("Rejected schedule cadence: %s", exc)
        return _rejected(XirrError.INVALID_CADENCE)
    if start >= end:
        return _rejected(XirrError.INVALID_DATE_ORDER)
    try:
        flows = build_schedule(
            start,
            end,
            cadence,
            params.recurring_amount,
            params.maturity_amount,
        )
    except InvalidScheduleError as exc:
        logger.debug("Rejected schedule inputs: %s", exc)
        return _rejected(XirrError.INVALID_AMOUNT)

    return Evaluation(flows, solve(flows, initial_guess, settings=settings), summarize(flows))
