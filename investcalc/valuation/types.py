"""Data structures for cash-flow schedules and rate-of-return results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from investcalc.conventions.types import Cadence


@dataclass(frozen=True, order=True)
class CashFlow:
    """A dated, signed amount. Outflows are negative, inflows positive."""

    date: date
    amount: float


@dataclass(frozen=True)
class ScheduleParams:
    """Inputs for a recurring-contribution schedule.

    Attributes:
        start: First contribution date
        end: Maturity date, carrying the redemption flow
        cadence: Interval between contributions
        recurring_amount: Amount paid in on each contribution date (positive)
        maturity_amount: Amount received at maturity (positive)
    """

    start: date
    end: date
    cadence: Cadence
    recurring_amount: float
    maturity_amount: float


class XirrError(Enum):
    """Reasons a rate could not be produced."""

    INSUFFICIENT_FLOWS = "INSUFFICIENT_FLOWS"
    NO_SIGN_CHANGE = "NO_SIGN_CHANGE"
    INVALID_DATE_ORDER = "INVALID_DATE_ORDER"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CADENCE = "INVALID_CADENCE"
    DID_NOT_CONVERGE = "DID_NOT_CONVERGE"
    DOMAIN_ERROR = "DOMAIN_ERROR"


@dataclass(frozen=True)
class XirrResult:
    """Outcome of a solve: a converged rate or an error code, never both."""

    rate: Optional[float] = None
    error: Optional[XirrError] = None
    iterations: int = 0

    def __post_init__(self) -> None:
        if (self.rate is None) == (self.error is None):
            raise ValueError("XirrResult needs exactly one of rate or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def converged(cls, rate: float, iterations: int = 0) -> "XirrResult":
        return cls(rate=float(rate), iterations=iterations)

    @classmethod
    def failed(cls, error: XirrError, iterations: int = 0) -> "XirrResult":
        return cls(error=error, iterations=iterations)


class XirrSolveError(ValueError):
    """Raised by ``xirr`` when no rate can be produced."""

    def __init__(self, code: XirrError, message: str = ""):
        super().__init__(message or code.value)
        self.code = code


@dataclass(frozen=True)
class FlowSummary:
    """Aggregates shown alongside a rate.

    Attributes:
        total_invested: Sum of the absolute values of all outflows
        total_redeemed: Sum of all inflows
        net_profit: total_redeemed - total_invested
        absolute_return: net_profit / total_invested, None when nothing was invested
    """

    total_invested: float
    total_redeemed: float
    net_profit: float
    absolute_return: Optional[float]
