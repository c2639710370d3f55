"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from investcalc import Cadence, ScheduleParams, build_schedule
from investcalc.conventions.daycount import act_365f
from investcalc.valuation.types import CashFlow


def _flows_at_rate(rate, contributions, maturity):
    redemption = sum(
        amount * (1.0 + rate) ** act_365f(dt, maturity)
        for dt, amount in contributions
    )
    flows = [CashFlow(dt, -amount) for dt, amount in contributions]
    flows.append(CashFlow(maturity, redemption))
    return flows


@pytest.fixture
def flows_at_rate():
    """Builder: contributions of (date, amount) plus the redemption that makes NPV(rate) zero."""
    return _flows_at_rate


@pytest.fixture
def monthly_params() -> ScheduleParams:
    """Monthly 10,000 from 2021-01-01, 600,000 back on 2024-01-01."""
    return ScheduleParams(
        start=date(2021, 1, 1),
        end=date(2024, 1, 1),
        cadence=Cadence.MONTHLY,
        recurring_amount=10_000.0,
        maturity_amount=600_000.0,
    )


@pytest.fixture
def monthly_flows(monthly_params):
    p = monthly_params
    return build_schedule(p.start, p.end, p.cadence, p.recurring_amount, p.maturity_amount)


@pytest.fixture
def single_period_flows():
    return [CashFlow(date(2020, 1, 1), -1000.0), CashFlow(date(2021, 1, 1), 1100.0)]
