"""Tests for recurring-contribution schedule construction"""

import math
from datetime import date

import pytest

from investcalc.conventions.types import Cadence
from investcalc.schedule import InvalidScheduleError, build_schedule, contribution_dates
from investcalc.valuation.types import CashFlow


class TestMonthlyScenario:
    """Monthly 10,000 from 2021-01-01 with 600,000 at 2024-01-01"""

    def test_flow_count_and_signs(self, monthly_flows):
        assert len(monthly_flows) == 37
        assert all(flow.amount == -10_000.0 for flow in monthly_flows[:-1])
        assert monthly_flows[-1] == CashFlow(date(2024, 1, 1), 600_000.0)

    def test_contributions_on_first_of_month(self, monthly_flows):
        dates = [flow.date for flow in monthly_flows[:-1]]
        assert dates[0] == date(2021, 1, 1)
        assert dates[-1] == date(2023, 12, 1)
        assert all(dt.day == 1 for dt in dates)

    def test_deterministic(self, monthly_params):
        p = monthly_params
        first = build_schedule(p.start, p.end, p.cadence, p.recurring_amount, p.maturity_amount)
        second = build_schedule(p.start, p.end, p.cadence, p.recurring_amount, p.maturity_amount)
        assert first == second


class TestMonotonicity:
    """Dates strictly increase and the last flow sits exactly on the end date"""

    @pytest.mark.parametrize("cadence", list(Cadence))
    @pytest.mark.parametrize(
        "start, end",
        [
            (date(2021, 1, 31), date(2025, 6, 30)),
            (date(2020, 2, 29), date(2024, 2, 29)),
            (date(2022, 8, 31), date(2022, 9, 1)),
        ],
    )
    def test_strictly_ascending(self, cadence, start, end):
        flows = build_schedule(start, end, cadence, 100.0, 500.0)
        dates = [flow.date for flow in flows]
        assert dates == sorted(set(dates))
        assert dates[-1] == end
        assert all(dt < end for dt in dates[:-1])
        assert dates[0] == start


class TestCadenceSteps:
    """Test step sizes for each cadence"""

    def test_every_14_days(self):
        assert contribution_dates(date(2024, 1, 1), date(2024, 2, 12), Cadence.EVERY_14_DAYS) == [
            date(2024, 1, 1),
            date(2024, 1, 15),
            date(2024, 1, 29),
        ]

    def test_quarterly(self):
        dates = contribution_dates(date(2021, 1, 1), date(2022, 1, 1), Cadence.QUARTERLY)
        assert dates == [date(2021, 1, 1), date(2021, 4, 1), date(2021, 7, 1), date(2021, 10, 1)]

    def test_semiannual(self):
        dates = contribution_dates(date(2021, 1, 1), date(2022, 1, 1), Cadence.SEMIANNUAL)
        assert dates == [date(2021, 1, 1), date(2021, 7, 1)]

    def test_annual_with_unaligned_end(self):
        dates = contribution_dates(date(2021, 3, 15), date(2023, 1, 1), Cadence.ANNUAL)
        assert dates == [date(2021, 3, 15), date(2022, 3, 15)]

    def test_month_end_does_not_drift(self):
        dates = contribution_dates(date(2023, 1, 31), date(2023, 6, 1), Cadence.MONTHLY)
        assert dates == [
            date(2023, 1, 31),
            date(2023, 2, 28),
            date(2023, 3, 31),
            date(2023, 4, 30),
            date(2023, 5, 31),
        ]


class TestBoundaries:
    """Test degenerate inputs"""

    @pytest.mark.parametrize(
        "start, end",
        [(date(2024, 1, 1), date(2024, 1, 1)), (date(2024, 1, 2), date(2024, 1, 1))],
    )
    def test_start_not_before_end_is_empty(self, start, end):
        assert build_schedule(start, end, Cadence.MONTHLY, 100.0, 200.0) == []

    def test_single_contribution(self):
        flows = build_schedule(date(2024, 1, 1), date(2024, 1, 10), Cadence.MONTHLY, 100.0, 101.0)
        assert flows == [CashFlow(date(2024, 1, 1), -100.0), CashFlow(date(2024, 1, 10), 101.0)]

    def test_strings_and_form_tags(self):
        flows = build_schedule("2021-01-01", "20220101", "halfyearly", "100", 300)
        assert [flow.date for flow in flows] == [date(2021, 1, 1), date(2021, 7, 1), date(2022, 1, 1)]
        assert [flow.amount for flow in flows] == [-100.0, -100.0, 300.0]

    @pytest.mark.parametrize("recurring, maturity", [(0, 100), (-5, 100), (100, 0), (100, -1), (math.nan, 100), (100, math.inf), ("abc", 100)])
    def test_invalid_amounts_rejected(self, recurring, maturity):
        with pytest.raises(InvalidScheduleError):
            build_schedule(date(2021, 1, 1), date(2022, 1, 1), Cadence.MONTHLY, recurring, maturity)

    def test_invalid_amount_is_value_error(self):
        assert issubclass(InvalidScheduleError, ValueError)

    def test_unknown_cadence(self):
        with pytest.raises(ValueError):
            build_schedule(date(2021, 1, 1), date(2022, 1, 1), "weekly", 100, 100)
