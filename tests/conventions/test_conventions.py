"""Tests for cadences and day count conventions"""

from datetime import date

import pytest

from investcalc.conventions import Cadence, act_365f, get_day_count


class TestCadence:
    """Test cadence parsing and shifts"""

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("14days", Cadence.EVERY_14_DAYS),
            ("monthly", Cadence.MONTHLY),
            ("Quarterly", Cadence.QUARTERLY),
            ("halfyearly", Cadence.SEMIANNUAL),
            ("yearly", Cadence.ANNUAL),
            ("SEMIANNUAL", Cadence.SEMIANNUAL),
            ("every_14_days", Cadence.EVERY_14_DAYS),
            (Cadence.ANNUAL, Cadence.ANNUAL),
        ],
    )
    def test_parse(self, tag, expected):
        assert Cadence.parse(tag) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown cadence"):
            Cadence.parse("weekly")

    def test_months(self):
        assert [c.months() for c in Cadence] == [0, 1, 3, 6, 12]

    def test_shift_days(self):
        assert Cadence.EVERY_14_DAYS.shift(date(2024, 1, 1), 2) == date(2024, 1, 29)

    def test_shift_clamps_to_month_end(self):
        assert Cadence.QUARTERLY.shift(date(2023, 11, 30)) == date(2024, 2, 29)

    def test_shift_is_anchored(self):
        start = date(2023, 1, 31)
        assert Cadence.MONTHLY.shift(start, 2) == date(2023, 3, 31)


class TestDayCount:
    """Test year fractions"""

    def test_act_365f_leap_year(self):
        assert act_365f(date(2020, 1, 1), date(2021, 1, 1)) == pytest.approx(366 / 365)

    def test_act_365f_accepts_strings(self):
        assert act_365f("2021-01-01", "20210301") == pytest.approx(59 / 365)

    def test_act_365f_outside_quantlib_range(self):
        assert act_365f(date(1900, 1, 1), date(1901, 1, 1)) == pytest.approx(1.0)

    def test_act_act_leap_year_is_one(self):
        act_act = get_day_count("ACT/ACT")
        assert act_act(date(2020, 1, 1), date(2021, 1, 1)) == pytest.approx(1.0)

    def test_act_360(self):
        act_360 = get_day_count("act/360")
        assert act_360(date(2021, 1, 1), date(2021, 12, 27)) == pytest.approx(1.0)

    def test_quantlib_basis_rejects_out_of_range_year(self):
        with pytest.raises(ValueError, match="ACT/ACT cannot handle"):
            get_day_count("ACT/ACT")(date(1900, 1, 1), date(1901, 6, 1))

    def test_lookup_is_case_insensitive(self):
        assert get_day_count("act/365f") is act_365f

    def test_unknown_convention(self):
        with pytest.raises(ValueError, match="Unknown day count convention"):
            get_day_count("BUS/252")
