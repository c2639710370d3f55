"""
Contribution cadences used by the schedule builder.
"""

from datetime import date
from enum import Enum

from investcalc.utils.date import add_days, add_months


class Cadence(Enum):
    """Interval between successive scheduled contributions."""

    EVERY_14_DAYS = "EVERY_14_DAYS"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMIANNUAL = "SEMIANNUAL"
    ANNUAL = "ANNUAL"

    def months(self) -> int:
        """Calendar months per step (0 for day-based cadences)."""
        return _MONTHS[self]

    def shift(self, start: date, count: int = 1) -> date:
        """Date ``count`` steps after ``start``, measured from ``start`` itself."""
        if self is Cadence.EVERY_14_DAYS:
            return add_days(start, 14 * count)
        return add_months(start, self.months() * count)

    @classmethod
    def parse(cls, value: "Cadence | str") -> "Cadence":
        """Accept a member, a member name, or a calculator form tag."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError as exc:
            raise ValueError(
                f"Unknown cadence: {value!r}. Available: {sorted(_ALIASES)}"
            ) from exc


_MONTHS = {
    Cadence.EVERY_14_DAYS: 0,
    Cadence.MONTHLY: 1,
    Cadence.QUARTERLY: 3,
    Cadence.SEMIANNUAL: 6,
    Cadence.ANNUAL: 12,
}

_ALIASES = {
    "every_14_days": Cadence.EVERY_14_DAYS,
    "14days": Cadence.EVERY_14_DAYS,
    "biweekly": Cadence.EVERY_14_DAYS,
    "monthly": Cadence.MONTHLY,
    "quarterly": Cadence.QUARTERLY,
    "semiannual": Cadence.SEMIANNUAL,
    "halfyearly": Cadence.SEMIANNUAL,
    "annual": Cadence.ANNUAL,
    "yearly": Cadence.ANNUAL,
}
