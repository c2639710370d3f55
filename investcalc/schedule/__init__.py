from investcalc.conventions.types import Cadence

from .generator import InvalidScheduleError, build_schedule, contribution_dates

__all__ = ["Cadence", "InvalidScheduleError", "build_schedule", "contribution_dates"]
