from .daycount import DayCountFunc, act_365f, get_day_count
from .types import Cadence

__all__ = ["Cadence", "DayCountFunc", "act_365f", "get_day_count"]
