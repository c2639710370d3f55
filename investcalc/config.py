"""Solver defaults.

Settings are immutable; derive variants with ``dataclasses.replace``::

    settings = replace(DEFAULT_SETTINGS, bracket_fallback=True)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from investcalc.conventions.daycount import get_day_count

DEFAULT_GUESS = 0.10


@dataclass(frozen=True)
class SolverSettings:
    """Numerical parameters for the rate solver.

    Attributes:
        tolerance: Step size below which Newton iteration is considered converged
        max_iterations: Newton iteration cap
        max_abs_rate: Iterates beyond +/- this rate are treated as divergence (10.0 = 1000%)
        day_count: Day count convention used to annualize flow dates
        bracket_fallback: Bisect on [bracket_lower, bracket_upper] when Newton fails
        bracket_lower: Lower edge of the fallback bracket, must be above -1
        bracket_upper: Upper edge of the fallback bracket
    """

    tolerance: float = 1e-6
    max_iterations: int = 100
    max_abs_rate: float = 10.0
    day_count: str = "ACT/365F"
    bracket_fallback: bool = False
    bracket_lower: float = -0.99
    bracket_upper: float = 10.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.tolerance) and self.tolerance > 0):
            raise ValueError("tolerance must be a positive finite number")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if not self.max_abs_rate > 0:
            raise ValueError("max_abs_rate must be positive")
        if self.bracket_lower <= -1.0:
            raise ValueError("bracket_lower must be greater than -100%")
        if self.bracket_upper <= self.bracket_lower:
            raise ValueError("bracket_upper must be above bracket_lower")
        # fail fast on unknown conventions
        get_day_count(self.day_count)


DEFAULT_SETTINGS = SolverSettings()
