"""Root-finding utilities (guarded Newton–Raphson with an optional bisection fallback)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple

import logging

logger = logging.getLogger(__name__)

FuncDeriv = Callable[[float], Tuple[float, float]]
Func = Callable[[float], float]


class SolverState(Enum):
    """Terminal state of an iteration."""

    CONVERGED = "CONVERGED"
    DIVERGED = "DIVERGED"
    MAX_ITER_EXHAUSTED = "MAX_ITER_EXHAUSTED"


@dataclass
class RootResult:
    root: float
    iterations: int
    converged: bool
    method: str
    state: SolverState = SolverState.CONVERGED


class RootFindingError(RuntimeError):
    """Raised when root-finding fails to converge."""

    def __init__(
        self,
        message: str,
        state: SolverState = SolverState.DIVERGED,
        iterations: int = 0,
    ):
        super().__init__(message)
        self.state = state
        self.iterations = iterations


class DomainError(RootFindingError):
    """Raised when an iterate leaves the domain of the objective function."""


class ConvergenceError(RootFindingError):
    """Raised when the iteration diverges, stalls or exhausts its budget."""


def _bisect(
    func: Func, lower: float, upper: float, tol: float = 1e-9, max_iter: int = 200
) -> RootResult:
    f_lower = func(lower)
    f_upper = func(upper)
    if f_lower == 0.0:
        return RootResult(lower, 0, True, "bisect")
    if f_upper == 0.0:
        return RootResult(upper, 0, True, "bisect")
    if not (math.isfinite(f_lower) and math.isfinite(f_upper)):
        raise ConvergenceError("Bisection bracket evaluates to a non-finite value")
    if f_lower * f_upper > 0:
        raise ConvergenceError("Bisection requires a sign change in the bracket")

    for iteration in range(1, max_iter + 1):
        mid = 0.5 * (lower + upper)
        f_mid = func(mid)
        if f_mid == 0.0 or abs(upper - lower) <= tol:
            return RootResult(mid, iteration, True, "bisect")
        if f_lower * f_mid < 0:
            upper, f_upper = mid, f_mid
        else:
            lower, f_lower = mid, f_mid
    raise ConvergenceError(
        "Bisection failed to converge",
        state=SolverState.MAX_ITER_EXHAUSTED,
        iterations=max_iter,
    )


def newton(
    func_and_deriv: FuncDeriv,
    initial_guess: float,
    *,
    tol_step: float = 1e-6,
    max_iter: int = 100,
    max_abs: float = 10.0,
    floor: float | None = None,
) -> RootResult:
    """Newton-Raphson root finder that refuses to return a non-finite root.

    Parameters
    ----------
    func_and_deriv:
        Callable returning (value, derivative) at a given point.
    initial_guess:
        Starting point for Newton iterations.
    tol_step:
        Convergence is declared when two successive iterates differ by less
        than this.
    max_iter:
        Iteration cap; exhausting it raises ``ConvergenceError``.
    max_abs:
        Iterates with a larger magnitude are treated as divergence.
    floor:
        Exclusive lower edge of the function's domain. An iterate at or below
        it raises ``DomainError``.
    """
    x = float(initial_guess)
    if not math.isfinite(x):
        raise ConvergenceError("Initial guess must be finite")
    if floor is not None and x <= floor:
        raise DomainError(f"Initial guess {x} is outside the domain (> {floor})")

    for iteration in range(1, max_iter + 1):
        value, deriv = func_and_deriv(x)
        logger.debug("Newton iter %s: x=%s value=%s deriv=%s", iteration, x, value, deriv)
        if not (math.isfinite(value) and math.isfinite(deriv)):
            raise ConvergenceError(
                f"Non-finite function value at x={x}", iterations=iteration
            )
        # a flat function has no isolated root, even where it is zero
        if deriv == 0.0:
            raise ConvergenceError(
                f"Zero derivative at x={x}", iterations=iteration
            )
        if value == 0.0:
            return RootResult(x, iteration, True, "newton")
        x_new = x - value / deriv
        if not math.isfinite(x_new):
            raise ConvergenceError(
                f"Non-finite iterate after x={x}", iterations=iteration
            )
        if floor is not None and x_new <= floor:
            raise DomainError(
                f"Iterate {x_new} is outside the domain (> {floor})",
                iterations=iteration,
            )
        if abs(x_new) > max_abs:
            raise ConvergenceError(
                f"Iterate {x_new} exceeded bound {max_abs}", iterations=iteration
            )
        if abs(x_new - x) < tol_step:
            return RootResult(x_new, iteration, True, "newton")
        x = x_new

    raise ConvergenceError(
        f"Newton failed to converge in {max_iter} iterations (last x={x})",
        state=SolverState.MAX_ITER_EXHAUSTED,
        iterations=max_iter,
    )


def newton_with_bisect(
    func_and_deriv: FuncDeriv,
    initial_guess: float,
    *,
    bracket: Tuple[float, float],
    tol_step: float = 1e-6,
    max_iter: int = 100,
    max_abs: float = 10.0,
    floor: float | None = None,
) -> RootResult:
    """Newton-Raphson first; bisect on ``bracket`` if Newton gives up.

    The bisection only runs when the bracket shows a sign change, otherwise
    the original Newton failure is re-raised.
    """
    try:
        return newton(
            func_and_deriv,
            initial_guess,
            tol_step=tol_step,
            max_iter=max_iter,
            max_abs=max_abs,
            floor=floor,
        )
    except RootFindingError as exc:
        logger.debug("Newton failed (%s); falling back to bisection on %s", exc, bracket)
        newton_error = exc

    def func_only(v: float) -> float:
        return func_and_deriv(v)[0]

    lower, upper = bracket
    try:
        return _bisect(func_only, lower, upper, tol=min(tol_step, 1e-9))
    except RootFindingError as exc:
        logger.debug("Bisection fallback failed: %s", exc)
        raise newton_error from exc
