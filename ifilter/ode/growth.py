"""
Fixed-step explicit integrators for the linear growth equation.

Solves y'(t) = beta * y(t) with y(t0) = y0 and produces the trajectory as a
lazy, unbounded sequence of (t, y) points. Each call to
:func:`solution_sequence` builds an independent generator, so no state is
shared between evaluations.
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterator, NamedTuple

import numpy as np


class SolutionElement(NamedTuple):
    """One point (t, y) of an integrated trajectory."""

    t: float
    y: float


INITIAL_CONDITION = SolutionElement(t=0.0, y=1.0)

StepFn = Callable[[SolutionElement, float, float], SolutionElement]


def euler_step(current: SolutionElement, beta: float, step_size: float) -> SolutionElement:
    """Advance one forward Euler step."""
    t, y = current
    return SolutionElement(t + step_size, y + step_size * beta * y)


def rk2_step(current: SolutionElement, beta: float, step_size: float) -> SolutionElement:
    """
    Advance one step of the explicit trapezoidal (Heun) method.

    The first stage evaluates the slope at the current point, the second at
    the point reached by a full Euler step, and the update uses their mean.
    """
    t, y = current
    k1 = beta * y
    k2 = beta * (y + step_size * k1)
    return SolutionElement(t + step_size, y + step_size * 0.5 * (k1 + k2))


STEPPERS: dict[str, StepFn] = {
    "euler": euler_step,
    "rk2": rk2_step,
}


def _get_stepper(method: str) -> StepFn:
    try:
        return STEPPERS[method]
    except KeyError:
        raise ValueError(
            f"Unsupported method '{method}', expected one of {sorted(STEPPERS)}."
        ) from None


def _num_steps(step_size: float, finish_time: float) -> int:
    if step_size <= 0.0:
        raise ValueError(f"step_size must be positive, got {step_size}.")
    if finish_time < 0.0:
        raise ValueError(f"finish_time must be non-negative, got {finish_time}.")
    return int(finish_time / step_size)


def solution_sequence(
    beta: float,
    step_size: float,
    method: str = "rk2",
    initial: SolutionElement = INITIAL_CONDITION,
) -> Iterator[SolutionElement]:
    """
    Lazily integrate y' = beta * y from ``initial``.

    Parameters
    ----------
    beta:
        Rate constant of the growth equation.
    step_size:
        Fixed step size of the integrator. Must be positive.
    method:
        Name of the stepper, ``"rk2"`` or ``"euler"``.
    initial:
        Initial condition (t0, y0). It is not yielded.

    Yields
    ------
    SolutionElement
        The state after 1, 2, 3, ... steps. The sequence never ends.
    """
    if step_size <= 0.0:
        raise ValueError(f"step_size must be positive, got {step_size}.")
    step = _get_stepper(method)
    beta = float(beta)
    step_size = float(step_size)
    return _advance(step, SolutionElement(float(initial.t), float(initial.y)), beta, step_size)


def _advance(
    step: StepFn, current: SolutionElement, beta: float, step_size: float
) -> Iterator[SolutionElement]:
    while True:
        current = step(current, beta, step_size)
        yield current


def integrate(
    beta: float,
    step_size: float,
    finish_time: float,
    method: str = "rk2",
) -> float:
    """
    Return y after ``int(finish_time / step_size)`` steps from y(0) = 1.

    The step count is truncated, so the final time is at most ``finish_time``.
    """
    n = _num_steps(step_size, finish_time)
    current = INITIAL_CONDITION
    for current in islice(solution_sequence(beta, step_size, method), n):
        pass
    return current.y


def solve_growth(
    beta: float,
    step_size: float,
    finish_time: float,
    method: str = "rk2",
) -> tuple[np.ndarray, np.ndarray]:
    """Run the integrator and return arrays ``(times, values)`` of length n+1.

    The first entry is the initial condition.
    """
    n = _num_steps(step_size, finish_time)
    times = np.empty(n + 1, dtype=float)
    values = np.empty(n + 1, dtype=float)
    times[0], values[0] = INITIAL_CONDITION
    for k, element in zip(range(1, n + 1), solution_sequence(beta, step_size, method)):
        times[k] = element.t
        values[k] = element.y
    return times, values


__all__ = [
    "INITIAL_CONDITION",
    "STEPPERS",
    "SolutionElement",
    "euler_step",
    "integrate",
    "rk2_step",
    "solution_sequence",
    "solve_growth",
]
