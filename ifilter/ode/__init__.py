"""Explicit integrators for the linear growth equation y' = beta * y."""

from .growth import (
    INITIAL_CONDITION,
    STEPPERS,
    SolutionElement,
    euler_step,
    integrate,
    rk2_step,
    solution_sequence,
    solve_growth,
)

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
