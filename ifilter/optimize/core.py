"""Core interfaces shared across the implicit filtering routines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

Oracle = Callable[[float, float], float]
"""An objective ``(parameter, stencil_size) -> loss``. Must be pure."""

LINE_SEARCH_REDUCTION = 0.7
STENCIL_REDUCTION = 0.25
ARMIJO_CONSTANT = 1e-3
MAX_ITERS = 10
MAX_LINE_ITERS = 10
MAX_OUTER_ITERS = 20
MAX_STEP = 3.0


@dataclass(frozen=True)
class FilterConfig:
    """
    Constants controlling the implicit filtering iteration.

    Attributes:
        line_search_reduction: Factor by which the trial step shrinks on each
            backtracking try.
        stencil_reduction: Ratio between successive stencil sizes.
        armijo_constant: Fraction of the predicted decrease a line-search step
            must achieve.
        max_iters: Inner (grad search) iterations per stencil size.
        max_line_iters: Trial steps per line search.
        max_outer_iters: Number of stencil sizes visited.
        max_step: Upper bound on the magnitude of a search direction.
    """

    line_search_reduction: float = LINE_SEARCH_REDUCTION
    stencil_reduction: float = STENCIL_REDUCTION
    armijo_constant: float = ARMIJO_CONSTANT
    max_iters: int = MAX_ITERS
    max_line_iters: int = MAX_LINE_ITERS
    max_outer_iters: int = MAX_OUTER_ITERS
    max_step: float = MAX_STEP

    def __post_init__(self) -> None:
        """Validate FilterConfig invariants."""
        if not (0 < self.line_search_reduction < 1):
            raise ValueError(
                f"line_search_reduction must lie in (0, 1), got {self.line_search_reduction}."
            )
        if not (0 < self.stencil_reduction < 1):
            raise ValueError(
                f"stencil_reduction must lie in (0, 1), got {self.stencil_reduction}."
            )
        if not (0 < self.armijo_constant < 1):
            raise ValueError(
                f"armijo_constant must lie in (0, 1), got {self.armijo_constant}."
            )
        for name in ("max_iters", "max_line_iters", "max_outer_iters"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}.")
        if self.max_step <= 0:
            raise ValueError(f"max_step must be positive, got {self.max_step}.")


DEFAULT_CONFIG = FilterConfig()


@dataclass(frozen=True)
class OptimResult:
    """A candidate parameter and its loss at the stencil size it was found at."""

    x: float
    loss: float


class Status(Enum):
    """Outcome of a stage of the implicit filtering iteration."""

    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    STENCIL_FAILURE = "stencil_failure"
    LINE_SEARCH_FAILURE = "line_search_failure"
    NO_IMPROVEMENT = "no_improvement"


__all__ = [
    "ARMIJO_CONSTANT",
    "DEFAULT_CONFIG",
    "FilterConfig",
    "LINE_SEARCH_REDUCTION",
    "MAX_ITERS",
    "MAX_LINE_ITERS",
    "MAX_OUTER_ITERS",
    "MAX_STEP",
    "OptimResult",
    "Oracle",
    "STENCIL_REDUCTION",
    "Status",
]
