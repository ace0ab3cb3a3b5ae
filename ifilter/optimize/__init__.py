"""Derivative-free minimization of noisy scalar objectives by implicit filtering.

Example
-------
>>> from ifilter.optimize import implicit_filtering
>>> def loss(x, h):
...     return (x - 2.0) ** 2
>>> res = implicit_filtering(loss, x0=0.5, h0=0.1, tol=1e-7)
>>> round(res.x, 6)
2.0
"""

from .core import (
    ARMIJO_CONSTANT,
    DEFAULT_CONFIG,
    LINE_SEARCH_REDUCTION,
    MAX_ITERS,
    MAX_LINE_ITERS,
    MAX_OUTER_ITERS,
    MAX_STEP,
    STENCIL_REDUCTION,
    FilterConfig,
    OptimResult,
    Oracle,
    Status,
)
from .finite_diff import estimate_derivatives
from .grad_search import grad_search, search_direction
from .implicit_filtering import implicit_filtering, stencil_schedule
from .line_search import backtracking_line_search

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
    "backtracking_line_search",
    "estimate_derivatives",
    "grad_search",
    "implicit_filtering",
    "search_direction",
    "stencil_schedule",
]
