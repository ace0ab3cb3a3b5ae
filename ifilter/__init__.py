"""ifilter - derivative-free calibration of model parameters by implicit filtering."""

__version__ = "0.1.0"

from .logging import configure_logging, get_logger, set_log_level

# Integrators
from .ode import (
    SolutionElement,
    euler_step,
    integrate,
    rk2_step,
    solution_sequence,
    solve_growth,
)

# Optimization
from .optimize import (
    DEFAULT_CONFIG,
    FilterConfig,
    OptimResult,
    Oracle,
    Status,
    backtracking_line_search,
    estimate_derivatives,
    grad_search,
    implicit_filtering,
    search_direction,
    stencil_schedule,
)

# Objectives
from .oracle import CountingOracle, growth_oracle

__all__ = [
    "__version__",
    "CountingOracle",
    "DEFAULT_CONFIG",
    "FilterConfig",
    "OptimResult",
    "Oracle",
    "SolutionElement",
    "Status",
    "backtracking_line_search",
    "configure_logging",
    "estimate_derivatives",
    "euler_step",
    "get_logger",
    "grad_search",
    "growth_oracle",
    "implicit_filtering",
    "integrate",
    "rk2_step",
    "search_direction",
    "set_log_level",
    "solution_sequence",
    "solve_growth",
    "stencil_schedule",
]
