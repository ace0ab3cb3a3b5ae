"""Implicit filtering: grad search over a shrinking sequence of stencil sizes."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from ..logging import get_logger
from .core import DEFAULT_CONFIG, FilterConfig, OptimResult, Oracle, Status
from .grad_search import grad_search

logger = get_logger(__name__)


def stencil_schedule(h0: float, config: FilterConfig = DEFAULT_CONFIG) -> Iterator[float]:
    """Yield ``h0 * r**i`` for ``i = 0 .. max_outer_iters - 1``."""
    if h0 <= 0:
        raise ValueError(f"h0 must be positive, got {h0}.")
    for i in range(config.max_outer_iters):
        yield h0 * config.stencil_reduction**i


def implicit_filtering(
    oracle: Oracle,
    x0: float,
    h0: float,
    tol: float,
    config: FilterConfig = DEFAULT_CONFIG,
    callback: Optional[Callable[[float, OptimResult], None]] = None,
) -> OptimResult:
    """
    Minimize a noisy scalar objective without derivatives.

    Runs :func:`grad_search` from the best point so far at each stencil size
    of :func:`stencil_schedule`. Stencil sizes at which no improvement is
    found are skipped. The iteration stops once an accepted point moves by at
    most ``tol``, since shrinking the stencil further no longer changes the
    answer.

    Parameters
    ----------
    oracle:
        Pure objective ``(x, h) -> loss``.
    x0:
        Starting parameter.
    h0:
        Initial (largest) stencil size.
    tol:
        Convergence tolerance on the change in ``x`` between accepted points.
    config:
        Iteration constants.
    callback:
        Called as ``callback(h, result)`` after each accepted point.

    Returns
    -------
    OptimResult
        The best point found. Equals ``(x0, oracle(x0, h0))`` when no stencil
        size produced an improvement.
    """
    if h0 <= 0:
        raise ValueError(f"h0 must be positive, got {h0}.")
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}.")
    schedule = stencil_schedule(h0, config)
    best = OptimResult(x=x0, loss=oracle(x0, h0))
    status = Status.EXHAUSTED

    for h in schedule:
        result = grad_search(oracle, best.x, h, config)
        if result is None:
            continue

        diff = abs(best.x - result.x)
        best = result
        if callback is not None:
            callback(h, best)

        if diff <= tol:
            status = Status.CONVERGED
            break

    logger.info("Final result (%s): x = %+.10g, loss = %.10g", status.value, best.x, best.loss)
    return best


__all__ = ["implicit_filtering", "stencil_schedule"]
