"""Quasi-Newton descent at a fixed stencil size (the inner loop)."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import DEFAULT_CONFIG, MAX_STEP, FilterConfig, OptimResult, Oracle, Status
from .finite_diff import estimate_derivatives
from .line_search import backtracking_line_search

logger = get_logger(__name__)


def search_direction(grad: float, hess: float, max_step: float = MAX_STEP) -> float:
    """
    Return a safeguarded quasi-Newton step for gradient ``grad`` and curvature ``hess``.

    Non-positive curvature would point uphill, so the step falls back to
    steepest descent ``-grad``. The magnitude is capped at ``max_step``.
    """
    sign = float(np.sign(grad))
    if hess != 0:
        p = -sign * abs(grad) / hess
    else:
        p = -sign * math.inf
    if p * grad > 0:
        p = -sign * abs(grad)
    if abs(p) > max_step:
        p = -sign * max_step
    return p


def grad_search(
    oracle: Oracle,
    x: float,
    h: float,
    config: FilterConfig = DEFAULT_CONFIG,
) -> Optional[OptimResult]:
    """
    Improve ``x`` using finite-difference derivatives at stencil size ``h``.

    Each iteration estimates the gradient and curvature, takes a safeguarded
    quasi-Newton direction and backtracks along it. The loop stops early when
    the stencil cannot resolve a descent direction or the line search fails.

    Returns
    -------
    OptimResult or None
        The final point if it differs from ``x`` and has strictly lower loss,
        otherwise None.
    """
    start = OptimResult(x=x, loss=oracle(x, h))
    current = start

    logger.info("Commencing grad search: h = %.10g, x = %.10g", h, x)

    for _ in range(config.max_iters):
        derivatives = estimate_derivatives(oracle, current, h)
        if derivatives is None:
            logger.debug("x = %+.10g | loss = %.10g | |grad| = N/A", current.x, current.loss)
            logger.info("%s: unable to clearly estimate gradient", Status.STENCIL_FAILURE.value)
            break
        grad, hess = derivatives

        p = search_direction(grad, hess, config.max_step)
        logger.debug("x = %+.10g | loss = %.10g | |grad| = %.10g", current.x, current.loss, abs(grad))

        if not p * grad <= 0:
            raise RuntimeError(
                f"Search direction {p} is not a descent direction for gradient {grad}."
            )

        step = backtracking_line_search(oracle, current.x, p, grad, h, config)
        if step is None:
            logger.info("%s: no step satisfied sufficient decrease", Status.LINE_SEARCH_FAILURE.value)
            break
        current = step

    if current == start or current.loss >= start.loss:
        logger.info("%s at h = %.10g", Status.NO_IMPROVEMENT.value, h)
        return None
    return current


__all__ = ["grad_search", "search_direction"]
