"""Backtracking line search on a finite-difference gradient estimate."""

from __future__ import annotations

from typing import Optional

from .core import DEFAULT_CONFIG, FilterConfig, OptimResult, Oracle


def backtracking_line_search(
    oracle: Oracle,
    x: float,
    p: float,
    grad: float,
    h: float,
    config: FilterConfig = DEFAULT_CONFIG,
) -> Optional[OptimResult]:
    """
    Armijo backtracking along ``p`` starting from the full step.

    Tries ``a = reduction**i`` for ``i = 0 .. max_line_iters - 1`` and accepts
    the first ``x + a * p`` whose loss satisfies
    ``loss_new - loss_old <= c * a * p * grad``. Because ``grad`` is only an
    estimate, no step may qualify; None is returned in that case.
    """
    if not p * grad <= 0:
        raise ValueError("Search direction must be a descent direction.")
    loss_old = oracle(x, h)
    for i in range(config.max_line_iters):
        a = config.line_search_reduction**i
        x_new = x + a * p
        loss_new = oracle(x_new, h)
        if loss_new - loss_old <= config.armijo_constant * a * p * grad:
            return OptimResult(x=x_new, loss=loss_new)
    return None


__all__ = ["backtracking_line_search"]
