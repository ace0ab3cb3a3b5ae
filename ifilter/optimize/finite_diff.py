"""Central-difference derivative estimates at a given stencil size."""

from __future__ import annotations

from typing import Optional

from .core import OptimResult, Oracle


def estimate_derivatives(
    oracle: Oracle, result: OptimResult, h: float
) -> Optional[tuple[float, float]]:
    """
    Estimate the first and second derivative of ``oracle`` at ``result.x``.

    Parameters
    ----------
    oracle:
        Objective ``(x, h) -> loss``.
    result:
        Centre point; ``result.loss`` is used as the centre value and is not
        recomputed.
    h:
        Stencil size, used both as the perturbation and as the oracle's
        second argument.

    Returns
    -------
    tuple[float, float] or None
        ``(grad, hess)``, or None when the stencil cannot resolve a descent
        direction: either both neighbours are no lower than the centre, or
        ``|grad| <= h`` puts the gradient below the differencing noise floor.
    """
    if h <= 0:
        raise ValueError("h must be positive")
    loss_centre = result.loss
    loss_right = oracle(result.x + h, h)
    loss_left = oracle(result.x - h, h)

    grad = (loss_right - loss_left) / (2.0 * h)
    hess = (loss_right + loss_left - 2.0 * loss_centre) / (h * h)

    no_descent_direction = loss_right >= loss_centre and loss_left >= loss_centre
    if no_descent_direction or abs(grad) <= h:
        return None
    return grad, hess


__all__ = ["estimate_derivatives"]
