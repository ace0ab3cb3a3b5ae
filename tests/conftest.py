"""Pytest configuration and shared fixtures for ifilter tests.

This module provides:
- Simple deterministic oracles with known minimizers
- A counting wrapper for checking evaluation budgets
"""

import math

import pytest

from ifilter.oracle import CountingOracle, growth_oracle


@pytest.fixture
def quadratic():
    """Oracle (x - 1)^2 that ignores the stencil size."""

    def loss(x: float, h: float) -> float:
        return (x - 1.0) ** 2

    return loss


@pytest.fixture
def flat():
    """Oracle that is constant everywhere."""

    def loss(x: float, h: float) -> float:
        return 3.0

    return loss


@pytest.fixture
def noisy_quadratic():
    """Oracle (x - 2)^2 with a deterministic high-frequency ripple."""

    def loss(x: float, h: float) -> float:
        return (x - 2.0) ** 2 + 1e-4 * math.cos(1000.0 * x)

    return loss


@pytest.fixture
def growth_mse():
    """Squared error of rk2 on y' = beta*y against exp(5)."""
    return growth_oracle(true_beta=1.0, finish_time=5.0)


@pytest.fixture
def counting(quadratic) -> CountingOracle:
    """The quadratic oracle wrapped to count evaluations."""
    return CountingOracle(quadratic)


@pytest.fixture
def fixed_step_mse():
    """Growth squared error with a fixed integrator step; ignores the stencil."""
    return growth_oracle(true_beta=1.0, finish_time=5.0, step_size=2.0**-10)
