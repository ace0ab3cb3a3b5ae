from __future__ import annotations

import math
from itertools import islice

import numpy as np
import pytest

from ifilter.ode.growth import (
    INITIAL_CONDITION,
    SolutionElement,
    euler_step,
    integrate,
    rk2_step,
    solution_sequence,
    solve_growth,
)


def _error(beta: float, n: int, method: str, finish_time: float = 1.0) -> float:
    step_size = finish_time / n
    return abs(integrate(beta, step_size, finish_time, method) - math.exp(beta * finish_time))


def test_rk2_step_matches_taylor_polynomial() -> None:
    beta, dt = 0.8, 0.1
    z = beta * dt
    nxt = rk2_step(SolutionElement(0.0, 2.0), beta, dt)
    assert nxt.t == pytest.approx(0.1)
    assert nxt.y == pytest.approx(2.0 * (1 + z + z**2 / 2), rel=1e-14)


def test_euler_step_is_first_order_update() -> None:
    nxt = euler_step(SolutionElement(1.0, 3.0), -2.0, 0.25)
    assert nxt == SolutionElement(1.25, 1.5)


def test_sequence_yields_state_after_each_step() -> None:
    seq = solution_sequence(1.0, 0.5)
    first, second = islice(seq, 2)
    assert first == rk2_step(INITIAL_CONDITION, 1.0, 0.5)
    assert second == rk2_step(first, 1.0, 0.5)
    assert second.t == pytest.approx(1.0)


def test_sequences_do_not_share_state() -> None:
    seq_a = solution_sequence(1.3, 0.01)
    for _ in islice(seq_a, 50):
        pass
    seq_b = solution_sequence(1.3, 0.01)
    assert next(seq_b) == rk2_step(INITIAL_CONDITION, 1.3, 0.01)


def test_sequence_is_unbounded() -> None:
    elements = list(islice(solution_sequence(0.0, 1.0, method="euler"), 1000))
    assert len(elements) == 1000
    assert elements[-1] == SolutionElement(1000.0, 1.0)


def test_integrate_truncates_step_count() -> None:
    # 1.0 / 0.3 truncates to 3 steps, ending at t = 0.9
    expected = INITIAL_CONDITION
    for _ in range(3):
        expected = rk2_step(expected, 1.0, 0.3)
    assert integrate(1.0, 0.3, 1.0) == expected.y


def test_integrate_zero_horizon_returns_initial_value() -> None:
    assert integrate(2.0, 0.1, 0.0) == 1.0


@pytest.mark.parametrize("beta", [-1.0, 0.5, 1.0, 2.0])
def test_rk2_converges_second_order(beta: float) -> None:
    errors = [_error(beta, n, "rk2") for n in (64, 128, 256)]
    ratios = [errors[0] / errors[1], errors[1] / errors[2]]
    for ratio in ratios:
        assert 3.5 < ratio < 4.5
    assert errors[-1] < 1e-3


@pytest.mark.parametrize("beta", [-1.0, 1.0])
def test_euler_converges_first_order(beta: float) -> None:
    errors = [_error(beta, n, "euler") for n in (256, 512, 1024)]
    for coarse, fine in zip(errors, errors[1:]):
        assert 1.8 < coarse / fine < 2.2


def test_rk2_reaches_exp5_for_small_steps() -> None:
    value = integrate(1.0, 2.0**-10, 5.0)
    assert value == pytest.approx(math.exp(5.0), rel=1e-5)


def test_solve_growth_matches_integrate() -> None:
    times, values = solve_growth(0.7, 0.05, 2.0)
    n = int(2.0 / 0.05)
    assert times.shape == (n + 1,)
    assert values.shape == (n + 1,)
    assert times[0] == 0.0 and values[0] == 1.0
    assert np.allclose(times, np.arange(n + 1) * 0.05)
    assert values[-1] == integrate(0.7, 0.05, 2.0)
    assert np.all(np.diff(values) > 0)


def test_invalid_arguments_raise() -> None:
    with pytest.raises(ValueError):
        solution_sequence(1.0, 0.0)
    with pytest.raises(ValueError):
        integrate(1.0, -0.1, 1.0)
    with pytest.raises(ValueError):
        integrate(1.0, 0.1, -1.0)
    with pytest.raises(ValueError):
        solve_growth(1.0, 0.1, 1.0, method="rk4")
