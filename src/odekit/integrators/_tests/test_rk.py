import numpy as np
import pytest
from scipy.integrate import solve_ivp

from odekit.integrators.configs import RungeKuttaConfig
from odekit.integrators.rk import RungeKutta4
from odekit.integrators.types import Stats
from odekit.utils.exceptions import ConfigurationError


def exponential(x, y, f):
    f[0] = y[0]


def oscillator(x, y, f):
    f[0] = y[1]
    f[1] = -y[0]


def test_exponential_growth():
    integrator = RungeKutta4(step=0.01)
    ys, xs, stats = integrator.compute_with_stats(exponential, [1.0], [0.0, 1.0])

    assert ys.shape == (101, 1)
    assert xs.size == 101
    assert abs(xs[-1] - 1.0) < 1e-12
    assert abs(ys[-1, 0] - np.e) < 1e-9
    assert stats == Stats(evaluations=400, rejections=0, steps=100)


def test_single_step_matches_classical_formula():
    h = 0.5
    ys, _ = RungeKutta4(step=h).compute(exponential, [1.0], [0.0, h])

    # For dy/dx = y one step of RK4 is the degree-4 Taylor polynomial of exp(h)
    expected = 1 + h + h ** 2 / 2 + h ** 3 / 6 + h ** 4 / 24
    assert ys[-1, 0] == pytest.approx(expected, rel=1e-14)


def test_last_point_is_closest_to_the_end():
    ys, xs = RungeKutta4(step=0.3).compute(exponential, [1.0], [0.0, 1.0])

    np.testing.assert_allclose(xs, [0.0, 0.3, 0.6, 0.9])
    assert ys.shape == (4, 1)


def test_oscillator_against_reference():
    xs = np.array([0.0, 2 * np.pi])
    ys, xs_out = RungeKutta4(RungeKuttaConfig(step=np.pi / 100)).compute(oscillator, [1.0, 0.0], xs)

    def rhs(t, y):
        return np.array([y[1], -y[0]])

    ref = solve_ivp(rhs, (0.0, xs_out[-1]), [1.0, 0.0], t_eval=xs_out,
                    rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(ys, ref.y.T, atol=1e-6)
    np.testing.assert_allclose(ys[-1], [1.0, 0.0], atol=1e-6)


def test_invalid_step():
    with pytest.raises(ConfigurationError):
        RungeKutta4(step=0.0)
    with pytest.raises(ConfigurationError):
        RungeKuttaConfig(step=-1.0)


def test_order():
    assert RungeKutta4(step=0.1).order == 4


def test_config_and_keywords_are_exclusive():
    with pytest.raises(TypeError):
        RungeKutta4(RungeKuttaConfig(step=0.1), step=0.2)
