import numpy as np
import pytest

from odekit.integrators import DormandPrince, RungeKutta4, Solution, wrap_rhs
from odekit.integrators.configs import DormandPrinceConfig


def test_wrap_rhs_fills_output_buffer():
    dydx = wrap_rhs(lambda x, y: -2.0 * y)
    f = np.empty(2)
    dydx(0.0, np.array([1.0, 3.0]), f)
    np.testing.assert_array_equal(f, [-2.0, -6.0])


def test_wrap_rhs_rejects_wrong_shape():
    dydx = wrap_rhs(lambda x, y: np.zeros(3))
    with pytest.raises(ValueError):
        dydx(0.0, np.zeros(2), np.empty(2))


def test_wrapped_rhs_integrates():
    ys, _ = DormandPrince().compute(wrap_rhs(lambda x, y: y), [1.0], [0.0, 1.0])
    assert abs(ys[-1, 0] - np.e) < 1e-3


def test_solution_length_check():
    with pytest.raises(ValueError):
        Solution(times=np.zeros(3), states=np.zeros((2, 1)))


def test_default_configuration():
    config = DormandPrince().config
    assert config == DormandPrinceConfig(try_step=0.0, max_step=0.0, abs_error=1e-6, rel_error=1e-3)


def test_integrators_share_interface():
    def exponential(x, y, f):
        f[0] = y[0]

    for integrator in (DormandPrince(), RungeKutta4(step=0.01)):
        solution = integrator.integrate(exponential, [1.0], [0.0, 1.0])
        assert solution.states.shape == (solution.times.size, 1)
        assert abs(solution.final[0] - np.e) < 1e-3
        assert str(integrator).startswith("odekit-")
