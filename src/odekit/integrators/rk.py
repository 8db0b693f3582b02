"""Provide the classical fixed-step Runge-Kutta integrator.

The module also hosts the stage-combination kernel shared by every explicit
Runge-Kutta scheme in the package.

References
----------
Hairer, E.; Norsett, S.; Wanner, G. (1993). "Solving Ordinary Differential
Equations I".
"""

from typing import Optional

import numba
import numpy as np

from odekit.config import FASTMATH
from odekit.integrators.base import _Integrator
from odekit.integrators.coefficients.rk4 import A as RK4_A
from odekit.integrators.coefficients.rk4 import B as RK4_B
from odekit.integrators.coefficients.rk4 import C as RK4_C
from odekit.integrators.configs import RungeKuttaConfig
from odekit.integrators.types import Stats
from odekit.utils.log_config import logger


@numba.njit(cache=False, fastmath=FASTMATH)
def rk_combine_jit_kernel(y, f, h, a, n, out):
    """Store ``y + h * sum(a[j] * f[j] for j < n)`` into *out*."""
    for i in range(y.size):
        acc = 0.0
        for j in range(n):
            a_j = a[j]
            if a_j != 0.0:
                acc += a_j * f[j, i]
        out[i] = y[i] + h * acc


class RungeKutta4(_Integrator):
    """Implement the classical 4th-order Runge-Kutta method.

    The solution is returned at equidistant points starting from and
    including ``xs[0]``. The final point is the closest point to ``xs[-1]``
    with respect to the step of integration.

    Parameters
    ----------
    config : :class:`~odekit.integrators.configs.RungeKuttaConfig`
        Step of integration.
    """

    _A = RK4_A
    _B = RK4_B
    _C = RK4_C

    def __init__(self, config: Optional[RungeKuttaConfig] = None, **kwargs):
        if config is None:
            config = RungeKuttaConfig(**kwargs)
        elif kwargs:
            raise TypeError("pass either a configuration or keyword arguments, not both")
        super().__init__("RK4", config)

    @property
    def order(self) -> int:
        return 4

    def compute_with_stats(self, dydx, y0, xs):
        y0, xs = self.validate_inputs(y0, xs)

        A, B, C = self._A, self._B, self._C
        s = B.size
        nd = y0.size
        h = self._config.step
        x0, xend = xs[0], xs[-1]

        ns = int((xend - x0) / h + 0.5) + 1

        stats = Stats()
        z = np.empty(nd, dtype=np.float64)
        f = np.empty((s, nd), dtype=np.float64)
        ys = np.empty((ns, nd), dtype=np.float64)
        xs_out = np.empty(ns, dtype=np.float64)
        ys[0] = y0
        xs_out[0] = x0

        x = x0
        for k in range(1, ns):
            y = ys[k - 1]
            dydx(x, y, f[0])
            for i in range(1, s):
                rk_combine_jit_kernel(y, f, h, A[i], i, z)
                dydx(x + C[i] * h, z, f[i])
            rk_combine_jit_kernel(y, f, h, B, s, ys[k])

            x += h
            xs_out[k] = x
            stats.evaluations += s
            stats.steps += 1

        logger.debug(f"{self} finished: {stats.steps} steps, {stats.evaluations} evaluations")
        return ys, xs_out, stats
