"""Provide the adaptive Dormand-Prince 5(4) integrator.

Each step evaluates six new stages; the seventh stage is the derivative at
the new point and is carried over as the first stage of the next step (first
same as last). The difference between the embedded 5th- and 4th-order
solutions drives the step-size control, and a quartic continuous extension
reconstructs the solution inside accepted steps without extra evaluations.

References
----------
Dormand, J. R.; Prince, P. J. (1980). "A family of embedded Runge-Kutta
formulae".

Hairer, E.; Norsett, S.; Wanner, G. (1993). "Solving Ordinary Differential
Equations I".

https://en.wikipedia.org/wiki/Dormand-Prince_method
"""

from typing import Optional

import numba
import numpy as np

from odekit.config import FASTMATH, MIN_STEP_ULPS
from odekit.integrators.base import _Integrator
from odekit.integrators.coefficients.dopri5 import A as DOPRI5_A
from odekit.integrators.coefficients.dopri5 import C as DOPRI5_C
from odekit.integrators.coefficients.dopri5 import E as DOPRI5_E
from odekit.integrators.coefficients.dopri5 import \
    ERROR_EXPONENT as DOPRI5_ERROR_EXPONENT
from odekit.integrators.coefficients.dopri5 import N_STAGES as DOPRI5_N_STAGES
from odekit.integrators.coefficients.dopri5 import P as DOPRI5_P
from odekit.integrators.configs import DormandPrinceConfig
from odekit.integrators.output import make_writer
from odekit.integrators.rk import rk_combine_jit_kernel
from odekit.integrators.types import Stats
from odekit.utils.exceptions import StepSizeUnderflowError
from odekit.utils.log_config import logger


@numba.njit(cache=False, fastmath=FASTMATH)
def error_norm_jit_kernel(y, ynew, f, h, E, threshold):
    """Return the infinity norm of the scaled local error estimate.

    Every component is divided by ``max(|y|, |ynew|, threshold)``. A NaN in
    any component yields infinity so that the step is rejected.
    """
    err = 0.0
    for i in range(y.size):
        scale = abs(y[i])
        if abs(ynew[i]) > scale:
            scale = abs(ynew[i])
        if scale < threshold:
            scale = threshold

        e = 0.0
        for j in range(E.size):
            e_j = E[j]
            if e_j != 0.0:
                e += e_j * f[j, i]

        e = h * abs(e) / scale
        if np.isnan(e):
            return np.inf
        if e > err:
            err = e
    return err


@numba.njit(cache=False, fastmath=FASTMATH)
def dense_output_jit_kernel(x, y, f, h, xnext, P, out):
    """Evaluate the continuous extension of the step ``[x, x + h]`` at *xnext*."""
    s = (xnext - x) / h
    n_powers = P.shape[1]
    for i in range(y.size):
        acc = 0.0
        power = 1.0
        for k in range(n_powers):
            power *= s
            q = 0.0
            for j in range(P.shape[0]):
                p_jk = P[j, k]
                if p_jk != 0.0:
                    q += p_jk * f[j, i]
            acc += power * q
        out[i] = y[i] + h * acc


def dense_output(x, y, f, h, xnext, out):
    """Reconstruct the solution at *xnext* inside the last accepted step.

    Parameters
    ----------
    x : float
        Start of the step.
    y : numpy.ndarray
        State at *x*.
    f : numpy.ndarray
        Stage derivatives of the step, shape (7, n_dim).
    h : float
        Size of the step.
    xnext : float
        Point in ``[x, x + h]``.
    out : numpy.ndarray
        Buffer receiving the state at *xnext*.
    """
    dense_output_jit_kernel(x, y, f, h, xnext, DOPRI5_P, out)


def spacing(x: float) -> float:
    """Distance from ``|x|`` to the next larger representable number."""
    a = abs(x)
    return float(np.nextafter(a, np.inf) - a)


class DormandPrince(_Integrator):
    """Implement the Dormand-Prince 5(4) adaptive Runge-Kutta method.

    Apart from the endpoints, the solution is returned at a number of
    intermediate points. These points are given by the grid passed to
    :func:`~odekit.integrators.dopri.DormandPrince.compute`. If the grid has
    no intermediate points, the integrator reports the points that it
    internally traverses.

    Parameters
    ----------
    config : :class:`~odekit.integrators.configs.DormandPrinceConfig`, optional
        Step bounds and tolerances. Keyword arguments build one when omitted.

    Raises
    ------
    :class:`~odekit.utils.exceptions.ConfigurationError`
        If the configuration is invalid.

    Examples
    --------
    >>> import numpy as np
    >>> def dydx(x, y, f):
    ...     f[0] = y[0]
    >>> ys, xs = DormandPrince().compute(dydx, [1.0], [0.0, 1.0])
    >>> bool(abs(ys[-1, 0] - np.e) < 1e-3)
    True
    """

    _A = DOPRI5_A
    _C = DOPRI5_C
    _E = DOPRI5_E
    _N_STAGES = DOPRI5_N_STAGES

    def __init__(self, config: Optional[DormandPrinceConfig] = None, **kwargs):
        if config is None:
            config = DormandPrinceConfig(**kwargs)
        elif kwargs:
            raise TypeError("pass either a configuration or keyword arguments, not both")
        else:
            config._validate()
        super().__init__("DOPRI5", config)

    @property
    def order(self) -> int:
        return 5

    def compute_with_stats(self, dydx, y0, xs):
        y0, xs = self.validate_inputs(y0, xs)

        config = self._config
        relerr = config.rel_error
        threshold = config.abs_error / relerr
        power = DOPRI5_ERROR_EXPONENT
        last = self._N_STAGES - 1

        stats = Stats()

        nd = y0.size
        z = np.empty(nd, dtype=np.float64)
        y = y0.copy()
        ynew = np.empty(nd, dtype=np.float64)
        f = np.zeros((self._N_STAGES, nd), dtype=np.float64)

        x, xend = float(xs[0]), float(xs[-1])

        writer = make_writer(xs, y0)

        dydx(x, y, f[0])
        stats.evaluations += 1

        hmax = config.max_step
        if hmax == 0:
            hmax = 0.1 * (xend - x)

        h = config.try_step
        if h == 0:
            h = self._initial_step(y, f[0], float(xs[1]) - x, hmax, threshold, relerr)

        done = False
        while True:
            stats.steps += 1

            hmin = MIN_STEP_ULPS * spacing(x)
            if h < hmin:
                h = hmin
            if h > hmax:
                h = hmax

            # Close to the end?
            if 1.1 * h >= xend - x:
                h = xend - x
                done = True

            rejected = False
            while True:
                xnew = xend if done else x + h
                self._rk_embedded_step(dydx, x, y, f, h, xnew, z, ynew)
                stats.evaluations += last

                err = error_norm_jit_kernel(y, ynew, f, h, self._E, threshold)
                if err <= relerr:
                    break

                stats.rejections += 1

                if h <= hmin:
                    ys_partial, xs_partial = writer.partial()
                    logger.warning(
                        f"{self} step-size underflow at x={x:.16e} "
                        f"(h={h:.3e}, error={err:.3e}) after {stats.steps} steps"
                    )
                    raise StepSizeUnderflowError(
                        "encountered a step-size underflow",
                        x=x, stats=stats, ys=ys_partial, xs=xs_partial,
                    )

                if rejected:
                    h = 0.5 * h
                else:
                    scale = 0.8 * (relerr / err) ** power
                    if scale > 0.1:
                        h = scale * h
                    else:
                        h = 0.1 * h

                if h < hmin:
                    h = hmin

                done = False
                rejected = True

            writer.emit(x, y, f, h, xnew, ynew, dense_output)

            if done:
                break

            x = xnew
            f[0] = f[last]
            y[:] = ynew

            if rejected:
                continue

            scale = 1.25 * (err / relerr) ** power
            if scale > 0.2:
                h = h / scale
            else:
                h = 5 * h

        logger.debug(
            f"{self} finished: {stats.steps} steps, {stats.rejections} rejections, "
            f"{stats.evaluations} evaluations"
        )
        ys_out, xs_out = writer.result()
        return ys_out, xs_out, stats

    def _rk_embedded_step(self, dydx, x, y, f, h, xnew, z, ynew):
        """Evaluate stages 2-7 of a trial step of size *h* from ``(x, y)``.

        The first stage ``f[0]`` must already hold the derivative at *x*. The
        5th-order solution is written into *ynew* and its derivative into the
        last stage.
        """
        A, C = self._A, self._C
        last = self._N_STAGES - 1
        for i in range(1, last):
            rk_combine_jit_kernel(y, f, h, A[i], i, z)
            dydx(x + C[i] * h, z, f[i])
        rk_combine_jit_kernel(y, f, h, A[last], last, ynew)
        dydx(xnew, ynew, f[last])

    @staticmethod
    def _initial_step(y, f1, h, hmax, threshold, relerr):
        """Choose the first trial step from the initial derivative."""
        if h > hmax:
            h = hmax

        scale = np.max(np.abs(f1) / np.maximum(np.abs(y), threshold))
        scale = scale / (0.8 * relerr ** DOPRI5_ERROR_EXPONENT)

        if h * scale > 1:
            h = 1 / scale
        return float(h)
