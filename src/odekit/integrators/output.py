"""Output strategies shared by the step loops.

The integrators either report the solution on a caller-supplied grid or at
the points they traverse internally. The choice is made once per call by
:func:`~odekit.integrators.output.make_writer`.
"""

from typing import Callable, Tuple

import numpy as np

# dense(x, y, f, h, xnext, out) -> None
DenseOutput = Callable[[float, np.ndarray, np.ndarray, float, float, np.ndarray], None]


class _FixedGridWriter:
    """Fill a preallocated solution at the requested grid points.

    Points that coincide with the end of a step are copied; points inside a
    step are reconstructed with the dense output of that step.
    """

    def __init__(self, xs: np.ndarray, y0: np.ndarray):
        self._xs = xs
        self._ys = np.empty((xs.size, y0.size), dtype=np.float64)
        self._ys[0] = y0
        self._count = 1

    def emit(self, x, y, f, h, xnew, ynew, dense: DenseOutput) -> None:
        xs, ys = self._xs, self._ys
        while self._count < xs.size:
            xnext = xs[self._count]
            if xnew - xnext < 0:
                break
            if xnext == xnew:
                ys[self._count] = ynew
            else:
                dense(x, y, f, h, xnext, ys[self._count])
            self._count += 1

    def result(self) -> Tuple[np.ndarray, np.ndarray]:
        return self._ys, self._xs.copy()

    def partial(self) -> Tuple[np.ndarray, np.ndarray]:
        return self._ys[:self._count].copy(), self._xs[:self._count].copy()


class _AppendWriter:
    """Record every accepted step in a growing solution."""

    def __init__(self, x0: float, y0: np.ndarray):
        self._xs = [float(x0)]
        self._ys = [y0.copy()]

    def emit(self, x, y, f, h, xnew, ynew, dense: DenseOutput) -> None:
        self._xs.append(float(xnew))
        self._ys.append(ynew.copy())

    def result(self) -> Tuple[np.ndarray, np.ndarray]:
        return np.array(self._ys, dtype=np.float64), np.array(self._xs, dtype=np.float64)

    def partial(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.result()


def make_writer(xs: np.ndarray, y0: np.ndarray):
    """Select the output strategy from the length of the grid.

    More than two points request the solution at exactly those points; two
    points let the integrator report its own steps.
    """
    if xs.size > 2:
        return _FixedGridWriter(xs, y0)
    return _AppendWriter(xs[0], y0)
