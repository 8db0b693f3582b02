"""Provide the common interface of the integrators.

Every integrator solves dy/dx = f(x, y) given a derivative function
``dydx(x, y, f)`` that evaluates f(x, y) for the *x* and *y* in its first and
second arguments and stores the result in its third argument. The interval of
integration is ``[xs[0], xs[-1]]`` and the initial condition *y0* corresponds
to ``xs[0]``.
"""

from abc import ABC, abstractmethod
from typing import Callable, Tuple

import numpy as np

from odekit.integrators.types import Solution, Stats

Derivative = Callable[[float, np.ndarray, np.ndarray], None]


class _Integrator(ABC):
    """Define the minimal interface that every concrete integrator must satisfy.

    Parameters
    ----------
    name : str
        Human-readable identifier of the method.
    config
        Immutable configuration record. The integrator keeps no other state,
        so an instance can be reused for any number of sequential calls.

    Notes
    -----
    Subclasses *must* implement :func:`~odekit.integrators.base._Integrator.order`
    and :func:`~odekit.integrators.base._Integrator.compute_with_stats`.
    """

    def __init__(self, name: str, config):
        self.name = name
        self._config = config

    @property
    def config(self):
        return self._config

    @property
    @abstractmethod
    def order(self) -> int:
        """Order of accuracy of the integrator."""
        pass

    @abstractmethod
    def compute_with_stats(
        self,
        dydx: Derivative,
        y0: np.ndarray,
        xs: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, Stats]:
        """Integrate and report the work done.

        Parameters
        ----------
        dydx : callable
            Derivative function ``dydx(x, y, f)`` writing f(x, y) into *f*.
        y0 : array_like
            Initial state, shape (n_dim,).
        xs : array_like
            Grid of the independent variable with at least two entries.

        Returns
        -------
        ys : numpy.ndarray
            Solution, shape (n_points, n_dim), one row per entry of *xs_out*.
        xs_out : numpy.ndarray
            Independent-variable values of the rows of *ys*.
        stats : :class:`~odekit.integrators.types.Stats`
            Work statistics of the call.
        """
        pass

    def compute(self, dydx: Derivative, y0: np.ndarray, xs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Integrate dy/dx = f(x, y) and return ``(ys, xs_out)``."""
        ys, xs_out, _ = self.compute_with_stats(dydx, y0, xs)
        return ys, xs_out

    def integrate(self, dydx: Derivative, y0: np.ndarray, xs: np.ndarray) -> Solution:
        """Integrate and package the result as a :class:`~odekit.integrators.types.Solution`."""
        ys, xs_out, stats = self.compute_with_stats(dydx, y0, xs)
        return Solution(times=xs_out, states=ys, stats=stats)

    def validate_inputs(self, y0, xs) -> Tuple[np.ndarray, np.ndarray]:
        """Validate that the input arguments form a consistent integration task.

        Parameters
        ----------
        y0 : array_like
            Initial state vector.
        xs : array_like
            Non-decreasing grid with at least two entries.

        Returns
        -------
        tuple of numpy.ndarray
            Float copies of *y0* and *xs*.

        Raises
        ------
        ValueError
            If any of the following conditions holds:
            - *y0* is empty or not one-dimensional.
            - *xs* contains fewer than two points.
            - *xs* decreases anywhere.
            - ``xs[-1] <= xs[0]``.
        """
        y0 = np.array(y0, dtype=np.float64)
        xs = np.array(xs, dtype=np.float64)

        if y0.ndim != 1 or y0.size == 0:
            raise ValueError("Initial state must be a non-empty vector")
        if xs.ndim != 1 or xs.size < 2:
            raise ValueError("Must provide at least 2 points of the independent variable")
        if np.any(np.diff(xs) < 0):
            raise ValueError("Points of the independent variable must be non-decreasing")
        if not xs[-1] > xs[0]:
            raise ValueError("The interval of integration must have positive length")

        return y0, xs

    def __str__(self):
        return f"odekit-{self.name}"

    def __repr__(self):
        return f"{self.__class__.__name__}(name='{self.name}', config={self._config})"


def wrap_rhs(rhs: Callable[[float, np.ndarray], np.ndarray]) -> Derivative:
    """Adapt a ``rhs(x, y) -> array`` callable to the in-place derivative contract.

    Parameters
    ----------
    rhs : callable
        Function returning f(x, y) as a new array.

    Returns
    -------
    callable
        Function ``dydx(x, y, f)`` that stores ``rhs(x, y)`` into *f*.

    Raises
    ------
    ValueError
        When called, if *rhs* returns an array whose shape does not match *f*.
    """

    def dydx(x, y, f):
        value = np.asarray(rhs(x, y), dtype=np.float64)
        if value.shape != f.shape:
            raise ValueError(
                f"Derivative has shape {value.shape}, expected {f.shape}"
            )
        f[:] = value

    return dydx
