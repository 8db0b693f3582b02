"""Integrators of systems of ordinary differential equations dy/dx = f(x, y).

- :class:`DormandPrince` -- Dormand-Prince 5(4) with adaptive steps and dense output
- :class:`RungeKutta4` -- classical 4th-order Runge-Kutta with a fixed step
"""

from odekit.integrators.base import wrap_rhs
from odekit.integrators.configs import DormandPrinceConfig, RungeKuttaConfig
from odekit.integrators.dopri import DormandPrince
from odekit.integrators.rk import RungeKutta4
from odekit.integrators.types import Solution, Stats

__all__ = [
    "DormandPrince",
    "DormandPrinceConfig",
    "RungeKutta4",
    "RungeKuttaConfig",
    "Solution",
    "Stats",
    "wrap_rhs",
]
