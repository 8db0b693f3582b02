"""Numerical integration of initial-value problems for systems of ODEs."""

from odekit.integrators import (DormandPrince, DormandPrinceConfig,
                                RungeKutta4, RungeKuttaConfig, Solution,
                                Stats, wrap_rhs)
from odekit.utils.exceptions import (ConfigurationError, OdekitError,
                                     StepSizeUnderflowError)

__version__ = "0.1.0"

__all__ = [
    "DormandPrince",
    "DormandPrinceConfig",
    "RungeKutta4",
    "RungeKuttaConfig",
    "Solution",
    "Stats",
    "wrap_rhs",
    "ConfigurationError",
    "OdekitError",
    "StepSizeUnderflowError",
]
