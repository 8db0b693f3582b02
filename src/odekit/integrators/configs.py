from dataclasses import dataclass

from odekit.config import ABS_ERROR, REL_ERROR
from odekit.utils.exceptions import ConfigurationError


@dataclass(frozen=True)
class DormandPrinceConfig:
    """Configuration of the adaptive Dormand-Prince integrator.

    Parameters
    ----------
    try_step : float, default 0.0
        Initial trial step. Zero lets the integrator derive it from the first
        derivative evaluation and the relative tolerance.
    max_step : float, default 0.0
        Upper bound on the step size. Zero means one tenth of the
        integration interval.
    abs_error : float, default 1e-6
        Absolute error tolerance.
    rel_error : float, default 1e-3
        Relative error tolerance.

    Raises
    ------
    :class:`~odekit.utils.exceptions.ConfigurationError`
        If a step bound is negative or a tolerance is not positive.
    """

    try_step: float = 0.0
    max_step: float = 0.0
    abs_error: float = ABS_ERROR
    rel_error: float = REL_ERROR

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        if self.try_step < 0:
            raise ConfigurationError("the initial step should be nonnegative")
        if self.max_step < 0:
            raise ConfigurationError("the maximal step should be nonnegative")
        if self.abs_error <= 0:
            raise ConfigurationError("the absolute error tolerance should be positive")
        if self.rel_error <= 0:
            raise ConfigurationError("the relative error tolerance should be positive")


@dataclass(frozen=True)
class RungeKuttaConfig:
    """Configuration of the fixed-step Runge-Kutta integrator.

    Parameters
    ----------
    step : float
        Step of integration.
    """

    step: float

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        if not self.step > 0:
            raise ConfigurationError("the step should be positive")
