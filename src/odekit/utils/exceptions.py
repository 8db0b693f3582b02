"""
Custom exceptions for the odekit package.
"""


class OdekitError(Exception):
    """Base exception for odekit errors.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConfigurationError(OdekitError, ValueError):
    """Raised when an integrator configuration violates its bounds.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class StepSizeUnderflowError(OdekitError):
    """Raised when no acceptable step exists above the minimum step size.

    The work done before the failure is kept on the exception so that callers
    can inspect where and why the integration broke down.

    Parameters
    ----------
    message : str
        The error message.
    x : float
        Position of the independent variable at which the step failed.
    stats : :class:`~odekit.integrators.types.Stats`
        Work statistics accumulated up to the failure.
    ys : numpy.ndarray or None, optional
        Rows of the solution emitted before the failure.
    xs : numpy.ndarray or None, optional
        Independent-variable values matching *ys*.
    """

    def __init__(self, message: str, x: float, stats, ys=None, xs=None):
        super().__init__(message)
        self.x = x
        self.stats = stats
        self.ys = ys
        self.xs = xs
