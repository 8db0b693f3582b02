from dataclasses import dataclass

import numpy as np


@dataclass
class Stats:
    """Work done by an integrator during one call.

    Attributes
    ----------
    evaluations : int
        Number of invocations of the derivative function.
    rejections : int
        Number of rejected trial steps.
    steps : int
        Number of steps the algorithm has taken.
    """
    evaluations: int = 0
    rejections: int = 0
    steps: int = 0


@dataclass
class Solution:
    """
    Container for integration results.

    Attributes
    ----------
    times : numpy.ndarray
        Independent-variable values, shape (n_points,)
    states : numpy.ndarray
        State vectors, shape (n_points, n_dim)
    stats : Stats or None, optional
        Work statistics of the run that produced the solution.
    """
    times: np.ndarray
    states: np.ndarray
    stats: "Stats | None" = None

    def __post_init__(self):
        if len(self.times) != len(self.states):
            raise ValueError(
                f"Times and states must have same length: "
                f"{len(self.times)} != {len(self.states)}"
            )

    @property
    def final(self) -> np.ndarray:
        """State at the last point."""
        return self.states[-1]
