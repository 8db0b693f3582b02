"""Butcher tableau of the Dormand-Prince 5(4) pair with its dense output.

The seventh stage is evaluated at the new point with the 5th-order solution,
so its row of :data:`A` equals :data:`B` (first same as last).

References
----------
Dormand, J. R.; Prince, P. J. (1980). "A family of embedded Runge-Kutta
formulae". Journal of Computational and Applied Mathematics 6 (1): 19-26.

Hairer, E.; Norsett, S.; Wanner, G. (1993). "Solving Ordinary Differential
Equations I", Section II.6.
"""

import numpy as np

N_STAGES = 7

C = np.array([0.0, 1.0 / 5, 3.0 / 10, 4.0 / 5, 8.0 / 9, 1.0, 1.0], dtype=np.float64)

A = np.array([
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
    [1.0 / 5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
    [3.0 / 40, 9.0 / 40, 0.0, 0.0, 0.0, 0.0, 0.0],
    [44.0 / 45, -56.0 / 15, 32.0 / 9, 0.0, 0.0, 0.0, 0.0],
    [19372.0 / 6561, -25360.0 / 2187, 64448.0 / 6561, -212.0 / 729, 0.0, 0.0, 0.0],
    [9017.0 / 3168, -355.0 / 33, 46732.0 / 5247, 49.0 / 176, -5103.0 / 18656, 0.0, 0.0],
    [35.0 / 384, 0.0, 500.0 / 1113, 125.0 / 192, -2187.0 / 6784, 11.0 / 84, 0.0],
], dtype=np.float64)

# 5th-order weights used to advance the solution
B = A[N_STAGES - 1].copy()

# Difference between the 5th- and 4th-order weights
E = np.array([
    71.0 / 57600, 0.0, -71.0 / 16695, 71.0 / 1920, -17253.0 / 339200, 22.0 / 525, -1.0 / 40,
], dtype=np.float64)

# Quartic continuous extension: column k multiplies s**(k + 1)
P = np.array([
    [1.0, -183.0 / 64, 37.0 / 12, -145.0 / 128],
    [0.0, 0.0, 0.0, 0.0],
    [0.0, 1500.0 / 371, -1000.0 / 159, 1000.0 / 371],
    [0.0, -125.0 / 32, 125.0 / 12, -375.0 / 64],
    [0.0, 9477.0 / 3392, -729.0 / 106, 25515.0 / 6784],
    [0.0, -11.0 / 7, 11.0 / 3, -55.0 / 28],
    [0.0, 3.0 / 2, -4.0, 5.0 / 2],
], dtype=np.float64)

ERROR_EXPONENT = 1.0 / 5
