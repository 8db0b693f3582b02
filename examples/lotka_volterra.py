"""Integrate the Lotka-Volterra equations on a fixed grid and on the
integrator's own steps, and print the work statistics of both runs."""

import numpy as np

from odekit import DormandPrince, DormandPrinceConfig
from odekit.utils.log_config import logger


def lotka_volterra(x, y, f):
    f[0] = 1.5 * y[0] - y[0] * y[1]
    f[1] = -3.0 * y[1] + y[0] * y[1]


def main():
    integrator = DormandPrince(DormandPrinceConfig(abs_error=1e-8, rel_error=1e-6))
    y0 = np.array([10.0, 5.0])

    xs = np.linspace(0.0, 15.0, 151)
    ys, _, stats = integrator.compute_with_stats(lotka_volterra, y0, xs)
    logger.info(f"Fixed grid  : {xs.size} points, {stats}")
    logger.info(f"Final state : {ys[-1]}")

    ys, xs, stats = integrator.compute_with_stats(lotka_volterra, y0, [0.0, 15.0])
    logger.info(f"Free running: {xs.size} points, {stats}")
    logger.info(f"Final state : {ys[-1]}")


if __name__ == "__main__":
    main()
