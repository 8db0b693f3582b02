# Numerical kernels
FASTMATH = False  # Global flag for Numba's fastmath option

# Default tolerances of the adaptive integrator
ABS_ERROR = 1e-6
REL_ERROR = 1e-3

# Safety multiple of the machine spacing used as the smallest admissible step
MIN_STEP_ULPS = 16
