"""
Shared numerical constants for the integration and normalization code.

These values centralize literals used by the prior builder and the quadrature
wrapper. Do not change them without re-running the reference scenarios.
"""

# scipy.integrate.quad tolerances and subdivision limit. epsabs = 0 makes the
# core integral purely relative; marginal likelihoods can be far below 1e-10.
QUAD_EPSABS: float = 0.0
QUAD_EPSREL: float = 1e-8
QUAD_LIMIT: int = 200

# Half-width, in scale units, of the finite core carved out of infinite
# integration ranges around each likelihood/prior location.
CORE_WIDTH: float = 10.0

# Normalization constant for half-line truncation at zero, (0, +inf) or (-inf, 0).
# Exact only for densities symmetric about zero.
HALF_LINE_K: float = 2.0

# Parameter domain of the binomial likelihood (success probability)
BINOMIAL_BOUNDS: tuple = (0.0, 1.0)
