"""
Scalar density and mass functions backed by scipy.stats.

Every function takes the evaluation point and the distribution parameters as
plain floats and returns a float. Domain errors (sd <= 0, successes > trials,
...) surface as scipy's own nan/0 conventions; callers do not guard them.
"""
from __future__ import annotations
import numpy as np
from scipy import stats


def density_normal(x: float, mean: float, sd: float) -> float:
    return float(stats.norm.pdf(x, loc=mean, scale=sd))


def density_student_t_scaled(x: float, mean: float, sd: float, df: float) -> float:
    """Student-t(df) density shifted by mean and scaled by sd."""
    return float(stats.t.pdf(x, df, loc=mean, scale=sd))


def density_noncentral_t(t: float, df: float, ncp: float) -> float:
    """Noncentral-t density at observed statistic t with noncentrality ncp.

    Quadrature over an infinite range visits noncentralities far from t where
    scipy can return nan instead of an underflowed zero; those map to 0.0.
    """
    with np.errstate(all="ignore"):
        val = float(stats.nct.pdf(t, df, ncp))
    return val if np.isfinite(val) else 0.0


def density_binomial(successes: float, trials: float, p: float) -> float:
    return float(stats.binom.pmf(successes, trials, p))


def density_beta(x: float, alpha: float, beta: float) -> float:
    return float(stats.beta.pdf(x, alpha, beta))


def density_cauchy(x: float, location: float, scale: float) -> float:
    return float(stats.cauchy.pdf(x, loc=location, scale=scale))


def density_uniform(x: float, lo: float, hi: float) -> float:
    return float(stats.uniform.pdf(x, loc=lo, scale=hi - lo))
