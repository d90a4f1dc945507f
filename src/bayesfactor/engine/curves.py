from __future__ import annotations
import numpy as np
import pandas as pd

from bayesfactor.types import Predictive


def predictive_curve(pred: Predictive, lower: float, upper: float, n: int = 101) -> pd.DataFrame:
    """Tabulate the likelihood, prior and their product on an even grid.

    Parameters
    ----------
    pred : Predictive
        Result of predictive() or one side of compare_models().
    lower, upper : float
        Finite grid limits, lower < upper.
    n : int
        Number of grid points including both ends.

    Returns
    -------
    pandas.DataFrame
        Columns x, likelihood, prior, product; one row per grid point.
    """
    lower = float(lower)
    upper = float(upper)
    if not (np.isfinite(lower) and np.isfinite(upper) and lower < upper):
        raise ValueError(f"curve limits must be finite with lower < upper, got [{lower}, {upper}]")
    if int(n) < 2:
        raise ValueError(f"curve needs at least 2 points, got n={n}")
    x = np.linspace(lower, upper, int(n))
    lik = np.array([pred.likelihood(float(v)) for v in x], dtype=float)
    pri = np.array([pred.prior(float(v)) for v in x], dtype=float)
    return pd.DataFrame({"x": x, "likelihood": lik, "prior": pri, "product": lik * pri})


def default_curve_limits(pred: Predictive, width: float = 4.0) -> tuple:
    """Suggest finite plotting limits for a predictive.

    Uses the integration bounds when both are finite. Otherwise centres on
    the likelihood's location parameter (mean or d) with +-width scales,
    falling back to [-width, width].
    """
    if pred.bounds is not None and np.all(np.isfinite(pred.bounds)):
        return float(pred.bounds[0]), float(pred.bounds[1])
    lik = pred.likelihood_model
    if lik is not None and lik.family in ("normal", "student_t"):
        mean, sd = lik.params[0], lik.params[1]
        return float(mean - width * sd), float(mean + width * sd)
    if lik is not None and lik.family == "noncentral_d":
        d, df = lik.params
        sd = 1.0 / np.sqrt(df + 1.0)
        return float(d - width * sd), float(d + width * sd)
    return -float(width), float(width)
