from __future__ import annotations
from typing import Callable, Tuple

import numpy as np

from bayesfactor.numerics import QuadIntegrator, breakpoints
from bayesfactor.types import Likelihood, Predictive, Prior
from bayesfactor.utils.constants import BINOMIAL_BOUNDS


def multiply(likelihood: Callable[[float], float], prior: Callable[[float], float]) -> Callable[[float], float]:
    def product(x: float) -> float:
        return likelihood(x) * prior(x)
    return product


def integration_bounds(likelihood: Likelihood, prior: Prior | None = None) -> Tuple[float, float]:
    """Return the interval the marginal likelihood is integrated over.

    The likelihood family fixes the parameter space: [0, 1] for binomial,
    the real line otherwise. When a prior is given the interval is clipped
    to its support, outside of which the product is identically zero.
    """
    if likelihood.family == "binomial":
        lo, hi = BINOMIAL_BOUNDS
    else:
        lo, hi = -np.inf, np.inf
    if prior is not None:
        lo = max(lo, float(prior.support[0]))
        hi = min(hi, float(prior.support[1]))
    return float(lo), float(hi)


def predictive(likelihood: Likelihood, prior: Prior, integrator=None) -> Predictive:
    """Marginal likelihood of the data under likelihood x prior.

    A point prior collapses the integral to one likelihood evaluation at the
    point and returns before the integrator is touched. Otherwise the product
    is integrated over integration_bounds(likelihood, prior), split at the
    likelihood and prior centres; an empty interval gives 0.0.
    """
    product = multiply(likelihood.evaluate, prior.evaluate)

    if prior.is_point:
        marginal = float(likelihood.evaluate(prior.point_value))
        return Predictive(
            product=product,
            marginal_likelihood=marginal,
            likelihood=likelihood.evaluate,
            prior=prior.evaluate,
            likelihood_model=likelihood,
            prior_model=prior,
            bounds=None,
        )

    lo, hi = integration_bounds(likelihood, prior)
    if lo < hi:
        if integrator is None:
            integrator = QuadIntegrator()
        points = breakpoints([(likelihood.location, likelihood.scale), (prior.location, prior.scale)], lo, hi)
        marginal = float(integrator(product, lo, hi, points=points))
    else:
        marginal = 0.0

    return Predictive(
        product=product,
        marginal_likelihood=marginal,
        likelihood=likelihood.evaluate,
        prior=prior.evaluate,
        likelihood_model=likelihood,
        prior_model=prior,
        bounds=(lo, hi),
    )
