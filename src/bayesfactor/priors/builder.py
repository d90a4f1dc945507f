from __future__ import annotations
from typing import Callable, Dict, Tuple

import numpy as np

from bayesfactor.distributions import (
    density_beta,
    density_cauchy,
    density_normal,
    density_student_t_scaled,
    density_uniform,
)
from bayesfactor.errors import MalformedParams, UnknownFamily
from bayesfactor.numerics import QuadIntegrator, breakpoints
from bayesfactor.types import Prior, PriorSpec, coerce_spec
from bayesfactor.utils.constants import HALF_LINE_K
from bayesfactor.utils.logging import warn


def indicator(x: float, lo: float, hi: float) -> float:
    """1.0 if lo <= x <= hi else 0.0 (inclusive at both ends)."""
    return 1.0 if lo <= x <= hi else 0.0


def _is_half_line(lo: float, hi: float) -> bool:
    return (lo == 0.0 and hi == np.inf) or (lo == -np.inf and hi == 0.0)


def truncated_prior(
    family: str,
    density: Callable[[float], float],
    lo: float,
    hi: float,
    integrator: Callable[[Callable[[float], float], float, float], float],
    location: float = 0.0,
    scale: float = 1.0,
) -> Prior:
    """Restrict density to [lo, hi] and renormalize it.

    Normalization policy
    --------------------
    - (-inf, +inf): no truncation, k = 1 and the raw density is used.
    - (0, +inf) or (-inf, 0): k = 2 without integrating. This is exact only
      when the density is symmetric about zero, i.e. location == 0. It is
      applied for any location; a warning is logged when location != 0.
    - anything else: k = 1 / integral of the density over [lo, hi].
      The integral is split around location +- CORE_WIDTH*scale so mass far
      from the origin is not missed when a bound is infinite.

    Raises
    ------
    MalformedParams
        If lo > hi, or the density has no finite positive mass on [lo, hi].
    """
    if np.isnan(lo) or np.isnan(hi) or lo > hi:
        raise MalformedParams(family, f"truncation interval [{lo}, {hi}] is empty")

    if lo == -np.inf and hi == np.inf:
        return Prior(
            evaluate=density, family=family, support=(lo, hi), normalizer=1.0, location=location, scale=scale
        )

    if _is_half_line(lo, hi):
        k = HALF_LINE_K
        if location != 0.0:
            warn(
                "bayesfactor.prior",
                f"{family} prior truncated to [{lo}, {hi}] uses k={k} which assumes location 0; got location={location}",
            )
    else:
        def masked(x: float) -> float:
            return density(x) * indicator(x, lo, hi)

        # masked is zero outside [lo, hi], so integrating there equals the full-line integral
        auc = integrator(masked, lo, hi, points=breakpoints([(location, scale)], lo, hi))
        if not np.isfinite(auc) or auc <= 0.0:
            raise MalformedParams(family, f"no probability mass on [{lo}, {hi}] (integral={auc!r})")
        k = 1.0 / auc

    def evaluate(x: float) -> float:
        return density(x) * indicator(x, lo, hi) * k

    return Prior(
        evaluate=evaluate,
        family=family,
        support=(lo, hi),
        normalizer=float(k),
        location=location,
        scale=scale,
    )


def cauchy_prior(location: float, scale: float, lo: float, hi: float, integrator) -> Prior:
    def density(x: float) -> float:
        return density_cauchy(x, location, scale)
    return truncated_prior("cauchy", density, lo, hi, integrator, location=location, scale=scale)


def normal_prior(mean: float, sd: float, lo: float, hi: float, integrator) -> Prior:
    def density(x: float) -> float:
        return density_normal(x, mean, sd)
    return truncated_prior("normal", density, lo, hi, integrator, location=mean, scale=sd)


def student_t_prior(mean: float, sd: float, df: float, lo: float, hi: float, integrator) -> Prior:
    def density(x: float) -> float:
        return density_student_t_scaled(x, mean, sd, df)
    return truncated_prior("student_t", density, lo, hi, integrator, location=mean, scale=sd)


def beta_prior(alpha: float, beta: float, integrator=None) -> Prior:
    # Beta lives on [0, 1]; the indicator keeps evaluate zero elsewhere.
    def evaluate(x: float) -> float:
        return density_beta(x, alpha, beta) * indicator(x, 0.0, 1.0)
    mean = alpha / (alpha + beta) if alpha + beta > 0 else 0.5
    sd = np.sqrt(alpha * beta / ((alpha + beta) ** 2 * (alpha + beta + 1.0))) if alpha + beta > 0 else 0.5
    return Prior(evaluate=evaluate, family="beta", support=(0.0, 1.0), location=float(mean), scale=float(sd))


def uniform_prior(lower: float, upper: float, integrator=None) -> Prior:
    if np.isnan(lower) or np.isnan(upper) or not lower < upper:
        raise MalformedParams("uniform", f"lower bound {lower} must be below upper bound {upper}")

    def evaluate(x: float) -> float:
        return density_uniform(x, lower, upper)
    return Prior(
        evaluate=evaluate,
        family="uniform",
        support=(lower, upper),
        location=0.5 * (lower + upper),
        scale=0.5 * (upper - lower),
    )


def point_prior(value: float, integrator=None) -> Prior:
    def evaluate(x: float) -> float:
        return 1.0 if x == value else 0.0
    return Prior(
        evaluate=evaluate, family="point", point_value=value, support=(value, value), location=value, scale=0.0
    )


# family -> (ordered param names, constructor)
PRIOR_FAMILIES: Dict[str, Tuple[Tuple[str, ...], Callable[..., Prior]]] = {
    "cauchy": (("location", "scale", "min", "max"), cauchy_prior),
    "normal": (("mean", "sd", "min", "max"), normal_prior),
    "student_t": (("mean", "sd", "df", "min", "max"), student_t_prior),
    "beta": (("alpha", "beta"), beta_prior),
    "uniform": (("lower", "upper"), uniform_prior),
    "point": (("value",), point_prior),
}


def check_prior_spec(spec) -> PriorSpec:
    """Coerce spec and validate its family and arity without building anything."""
    spec = coerce_spec(spec, PriorSpec)
    entry = PRIOR_FAMILIES.get(spec.family)
    if entry is None:
        raise UnknownFamily("prior", spec.family, PRIOR_FAMILIES.keys())
    names, _ = entry
    if len(spec.params) != len(names):
        raise MalformedParams.arity(spec.family, names, len(spec.params))
    return spec


def build_prior(spec, integrator=None) -> Prior:
    """Build a normalized prior (or point mass) from spec.

    Parameters
    ----------
    spec : PriorSpec | mapping | (family, params)
        Family name and ordered parameters.
    integrator : callable, optional
        integrator(f, lower, upper, points=None) -> float used to normalize general
        truncations. Defaults to a fresh QuadIntegrator.

    Raises
    ------
    UnknownFamily
        If the family has no entry in PRIOR_FAMILIES.
    MalformedParams
        On wrong arity or an impossible truncation interval.
    """
    spec = check_prior_spec(spec)
    _, ctor = PRIOR_FAMILIES[spec.family]
    if integrator is None:
        integrator = QuadIntegrator()
    return ctor(*spec.params, integrator)
