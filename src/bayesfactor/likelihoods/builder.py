from __future__ import annotations
import math
from typing import Callable, Dict, Tuple

from bayesfactor.distributions import (
    density_normal,
    density_student_t_scaled,
    density_noncentral_t,
    density_binomial,
)
from bayesfactor.errors import MalformedParams, UnknownFamily
from bayesfactor.types import Likelihood, LikelihoodSpec, coerce_spec


def normal_likelihood(mean: float, sd: float) -> Callable[[float], float]:
    def f(x: float) -> float:
        return density_normal(x, mean, sd)
    return f


def student_t_likelihood(mean: float, sd: float, df: float) -> Callable[[float], float]:
    def f(x: float) -> float:
        return density_student_t_scaled(x, mean, sd, df)
    return f


def noncentral_t_likelihood(t: float, df: float) -> Callable[[float], float]:
    """Density of the observed t statistic with the parameter as noncentrality."""
    def f(x: float) -> float:
        return density_noncentral_t(t, df, x)
    return f


def noncentral_d_likelihood(d: float, df: float) -> Callable[[float], float]:
    """Effect-size likelihood expressed through the noncentral t.

    The observed d is rescaled to a t statistic d*sqrt(df+1) and the effect
    size parameter x to the noncentrality x*sqrt(df+1).
    """
    root = math.sqrt(df + 1.0)

    def f(x: float) -> float:
        return density_noncentral_t(d * root, df, root * x)
    return f


def binomial_likelihood(successes: float, trials: float) -> Callable[[float], float]:
    def f(x: float) -> float:
        return density_binomial(successes, trials, x)
    return f


def _binomial_centre(successes: float, trials: float) -> Tuple[float, float]:
    if not trials > 0:
        return 0.5, 0.5
    p = min(max(successes / trials, 0.0), 1.0)
    return p, math.sqrt(max(p * (1.0 - p), 1.0 / trials) / trials)


# family -> (location, scale) of the likelihood as a function of the parameter
LIKELIHOOD_CENTRES: Dict[str, Callable[..., Tuple[float, float]]] = {
    "normal": lambda mean, sd: (mean, sd),
    "student_t": lambda mean, sd, df: (mean, sd),
    "noncentral_t": lambda t, df: (t, 1.0),
    "noncentral_d": lambda d, df: (d, 1.0 / math.sqrt(df + 1.0) if df > -1.0 else 1.0),
    "binomial": _binomial_centre,
}


# family -> (ordered param names, constructor)
LIKELIHOOD_FAMILIES: Dict[str, Tuple[Tuple[str, ...], Callable[..., Callable[[float], float]]]] = {
    "normal": (("mean", "sd"), normal_likelihood),
    "student_t": (("mean", "sd", "df"), student_t_likelihood),
    "noncentral_t": (("t", "df"), noncentral_t_likelihood),
    "noncentral_d": (("d", "df"), noncentral_d_likelihood),
    "binomial": (("successes", "trials"), binomial_likelihood),
}


def check_likelihood_spec(spec) -> LikelihoodSpec:
    """Coerce spec and validate its family and arity without building anything."""
    spec = coerce_spec(spec, LikelihoodSpec)
    entry = LIKELIHOOD_FAMILIES.get(spec.family)
    if entry is None:
        raise UnknownFamily("likelihood", spec.family, LIKELIHOOD_FAMILIES.keys())
    names, _ = entry
    if len(spec.params) != len(names):
        raise MalformedParams.arity(spec.family, names, len(spec.params))
    return spec


def build_likelihood(spec) -> Likelihood:
    """Build the likelihood function described by spec.

    Parameters
    ----------
    spec : LikelihoodSpec | mapping | (family, params)
        Family name and ordered parameters.

    Returns
    -------
    Likelihood
        evaluate(x) gives the likelihood of the observed data at parameter x;
        the family tag later selects the integration bounds.

    Raises
    ------
    UnknownFamily
        If the family has no entry in LIKELIHOOD_FAMILIES.
    MalformedParams
        If the number of params does not match the family.
    """
    spec = check_likelihood_spec(spec)
    _, ctor = LIKELIHOOD_FAMILIES[spec.family]
    location, scale = LIKELIHOOD_CENTRES[spec.family](*spec.params)
    return Likelihood(
        evaluate=ctor(*spec.params),
        family=spec.family,
        params=spec.params,
        location=float(location),
        scale=float(scale),
    )
