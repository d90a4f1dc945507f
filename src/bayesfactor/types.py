from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple

import numpy as np


def _coerce_params(params) -> Tuple[float, ...]:
    if params is None:
        return ()
    if isinstance(params, (str, bytes)) or np.isscalar(params):
        params = [params]
    return tuple(float(p) for p in params)


@dataclass(frozen=True)
class LikelihoodSpec:
    """Named likelihood family plus its ordered parameters.

    Fields
    ------
    family : str
        One of normal, student_t, noncentral_t, noncentral_d, binomial.
        Stored lower-cased and stripped.
    params : tuple of float
        Ordered parameters for the family, e.g. (mean, sd) for normal.
    """
    family: str
    params: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", str(self.family).strip().lower())
        object.__setattr__(self, "params", _coerce_params(self.params))


@dataclass(frozen=True)
class PriorSpec:
    """Named prior family plus its ordered parameters.

    Truncated families (cauchy, normal, student_t) take trailing min/max
    bounds; beta, uniform and point take none.
    """
    family: str
    params: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", str(self.family).strip().lower())
        object.__setattr__(self, "params", _coerce_params(self.params))


def coerce_spec(value: Any, cls):
    """Return value as an instance of cls (LikelihoodSpec or PriorSpec).

    Accepts an instance of cls, a mapping with "family" (or "name") and
    "params" keys, or a (family, params) pair.
    """
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        family = value.get("family", value.get("name"))
        return cls(family=family, params=value.get("params", ()))
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return cls(family=value[0], params=value[1])
    raise TypeError(f"cannot build {cls.__name__} from {type(value).__name__}")


@dataclass(frozen=True)
class Likelihood:
    """Likelihood of the observed data as a function of the unknown parameter.

    location and scale locate where evaluate(x) is concentrated in x; they
    only guide quadrature breakpoints.
    """
    evaluate: Callable[[float], float]
    family: str
    params: Tuple[float, ...] = ()
    location: float = 0.0
    scale: float = 1.0

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


@dataclass(frozen=True)
class Prior:
    """Prior density (or point mass) over the unknown parameter.

    Fields
    ------
    evaluate : callable
        x -> prior density at x. For family "point" this is an exact-match
        indicator and must never be integrated numerically.
    family : str
        Prior family name.
    point_value : float
        Location of the point mass; meaningful only when family == "point".
    support : (float, float)
        Interval outside which evaluate(x) is identically zero.
    normalizer : float
        Constant k the truncated density was multiplied by (1.0 when no
        normalization was applied).
    location, scale : float
        Centre and spread of the untruncated density, used for quadrature
        breakpoints.
    """
    evaluate: Callable[[float], float]
    family: str
    point_value: float = 0.0
    support: Tuple[float, float] = (-np.inf, np.inf)
    normalizer: float = 1.0
    location: float = 0.0
    scale: float = 1.0

    @property
    def is_point(self) -> bool:
        return self.family == "point"

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


@dataclass(frozen=True)
class Predictive:
    """Marginal likelihood of the data under one likelihood/prior pair.

    ``product`` is likelihood(x) * prior(x); ``likelihood`` and ``prior`` are
    the component functions, kept for inspection and tabulation. ``bounds``
    is the integration interval actually used, or None when the point-prior
    shortcut evaluated the likelihood directly.
    """
    product: Callable[[float], float]
    marginal_likelihood: float
    likelihood: Callable[[float], float]
    prior: Callable[[float], float]
    likelihood_model: Optional[Likelihood] = None
    prior_model: Optional[Prior] = None
    bounds: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class BayesFactorResult:
    """Bayes factor of the alternative over the null plus both predictives."""
    bf10: float
    alt: Predictive
    null: Predictive
    meta: dict = field(default_factory=dict)

    @property
    def bf01(self) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(1.0) / np.float64(self.bf10))

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite(self.bf10))
