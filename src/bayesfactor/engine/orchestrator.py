from __future__ import annotations

import numpy as np

from bayesfactor.errors import NonFiniteResult
from bayesfactor.likelihoods import build_likelihood, check_likelihood_spec
from bayesfactor.numerics import QuadIntegrator
from bayesfactor.priors.builder import build_prior, check_prior_spec
from bayesfactor.types import BayesFactorResult
from bayesfactor.utils.logging import log, warn
from .predictive import predictive


def _ratio(alt: float, null: float) -> float:
    # IEEE semantics: x/0 -> +-inf, 0/0 -> nan
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(alt) / np.float64(null))


def compare_models(likelihood, alt_prior, null_prior, *, integrator=None, verbose: bool = False) -> BayesFactorResult:
    """Evaluate both hypotheses and return their Bayes factor with the predictives.

    Parameters
    ----------
    likelihood : LikelihoodSpec | mapping | (family, params)
        Likelihood of the observed data, shared by both hypotheses.
    alt_prior, null_prior : PriorSpec | mapping | (family, params)
        Priors over the parameter under the alternative and the null.
    integrator : callable, optional
        integrator(f, lower, upper) -> float. A fresh QuadIntegrator is used
        when omitted.
    verbose : bool
        Log both marginal likelihoods and the ratio.

    Returns
    -------
    BayesFactorResult
        bf10 = alt marginal / null marginal, plus both Predictive records.

    All three specs are validated before any density is built or integrated,
    so UnknownFamily and MalformedParams surface without numerical work.
    """
    lik_spec = check_likelihood_spec(likelihood)
    alt_spec = check_prior_spec(alt_prior)
    null_spec = check_prior_spec(null_prior)
    if integrator is None:
        integrator = QuadIntegrator()

    data = build_likelihood(lik_spec)
    alt = build_prior(alt_spec, integrator)
    null = build_prior(null_spec, integrator)

    alt_pred = predictive(data, alt, integrator)
    null_pred = predictive(data, null, integrator)
    bf = _ratio(alt_pred.marginal_likelihood, null_pred.marginal_likelihood)

    if verbose:
        log(
            f"[bayesfactor] {data.family}{tuple(data.params)}: "
            f"alt {alt.family} marginal={alt_pred.marginal_likelihood:.6g}, "
            f"null {null.family} marginal={null_pred.marginal_likelihood:.6g}, BF10={bf:.6g}"
        )
    return BayesFactorResult(
        bf10=bf,
        alt=alt_pred,
        null=null_pred,
        meta={"likelihood": lik_spec, "alt_prior": alt_spec, "null_prior": null_spec},
    )


def bayes_factor(likelihood, alt_prior, null_prior, *, integrator=None, strict: bool = False, verbose: bool = False) -> float:
    """Bayes factor of the alternative prior over the null prior.

    A zero or undefined null marginal likelihood gives inf or nan. That value
    is returned (and logged) unless strict=True, in which case NonFiniteResult
    is raised.
    """
    result = compare_models(likelihood, alt_prior, null_prior, integrator=integrator, verbose=verbose)
    if not result.is_finite:
        alt_m = result.alt.marginal_likelihood
        null_m = result.null.marginal_likelihood
        if strict:
            raise NonFiniteResult(result.bf10, alt_m, null_m)
        warn("bayesfactor", f"non-finite Bayes factor {result.bf10} (alt marginal={alt_m}, null marginal={null_m})")
    return result.bf10
