"""Bayes factors from a likelihood and two competing priors over one parameter."""
from .types import LikelihoodSpec, PriorSpec, Likelihood, Prior, Predictive, BayesFactorResult
from .errors import BayesFactorError, UnknownFamily, MalformedParams, NonFiniteResult
from .likelihoods import build_likelihood
from .priors import (
    build_prior,
    ModelRecord,
    save_model_record,
    load_model_record,
    bayes_factor_from_record,
)
from .numerics import QuadIntegrator
from .engine import bayes_factor, compare_models, predictive, predictive_curve

__all__ = [
    "LikelihoodSpec",
    "PriorSpec",
    "Likelihood",
    "Prior",
    "Predictive",
    "BayesFactorResult",
    "BayesFactorError",
    "UnknownFamily",
    "MalformedParams",
    "NonFiniteResult",
    "build_likelihood",
    "build_prior",
    "ModelRecord",
    "save_model_record",
    "load_model_record",
    "bayes_factor_from_record",
    "QuadIntegrator",
    "bayes_factor",
    "compare_models",
    "predictive",
    "predictive_curve",
]
