import math

import numpy as np
import pytest
from scipy import stats

from bayesfactor import (
    LikelihoodSpec,
    NonFiniteResult,
    PriorSpec,
    QuadIntegrator,
    UnknownFamily,
    MalformedParams,
    bayes_factor,
    build_likelihood,
    compare_models,
)

INF = math.inf

# likelihood, alt prior, null prior, expected BF10
REFERENCE = [
    (("noncentral_d", [2.03 / math.sqrt(80), 79.0]), ("cauchy", [0, 1, -INF, INF]), ("point", [0.0]), 1 / 1.557447),
    (("noncentral_t", [2.03, 79.0]), ("cauchy", [0, math.sqrt(80), -INF, INF]), ("point", [0.0]), 1 / 1.557447),
    (("normal", [5.5, 32.35]), ("normal", [0, 13.3, 0, INF]), ("point", [0.0]), 0.9745934),
    (("normal", [5, 10]), ("uniform", [0, 20.0]), ("point", [0.0]), 0.8871298),
    (("binomial", [8, 11]), ("beta", [2.5, 1]), ("point", [0.5]), 1 / 0.6632996),
    (("binomial", [2, 10]), ("normal", [0, 1, 0, 1]), ("point", [0.5]), 2.327971),
    (("student_t", [5.47, 32.2, 119]), ("student_t", [13.3, 4.93, 72, -INF, INF]), ("point", [0]), 0.9738),
]


class CountingIntegrator:
    def __init__(self):
        self.calls = []
        self._quad = QuadIntegrator()

    def __call__(self, f, lower, upper, points=None):
        self.calls.append((lower, upper))
        return self._quad(f, lower, upper, points=points)


@pytest.mark.parametrize("lik,alt,null,want", REFERENCE)
def test_reference_bayes_factors(lik, alt, null, want):
    got = bayes_factor(LikelihoodSpec(*lik), PriorSpec(*alt), PriorSpec(*null))
    assert np.isclose(got, want, rtol=1e-4, atol=0.0)


@pytest.mark.parametrize("lik,alt,null,want", REFERENCE)
def test_point_null_is_likelihood_at_point(lik, alt, null, want):
    res = compare_models(lik, alt, null)
    point = null[1][0]
    data = build_likelihood(lik)
    assert res.null.marginal_likelihood == data.evaluate(point)
    assert np.isclose(res.bf10, res.alt.marginal_likelihood / data.evaluate(point), rtol=1e-12)


@pytest.mark.parametrize("lik,alt,null,want", REFERENCE[:4])
def test_swapping_hypotheses_inverts(lik, alt, null, want):
    bf = bayes_factor(lik, alt, null)
    bf_swapped = bayes_factor(lik, null, alt)
    assert np.isclose(bf * bf_swapped, 1.0, rtol=1e-10)


def test_point_vs_point_never_integrates():
    integ = CountingIntegrator()
    bf = bayes_factor(("normal", [1.0, 1.0]), ("point", [1.0]), ("point", [0.0]), integrator=integ)
    assert integ.calls == []
    assert np.isclose(bf, math.exp(0.5))


def test_uniform_alternative_matches_closed_form():
    # normal likelihood averaged over a uniform prior is a difference of normal CDFs
    alt = (stats.norm.cdf(1.5) - stats.norm.cdf(-0.5)) / 20.0
    want = alt / stats.norm.pdf(0.0, 5.0, 10.0)
    res = compare_models(("normal", [5, 10]), ("uniform", [0, 20.0]), ("point", [0.0]))
    assert res.alt.bounds == (0.0, 20.0)
    assert np.isclose(res.alt.marginal_likelihood, alt, rtol=1e-8)
    assert np.isclose(res.bf10, want, rtol=1e-8)
    assert np.isclose(want, 0.8871298, rtol=1e-6)


def test_compare_models_returns_both_sides():
    lik, alt, null, want = REFERENCE[4]
    res = compare_models(lik, alt, null)
    assert res.is_finite
    assert np.isclose(res.bf01, 0.6632996, rtol=1e-4)
    assert res.alt.bounds == (0.0, 1.0)
    assert res.null.bounds is None
    assert res.meta["alt_prior"].family == "beta"


def test_specs_accept_mappings():
    lik, alt, null, want = REFERENCE[2]
    got = bayes_factor(
        {"family": lik[0], "params": lik[1]},
        {"name": alt[0], "params": alt[1]},
        {"family": null[0], "params": null[1]},
    )
    assert np.isclose(got, want, rtol=1e-4)


def test_zero_null_marginal_returns_inf(capsys):
    # binomial mass at p = 0 is zero for 8 successes
    bf = bayes_factor(("binomial", [8, 11]), ("beta", [1, 1]), ("point", [0.0]))
    assert bf == math.inf
    assert "non-finite Bayes factor" in capsys.readouterr().out


def test_zero_over_zero_returns_nan():
    bf = bayes_factor(("binomial", [8, 11]), ("point", [0.0]), ("point", [1.0]))
    assert math.isnan(bf)


def test_strict_raises_non_finite():
    with pytest.raises(NonFiniteResult) as exc:
        bayes_factor(("binomial", [8, 11]), ("beta", [1, 1]), ("point", [0.0]), strict=True)
    assert exc.value.null_marginal == 0.0
    assert np.isclose(exc.value.alt_marginal, 1.0 / 12.0)


def test_bad_specs_fail_before_any_integration():
    integ = CountingIntegrator()
    with pytest.raises(UnknownFamily):
        bayes_factor(("binomial", [2, 10]), ("normal", [0, 1, 0, 1]), ("bogus", [0.5]), integrator=integ)
    with pytest.raises(MalformedParams):
        bayes_factor(("binomial", [2, 10]), ("normal", [0, 1, 0, 1]), ("point", []), integrator=integ)
    with pytest.raises(UnknownFamily):
        bayes_factor(("poisson", [3]), ("normal", [0, 1, 0, 1]), ("point", [0.5]), integrator=integ)
    assert integ.calls == []


def test_verbose_logs_marginals(capsys):
    bayes_factor(("normal", [5, 10]), ("uniform", [0, 20.0]), ("point", [0.0]), verbose=True)
    out = capsys.readouterr().out
    assert "[bayesfactor]" in out
    assert "BF10=" in out
