import math

import numpy as np
import pytest
from scipy import stats

from bayesfactor import LikelihoodSpec, MalformedParams, UnknownFamily, build_likelihood
from bayesfactor.likelihoods import LIKELIHOOD_FAMILIES


def test_normal_likelihood_matches_density():
    lik = build_likelihood(LikelihoodSpec("normal", [1.0, 2.0]))
    assert lik.family == "normal"
    # density at the mean is 1 / (sd * sqrt(2 pi))
    assert np.isclose(lik.evaluate(1.0), 1.0 / (2.0 * math.sqrt(2.0 * math.pi)))
    assert np.isclose(lik(3.0), stats.norm.pdf(3.0, 1.0, 2.0))


def test_student_t_likelihood_is_shifted_and_scaled():
    mean, sd, df = 5.47, 32.2, 119.0
    lik = build_likelihood(("student_t", [mean, sd, df]))
    for x in (-10.0, 0.0, 5.47, 40.0):
        want = stats.t.pdf((x - mean) / sd, df) / sd
        assert np.isclose(lik.evaluate(x), want, rtol=1e-12)


def test_noncentral_t_at_zero_is_central_t():
    lik = build_likelihood({"family": "noncentral_t", "params": [2.03, 79.0]})
    assert np.isclose(lik.evaluate(0.0), stats.t.pdf(2.03, 79.0), rtol=1e-8)


def test_noncentral_d_rescales_statistic_and_noncentrality():
    d, df = 2.03 / math.sqrt(80), 79.0
    lik = build_likelihood(("noncentral_d", [d, df]))
    root = math.sqrt(df + 1.0)
    for x in (-0.3, 0.0, 0.2, 0.5):
        want = stats.nct.pdf(d * root, df, x * root)
        assert np.isclose(lik.evaluate(x), want, rtol=1e-10)
    # the observed d of 2.03/sqrt(80) is a t statistic of 2.03
    assert np.isclose(d * root, 2.03)


def test_binomial_likelihood_is_mass_in_p():
    lik = build_likelihood(("binomial", [8, 11]))
    assert np.isclose(lik.evaluate(0.5), 165.0 / 2048.0)
    assert lik.evaluate(0.0) == 0.0
    assert lik.evaluate(1.0) == 0.0


def test_family_names_are_normalized():
    lik = build_likelihood(("  Normal ", [0.0, 1.0]))
    assert lik.family == "normal"


def test_unknown_family_fails_fast():
    with pytest.raises(UnknownFamily) as exc:
        build_likelihood({"family": "bogus", "params": []})
    assert exc.value.role == "likelihood"
    assert exc.value.family == "bogus"
    assert set(exc.value.known) == set(LIKELIHOOD_FAMILIES)


@pytest.mark.parametrize("family,params", [
    ("normal", [1.0]),
    ("student_t", [0.0, 1.0]),
    ("noncentral_t", [2.0]),
    ("noncentral_d", []),
    ("binomial", [1.0, 2.0, 3.0]),
])
def test_wrong_arity_is_malformed(family, params):
    with pytest.raises(MalformedParams) as exc:
        build_likelihood((family, params))
    assert exc.value.got == len(params)
    assert len(exc.value.expected) == len(LIKELIHOOD_FAMILIES[family][0])


def test_specs_are_immutable_and_coerced():
    spec = LikelihoodSpec("binomial", ["8", 11])
    assert spec.params == (8.0, 11.0)
    with pytest.raises(AttributeError):
        spec.family = "normal"
