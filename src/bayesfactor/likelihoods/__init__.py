from .builder import (
    LIKELIHOOD_CENTRES,
    LIKELIHOOD_FAMILIES,
    build_likelihood,
    check_likelihood_spec,
    normal_likelihood,
    student_t_likelihood,
    noncentral_t_likelihood,
    noncentral_d_likelihood,
    binomial_likelihood,
)

__all__ = [
    "LIKELIHOOD_CENTRES",
    "LIKELIHOOD_FAMILIES",
    "build_likelihood",
    "check_likelihood_spec",
    "normal_likelihood",
    "student_t_likelihood",
    "noncentral_t_likelihood",
    "noncentral_d_likelihood",
    "binomial_likelihood",
]
