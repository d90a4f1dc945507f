from .builder import (
    PRIOR_FAMILIES,
    build_prior,
    check_prior_spec,
    indicator,
    truncated_prior,
    cauchy_prior,
    normal_prior,
    student_t_prior,
    beta_prior,
    uniform_prior,
    point_prior,
)
from .record import ModelRecord, save_model_record, load_model_record, bayes_factor_from_record

__all__ = [
    "PRIOR_FAMILIES",
    "build_prior",
    "check_prior_spec",
    "indicator",
    "truncated_prior",
    "cauchy_prior",
    "normal_prior",
    "student_t_prior",
    "beta_prior",
    "uniform_prior",
    "point_prior",
    "ModelRecord",
    "save_model_record",
    "load_model_record",
    "bayes_factor_from_record",
]
