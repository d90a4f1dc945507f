from .densities import (
    density_normal,
    density_student_t_scaled,
    density_noncentral_t,
    density_binomial,
    density_beta,
    density_cauchy,
    density_uniform,
)

__all__ = [
    "density_normal",
    "density_student_t_scaled",
    "density_noncentral_t",
    "density_binomial",
    "density_beta",
    "density_cauchy",
    "density_uniform",
]
