from .predictive import predictive, integration_bounds, multiply
from .orchestrator import bayes_factor, compare_models
from .curves import predictive_curve, default_curve_limits

__all__ = [
    "predictive",
    "integration_bounds",
    "multiply",
    "bayes_factor",
    "compare_models",
    "predictive_curve",
    "default_curve_limits",
]
