from .integrate import QuadIntegrator, breakpoints, integrate_scalar

__all__ = [
    "QuadIntegrator",
    "breakpoints",
    "integrate_scalar",
]
