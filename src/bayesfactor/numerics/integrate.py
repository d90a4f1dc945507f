from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

import numpy as np
from scipy import integrate

from bayesfactor.utils.constants import CORE_WIDTH, QUAD_EPSABS, QUAD_EPSREL, QUAD_LIMIT
from bayesfactor.utils.logging import warn


def breakpoints(
    centres: Iterable[Tuple[float, float]],
    lower: float,
    upper: float,
    width: float = CORE_WIDTH,
) -> Tuple[float, ...]:
    """Sorted quadrature breakpoints strictly inside (lower, upper).

    Each (location, scale) pair contributes location and location +- width*scale.
    Non-finite locations are skipped; a non-finite or non-positive scale
    contributes the location only.
    """
    pts = set()
    for loc, scale in centres:
        loc = float(loc)
        if not np.isfinite(loc):
            continue
        pts.add(loc)
        scale = float(scale)
        if np.isfinite(scale) and scale > 0.0:
            pts.add(loc - width * scale)
            pts.add(loc + width * scale)
    return tuple(sorted(p for p in pts if lower < p < upper))


@dataclass
class QuadIntegrator:
    """Definite integral of a scalar function via scipy.integrate.quad.

    Breakpoints
    -----------
    Callers pass the locations where the integrand's mass may sit (see
    breakpoints()). On a finite interval they go to QAGP as break points. On
    an infinite interval the span between the outermost points is integrated
    as a finite core and the one or two remaining tails with QAGI, with the
    tails' absolute tolerance tied to the core. Without points an infinite
    interval is handed to QAGI as-is, which can miss mass far from the origin.

    QUADPACK diagnostics are read from quad's full_output rather than the
    warnings module, so concurrent calls on separate instances log their own
    messages.

    Runtime statistics
    ------------------
    calls : int
        Number of integrals computed by this instance (one per __call__,
        however many quad pieces it took).
    last_abserr : float
        Summed absolute error estimate for the latest integral.
    """
    epsabs: float = QUAD_EPSABS
    epsrel: float = QUAD_EPSREL
    limit: int = QUAD_LIMIT
    calls: int = 0
    last_abserr: float = 0.0

    def _quad(self, f, lower: float, upper: float, epsabs: float, points: Optional[Sequence[float]] = None):
        out = integrate.quad(
            f,
            lower,
            upper,
            epsabs=epsabs,
            epsrel=self.epsrel,
            limit=self.limit,
            points=list(points) if points else None,
            full_output=1,
        )
        value, abserr = float(out[0]), float(out[1])
        if len(out) > 3:
            msg = str(out[3]).strip().splitlines()[0]
            warn("bayesfactor.integrate", f"quad over [{lower}, {upper}]: {msg} (abserr={abserr:.3e})")
        return value, abserr

    def __call__(
        self,
        f: Callable[[float], float],
        lower: float,
        upper: float,
        points: Optional[Iterable[float]] = None,
    ) -> float:
        self.calls += 1
        lower = float(lower)
        upper = float(upper)
        inner = sorted({float(p) for p in (points or ()) if lower < float(p) < upper})

        if np.isfinite(lower) and np.isfinite(upper):
            value, abserr = self._quad(f, lower, upper, self.epsabs, inner)
        elif not inner:
            value, abserr = self._quad(f, lower, upper, self.epsabs)
        else:
            a, b = inner[0], inner[-1]
            value, abserr = 0.0, 0.0
            if b > a:
                value, abserr = self._quad(f, a, b, self.epsabs, inner[1:-1])
            tail_epsabs = max(self.epsabs, self.epsrel * abs(value))
            for lo_t, hi_t in ((lower, a), (b, upper)):
                v, e = self._quad(f, lo_t, hi_t, tail_epsabs)
                value += v
                abserr += e

        self.last_abserr = abserr
        return float(value)

    def reset_stats(self) -> None:
        self.calls = 0
        self.last_abserr = 0.0

    def to_config(self) -> dict:
        return {"epsabs": float(self.epsabs), "epsrel": float(self.epsrel), "limit": int(self.limit)}


def integrate_scalar(f: Callable[[float], float], lower: float, upper: float, points=None) -> float:
    """One-shot integral with default tolerances."""
    return QuadIntegrator()(f, lower, upper, points=points)
