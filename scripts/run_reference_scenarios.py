#!/usr/bin/env python3
"""
Batch runner for the published reference Bayes factors.

Computes each reference comparison, checks it against the expected value with
a relative tolerance and writes a JSON summary report. Intended for local use
after touching the prior normalization or the quadrature settings.

Usage:
  python scripts/run_reference_scenarios.py --out reference_report.json

Notes:
- No external data is needed; all inputs are listed in REFERENCE_SCENARIOS.
- --record DIR additionally writes each scenario as a YAML model record.
- Exit code is 0 when every scenario is within tolerance, 1 otherwise.
"""
from __future__ import annotations
import os
import sys
import json
import math
import argparse

from bayesfactor import ModelRecord, QuadIntegrator, compare_models, save_model_record
from bayesfactor.utils.logging import log

INF = math.inf

# name: (likelihood, alt prior, null prior, expected BF10)
REFERENCE_SCENARIOS = {
    "noncentral_d_cauchy": (
        ("noncentral_d", [2.03 / math.sqrt(80), 79.0]),
        ("cauchy", [0.0, 1.0, -INF, INF]),
        ("point", [0.0]),
        1 / 1.557447,
    ),
    "noncentral_t_cauchy": (
        ("noncentral_t", [2.03, 79.0]),
        ("cauchy", [0.0, math.sqrt(80), -INF, INF]),
        ("point", [0.0]),
        1 / 1.557447,
    ),
    "normal_half_normal": (
        ("normal", [5.5, 32.35]),
        ("normal", [0.0, 13.3, 0.0, INF]),
        ("point", [0.0]),
        0.9745934,
    ),
    "normal_uniform": (
        ("normal", [5.0, 10.0]),
        ("uniform", [0.0, 20.0]),
        ("point", [0.0]),
        # exact value over the uniform support [0, 20]
        0.8871298,
    ),
    "binomial_beta": (
        ("binomial", [8.0, 11.0]),
        ("beta", [2.5, 1.0]),
        ("point", [0.5]),
        1 / 0.6632996,
    ),
    "binomial_truncated_normal": (
        ("binomial", [2.0, 10.0]),
        ("normal", [0.0, 1.0, 0.0, 1.0]),
        ("point", [0.5]),
        2.327971,
    ),
    "student_t_student_t": (
        ("student_t", [5.47, 32.2, 119.0]),
        ("student_t", [13.3, 4.93, 72.0, -INF, INF]),
        ("point", [0.0]),
        0.9738,
    ),
}


def relative_difference(got: float, want: float) -> float:
    """|got - want| relative to the mean magnitude of the two."""
    mean = abs(got + want) / 2.0
    if mean == 0.0:
        return 0.0 if got == want else INF
    return abs(got - want) / mean


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Run reference Bayes factor scenarios and write a JSON report")
    p.add_argument("--out", default="reference_report.json", help="Path of the JSON report")
    p.add_argument("--rtol", type=float, default=1e-4, help="Relative tolerance against the expected BF10")
    p.add_argument("--only", nargs="*", default=None, help="Subset of scenario names to run")
    p.add_argument("--record", default=None, help="Directory to write one YAML model record per scenario")
    # Quadrature controls
    p.add_argument("--epsabs", type=float, default=None)
    p.add_argument("--epsrel", type=float, default=None)
    p.add_argument("--limit", type=int, default=None)
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv if argv is not None else sys.argv[1:])

    names = list(REFERENCE_SCENARIOS) if not args.only else list(args.only)
    unknown = [n for n in names if n not in REFERENCE_SCENARIOS]
    if unknown:
        p.error(f"unknown scenarios: {', '.join(unknown)}")

    quad_cfg = {k: getattr(args, k) for k in ("epsabs", "epsrel", "limit") if getattr(args, k) is not None}
    if args.record:
        os.makedirs(args.record, exist_ok=True)

    overall_ok = True
    summary: dict[str, dict] = {}

    for name in names:
        lik, alt, null, want = REFERENCE_SCENARIOS[name]
        integrator = QuadIntegrator(**quad_cfg)
        result = compare_models(lik, alt, null, integrator=integrator, verbose=args.verbose)
        rel = relative_difference(result.bf10, want)
        ok = bool(result.is_finite and rel < args.rtol)
        overall_ok = overall_ok and ok
        log(f"[reference] {name}: BF10={result.bf10:.7g} expected={want:.7g} rel={rel:.2e} {'OK' if ok else 'FAIL'}")
        summary[name] = {
            "bf10": result.bf10,
            "expected": want,
            "relative_difference": rel,
            "ok": ok,
            "alt_marginal": result.alt.marginal_likelihood,
            "null_marginal": result.null.marginal_likelihood,
            "quad_calls": integrator.calls,
        }
        if args.record:
            record = ModelRecord.from_specs(name, lik, alt, null, integration=integrator.to_config(), source="reference")
            save_model_record(record, os.path.join(args.record, f"{name}.yaml"))

    try:
        with open(args.out, "w") as f:
            json.dump(summary, f, indent=2, sort_keys=True)
        log(f"[reference] Wrote report to {args.out}")
    except OSError as e:
        log(f"[reference] Warning: failed to write {args.out}: {e}")

    log(f"[reference] Overall status: {'OK' if overall_ok else 'FAIL'}")
    return 0 if overall_ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
