from __future__ import annotations
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from bayesfactor.numerics import QuadIntegrator
from bayesfactor.types import LikelihoodSpec, PriorSpec, coerce_spec


def _spec_dict(spec) -> Dict[str, Any]:
    return {"family": spec.family, "params": [float(p) for p in spec.params]}


@dataclass
class ModelRecord:
    """Persistent description of a Bayes factor comparison and its provenance.

    A record names one likelihood and the two competing priors. Specs are
    stored as plain {family, params} mappings so the YAML stays readable;
    infinite truncation bounds are written as .inf / -.inf.

    integration holds optional QuadIntegrator settings (epsabs, epsrel, limit).
    """
    name: str
    likelihood: Dict[str, Any]
    alt_prior: Dict[str, Any]
    null_prior: Dict[str, Any]
    integration: Dict[str, Any] = field(default_factory=dict)
    source: str = "manual"
    notes: str = ""
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def from_specs(cls, name: str, likelihood, alt_prior, null_prior, **kwargs) -> "ModelRecord":
        return cls(
            name=name,
            likelihood=_spec_dict(coerce_spec(likelihood, LikelihoodSpec)),
            alt_prior=_spec_dict(coerce_spec(alt_prior, PriorSpec)),
            null_prior=_spec_dict(coerce_spec(null_prior, PriorSpec)),
            **kwargs,
        )

    def to_specs(self) -> Tuple[LikelihoodSpec, PriorSpec, PriorSpec]:
        """Return (likelihood, alt_prior, null_prior) spec objects."""
        return (
            coerce_spec(self.likelihood, LikelihoodSpec),
            coerce_spec(self.alt_prior, PriorSpec),
            coerce_spec(self.null_prior, PriorSpec),
        )

    def integrator(self) -> QuadIntegrator:
        """Fresh integrator configured from the integration section."""
        cfg = dict(self.integration or {})
        unknown = set(cfg) - {"epsabs", "epsrel", "limit"}
        if unknown:
            raise ValueError(f"unknown integration settings: {', '.join(sorted(unknown))}")
        kwargs: Dict[str, Any] = {}
        if "epsabs" in cfg:
            kwargs["epsabs"] = float(cfg["epsabs"])
        if "epsrel" in cfg:
            kwargs["epsrel"] = float(cfg["epsrel"])
        if "limit" in cfg:
            kwargs["limit"] = int(cfg["limit"])
        return QuadIntegrator(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "likelihood": dict(self.likelihood),
            "alt_prior": dict(self.alt_prior),
            "null_prior": dict(self.null_prior),
            "integration": dict(self.integration or {}),
            "source": self.source,
            "notes": self.notes,
            "created_at": self.created_at,
        }


def save_model_record(record: ModelRecord, path: str | Path) -> None:
    """Save a ModelRecord to YAML."""
    p = Path(path)
    p.write_text(yaml.safe_dump(record.to_dict(), sort_keys=False))


def load_model_record(path: str | Path) -> ModelRecord:
    """Load a ModelRecord from YAML."""
    p = Path(path)
    data = yaml.safe_load(p.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a mapping at top level, got {type(data).__name__}")
    unknown = set(data) - {f.name for f in fields(ModelRecord)}
    if unknown:
        raise ValueError(f"{p}: unknown model record keys: {', '.join(sorted(map(str, unknown)))}")
    return ModelRecord(**data)


def bayes_factor_from_record(record: ModelRecord, **kwargs) -> float:
    """Compute the Bayes factor described by a record.

    Extra keyword arguments are forwarded to bayes_factor; an explicit
    integrator overrides the record's integration section.
    """
    # Lazy import: the engine imports the prior builder from this package
    from bayesfactor.engine.orchestrator import bayes_factor as _bayes_factor
    likelihood, alt, null = record.to_specs()
    kwargs.setdefault("integrator", record.integrator())
    return _bayes_factor(likelihood, alt, null, **kwargs)
