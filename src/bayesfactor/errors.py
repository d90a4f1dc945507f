from __future__ import annotations
from typing import Sequence


class BayesFactorError(ValueError):
    """Base class for errors raised while building or evaluating a model."""


class UnknownFamily(BayesFactorError):
    """A likelihood or prior spec names a family with no builder.

    Attributes
    ----------
    role : str
        Either "likelihood" or "prior".
    family : str
        The family name as given (after normalization).
    known : tuple of str
        Families supported for this role.
    """

    def __init__(self, role: str, family: str, known: Sequence[str] = ()):
        self.role = role
        self.family = family
        self.known = tuple(sorted(known))
        msg = f"unknown {role} family {family!r}"
        if self.known:
            msg += f"; expected one of {', '.join(self.known)}"
        super().__init__(msg)


class MalformedParams(BayesFactorError):
    """A spec carries parameters its family cannot be built from."""

    def __init__(self, family: str, message: str, expected: Sequence[str] = (), got: int | None = None):
        self.family = family
        self.expected = tuple(expected)
        self.got = got
        super().__init__(f"{family}: {message}")

    @classmethod
    def arity(cls, family: str, expected: Sequence[str], got: int) -> "MalformedParams":
        names = ", ".join(expected)
        return cls(family, f"expected {len(expected)} params ({names}), got {got}", expected=expected, got=got)


class NonFiniteResult(BayesFactorError):
    """The Bayes factor is inf or nan, e.g. the null marginal likelihood is zero.

    Only raised when the caller asks for strict checking; by default the
    non-finite float is returned as-is.
    """

    def __init__(self, value: float, alt_marginal: float, null_marginal: float):
        self.value = value
        self.alt_marginal = alt_marginal
        self.null_marginal = null_marginal
        super().__init__(
            f"non-finite Bayes factor {value!r} "
            f"(alt marginal={alt_marginal!r}, null marginal={null_marginal!r})"
        )
