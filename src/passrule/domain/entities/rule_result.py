"""Rule result entities.

A RuleResult is the outcome of evaluating one rule (or a whole policy)
against a password. Failures carry one RuleResultDetail per violation,
identified by an error code and ordered parameters for message rendering.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class RuleResultDetail:
    """A single rule violation.

    Attributes:
        error_code: Machine-readable error code, e.g. 'TOO_SHORT'.
        parameters: Ordered parameter name to value mapping.
    """

    error_code: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleResultDetail):
            return NotImplemented
        return self.error_code == other.error_code and list(self.parameters.items()) == list(
            other.parameters.items()
        )

    def __hash__(self) -> int:
        return hash((self.error_code, tuple(self.parameters.items())))

    def __repr__(self) -> str:
        return f"RuleResultDetail({self.error_code!r}, {dict(self.parameters)!r})"


@dataclass(frozen=True)
class RuleResult:
    """Outcome of a rule evaluation.

    A valid result never carries details.

    Attributes:
        valid: Whether the password satisfied the rule.
        details: Ordered violations.
    """

    valid: bool
    details: tuple[RuleResultDetail, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.details, tuple):
            object.__setattr__(self, "details", tuple(self.details))
        if self.valid and self.details:
            raise ValueError("A valid rule result cannot carry details")

    @classmethod
    def success(cls) -> "RuleResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, details: Iterable[RuleResultDetail]) -> "RuleResult":
        return cls(valid=False, details=tuple(details))

    @classmethod
    def from_details(cls, details: Iterable[RuleResultDetail]) -> "RuleResult":
        """Build a result that is valid exactly when there are no details."""
        details = tuple(details)
        return cls(valid=not details, details=details)

    @classmethod
    def combine(cls, results: Iterable["RuleResult"]) -> "RuleResult":
        """AND the validity of results and concatenate their details in order."""
        valid = True
        details: list[RuleResultDetail] = []
        for result in results:
            valid = valid and result.valid
            details.extend(result.details)
        return cls(valid=valid, details=tuple(details))

    @property
    def error_codes(self) -> list[str]:
        """Error codes of all details, in order."""
        return [detail.error_code for detail in self.details]
