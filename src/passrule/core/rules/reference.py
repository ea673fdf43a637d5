"""Reference rules.

History rules reject passwords the user has used before; source rules
reject passwords the user holds on another system. Reference passwords are
either cleartext or digests. Digest rules hash the candidate with an
injected digester and compare the result to the stored digest; they never
hash anything on their own.

When the password data carries no references of the relevant kind the
rule passes.
"""

import hmac
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from passrule.core.rules.base import Rule, detail
from passrule.domain.entities.password_data import (
    HistoricalReference,
    PasswordData,
    Reference,
    ReferenceT,
    SourceReference,
)
from passrule.domain.entities.rule_result import RuleResult

HISTORY_ERROR_CODE = "HISTORY_VIOLATION"
SOURCE_ERROR_CODE = "SOURCE_VIOLATION"


@runtime_checkable
class Digester(Protocol):
    """Produces the encoded digest of a cleartext password."""

    def digest(self, cleartext: str) -> str: ...


def digests_equal(left: str, right: str) -> bool:
    """Compare two encoded digests in constant time."""
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


def _matching_references(
    rule: "HistoryRule | SourceRule", password: str, references: Sequence[ReferenceT]
) -> list[ReferenceT]:
    """Return the references matching password; only the first unless reporting all."""
    candidate = rule.candidate(password)
    matches = [ref for ref in references if rule.matches(candidate, ref)]
    return matches if rule.report_all else matches[:1]


@dataclass(frozen=True)
class HistoryRule(Rule):
    """Rejects passwords matching a cleartext historical password.

    Attributes:
        report_all: Report every matching reference, or only the first.
        size_to_report: History size shown to the user instead of the number of
            references supplied, e.g. when only part of the history is loaded.
    """

    report_all: bool = True
    size_to_report: int | None = None

    def candidate(self, password: str) -> str:
        """Return the value compared against each reference."""
        return password

    def matches(self, candidate: str, reference: Reference) -> bool:
        return candidate == reference.password

    def validate(self, password_data: PasswordData) -> RuleResult:
        references = password_data.references_of(HistoricalReference)
        if not references:
            return RuleResult.success()

        size = len(references) if self.size_to_report is None else self.size_to_report
        matches = _matching_references(self, password_data.password, references)
        return RuleResult.from_details(detail(HISTORY_ERROR_CODE, history_size=size) for _ in matches)


@dataclass(frozen=True, init=False)
class DigestHistoryRule(HistoryRule):
    """Rejects passwords whose digest matches a historical digest.

    Attributes:
        digester: Computes the digest of the candidate password.
    """

    digester: Digester

    def __init__(
        self, digester: Digester, report_all: bool = True, size_to_report: int | None = None
    ) -> None:
        object.__setattr__(self, "digester", digester)
        object.__setattr__(self, "report_all", report_all)
        object.__setattr__(self, "size_to_report", size_to_report)

    def candidate(self, password: str) -> str:
        return self.digester.digest(password)

    def matches(self, candidate: str, reference: Reference) -> bool:
        return digests_equal(candidate, reference.password)


@dataclass(frozen=True)
class SourceRule(Rule):
    """Rejects passwords matching a cleartext password from another system.

    Attributes:
        report_all: Report every matching reference, or only the first.
    """

    report_all: bool = True

    def candidate(self, password: str) -> str:
        """Return the value compared against each reference."""
        return password

    def matches(self, candidate: str, reference: Reference) -> bool:
        return candidate == reference.password

    def validate(self, password_data: PasswordData) -> RuleResult:
        references = password_data.references_of(SourceReference)
        if not references:
            return RuleResult.success()

        matches = _matching_references(self, password_data.password, references)
        return RuleResult.from_details(detail(SOURCE_ERROR_CODE, source=ref.label) for ref in matches)


@dataclass(frozen=True, init=False)
class DigestSourceRule(SourceRule):
    """Rejects passwords whose digest matches a digest from another system.

    Attributes:
        digester: Computes the digest of the candidate password.
    """

    digester: Digester

    def __init__(self, digester: Digester, report_all: bool = True) -> None:
        object.__setattr__(self, "digester", digester)
        object.__setattr__(self, "report_all", report_all)

    def candidate(self, password: str) -> str:
        return self.digester.digest(password)

    def matches(self, candidate: str, reference: Reference) -> bool:
        return digests_equal(candidate, reference.password)
