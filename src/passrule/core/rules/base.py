"""Rule contract and helpers shared by several rules."""

from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable, Iterator
from typing import Any

from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult, RuleResultDetail


class Rule(ABC):
    """A password policy rule.

    Implementations are immutable configuration objects. ``validate`` must be
    pure: the same PasswordData always yields an equal RuleResult.
    """

    @abstractmethod
    def validate(self, password_data: PasswordData) -> RuleResult:
        """Validate password data against this rule."""


def detail(error_code: str, **parameters: Any) -> RuleResultDetail:
    """Build a rule result detail; keyword order is the parameter order."""
    return RuleResultDetail(error_code, parameters)


def count_matching_characters(text: str, members: Collection[str]) -> int:
    """Count characters of text that belong to members, with repetition."""
    return sum(1 for char in text if char in members)


def distinct(items: Iterable[str]) -> Iterator[str]:
    """Yield items once each, in first-seen order."""
    return iter(dict.fromkeys(items))


def reverse(text: str) -> str:
    return text[::-1]
