"""Character class rules.

CharacterRule requires a minimum number of characters from one class.
CharacterCharacteristicsRule requires that at least M of N character rules
pass, e.g. "three of upper case, lower case, digit and special".
"""

from collections.abc import Sequence
from dataclasses import dataclass

from passrule.core.exceptions import PolicyConfigurationError
from passrule.core.rules.base import Rule, count_matching_characters, detail
from passrule.domain.entities.character_data import CharacterData
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult, RuleResultDetail

CHARACTERISTICS_ERROR_CODE = "INSUFFICIENT_CHARACTERISTICS"


@dataclass(frozen=True)
class CharacterRule(Rule):
    """Requires at least ``num_characters`` characters from a character class.

    Attributes:
        character_data: The character class.
        num_characters: Minimum occurrences; zero makes the rule always pass.
    """

    character_data: CharacterData
    num_characters: int = 1

    def __post_init__(self) -> None:
        if self.num_characters < 0:
            raise PolicyConfigurationError(
                f"Number of characters must not be negative, got {self.num_characters}"
            )

    @property
    def characters(self) -> str:
        return self.character_data.characters

    def validate(self, password_data: PasswordData) -> RuleResult:
        actual = count_matching_characters(password_data.password, self.character_data.members)
        if actual >= self.num_characters:
            return RuleResult.success()
        return RuleResult.failure(
            [
                detail(
                    self.character_data.error_code,
                    required=self.num_characters,
                    actual=actual,
                    valid_characters=self.characters,
                )
            ]
        )


@dataclass(frozen=True)
class CharacterCharacteristicsRule(Rule):
    """Requires at least ``num_characteristics`` of the given character rules to pass.

    Attributes:
        rules: The N character rules.
        num_characteristics: M, the number of rules that must pass.
        report_rule_failures: Whether the details of failing character rules are
            reported after the summary detail when this rule fails.
    """

    rules: tuple[CharacterRule, ...]
    num_characteristics: int
    report_rule_failures: bool

    def __init__(
        self,
        rules: Sequence[CharacterRule],
        num_characteristics: int,
        *,
        report_rule_failures: bool,
    ) -> None:
        object.__setattr__(self, "rules", tuple(rules))
        object.__setattr__(self, "num_characteristics", num_characteristics)
        object.__setattr__(self, "report_rule_failures", report_rule_failures)
        if not self.rules:
            raise PolicyConfigurationError("At least one character rule is required")
        if not 1 <= self.num_characteristics <= len(self.rules):
            raise PolicyConfigurationError(
                f"Number of characteristics must be between 1 and {len(self.rules)}, "
                f"got {self.num_characteristics}"
            )

    def validate(self, password_data: PasswordData) -> RuleResult:
        satisfied = 0
        failures: list[RuleResultDetail] = []
        for rule in self.rules:
            result = rule.validate(password_data)
            if result.valid:
                satisfied += 1
            else:
                failures.extend(result.details)

        if satisfied >= self.num_characteristics:
            return RuleResult.success()

        summary = detail(
            CHARACTERISTICS_ERROR_CODE,
            satisfied=satisfied,
            required=self.num_characteristics,
            rule_count=len(self.rules),
        )
        if self.report_rule_failures:
            return RuleResult.failure([summary, *failures])
        return RuleResult.failure([summary])
