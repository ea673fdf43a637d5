"""Password length rule."""

from dataclasses import dataclass

from passrule.core.exceptions import PolicyConfigurationError
from passrule.core.rules.base import Rule, detail
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult

ERROR_CODE_MIN = "TOO_SHORT"
ERROR_CODE_MAX = "TOO_LONG"


@dataclass(frozen=True)
class LengthRule(Rule):
    """Requires the password length to fall within [minimum, maximum].

    Attributes:
        minimum: Minimum number of characters.
        maximum: Maximum number of characters; None for no upper bound.
    """

    minimum: int = 0
    maximum: int | None = None

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise PolicyConfigurationError("Minimum length must not be negative")
        if self.maximum is not None and self.maximum < self.minimum:
            raise PolicyConfigurationError(
                f"Maximum length {self.maximum} is less than minimum length {self.minimum}"
            )

    def validate(self, password_data: PasswordData) -> RuleResult:
        length = len(password_data.password)
        if length < self.minimum:
            return RuleResult.failure(
                [detail(ERROR_CODE_MIN, minimum_length=self.minimum, maximum_length=self.maximum)]
            )
        if self.maximum is not None and length > self.maximum:
            return RuleResult.failure(
                [detail(ERROR_CODE_MAX, minimum_length=self.minimum, maximum_length=self.maximum)]
            )
        return RuleResult.success()
