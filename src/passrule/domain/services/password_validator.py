"""Password validation service.

Applies an ordered list of rules to a password and aggregates the results.
Every rule is evaluated, so the caller receives a detail for every
violation rather than only the first one.
"""

from collections.abc import Sequence

from passrule.core.logging import get_logger
from passrule.core.rules.base import Rule
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult
from passrule.infrastructure.messages.message_resolver import (
    MessageResolver,
    get_message_resolver,
)

logger = get_logger(__name__)


class PasswordValidator:
    """Validates passwords against a policy.

    Example:
        >>> validator = PasswordValidator([LengthRule(8, 16)])
        >>> validator.validate(PasswordData("Sh0rt")).error_codes
        ['TOO_SHORT']
    """

    def __init__(
        self,
        rules: Sequence[Rule],
        message_resolver: MessageResolver | None = None,
    ) -> None:
        """Initialize the password validator.

        Args:
            rules: Rules evaluated in order.
            message_resolver: Renders details to text. Defaults to the global resolver.
        """
        self.rules: tuple[Rule, ...] = tuple(rules)
        self.message_resolver = message_resolver or get_message_resolver()

    def validate(self, password_data: PasswordData) -> RuleResult:
        """Validate password data against every rule.

        Args:
            password_data: The password to validate.

        Returns:
            Combined result: valid only if every rule passed, with the details
            of all rules in rule order.
        """
        result = RuleResult.combine(rule.validate(password_data) for rule in self.rules)
        logger.debug(
            "Password validated",
            rule_count=len(self.rules),
            valid=result.valid,
            detail_count=len(result.details),
        )
        return result

    def is_valid(self, password_data: PasswordData) -> bool:
        """Check if password data satisfies every rule."""
        return self.validate(password_data).valid

    def get_messages(self, result: RuleResult) -> list[str]:
        """Render the details of a result as messages, in detail order."""
        return [
            self.message_resolver.resolve(detail.error_code, detail.parameters)
            for detail in result.details
        ]
