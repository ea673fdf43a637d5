"""Unit tests for PasswordValidator."""

from passrule.core.rules import (
    CharacterCharacteristicsRule,
    CharacterRule,
    DictionarySubstringRule,
    LengthRule,
    Rule,
    UsernameRule,
)
from passrule.domain.entities import EnglishCharacterData, PasswordData, RuleResult
from passrule.domain.services import PasswordValidator
from passrule.infrastructure.messages import MessageResolver


class CountingRule(Rule):
    """Rule that records how often it was evaluated."""

    def __init__(self, result: RuleResult) -> None:
        self.result = result
        self.calls = 0

    def validate(self, password_data: PasswordData) -> RuleResult:
        self.calls += 1
        return self.result


class TestValidate:
    """Test rule aggregation."""

    def test_empty_policy_is_valid(self):
        """Test that no rules accept any password."""
        assert PasswordValidator([]).validate(PasswordData("x")).valid is True

    def test_all_rules_evaluated_after_failure(self):
        """Test that validation does not stop at the first failing rule."""
        first = CountingRule(LengthRule(10).validate(PasswordData("short")))
        second = CountingRule(RuleResult.success())
        result = PasswordValidator([first, second]).validate(PasswordData("short"))

        assert result.valid is False
        assert first.calls == 1
        assert second.calls == 1

    def test_details_in_rule_order(self, dictionary):
        """Test that details follow rule order."""
        validator = PasswordValidator(
            [
                LengthRule(12, 64),
                DictionarySubstringRule(dictionary),
                UsernameRule(),
            ]
        )
        result = validator.validate(PasswordData("alicepassword", username="alice"))
        assert result.error_codes == ["ILLEGAL_WORD", "ILLEGAL_USERNAME"]

        result = validator.validate(PasswordData("apple", username="apple"))
        assert result.error_codes == ["TOO_SHORT", "ILLEGAL_WORD", "ILLEGAL_USERNAME"]

    def test_valid_password(self):
        """Test a password meeting every rule."""
        validator = PasswordValidator(
            [
                LengthRule(8, 16),
                CharacterCharacteristicsRule(
                    [
                        CharacterRule(EnglishCharacterData.UPPER_CASE),
                        CharacterRule(EnglishCharacterData.LOWER_CASE),
                        CharacterRule(EnglishCharacterData.DIGIT),
                        CharacterRule(EnglishCharacterData.SPECIAL),
                    ],
                    3,
                    report_rule_failures=False,
                ),
            ]
        )
        assert validator.is_valid(PasswordData("abcDEF12")) is True
        assert validator.is_valid(PasswordData("abcdefgh")) is False

    def test_validate_is_idempotent(self, dictionary):
        """Test that repeated validation gives equal results."""
        validator = PasswordValidator([LengthRule(12), DictionarySubstringRule(dictionary)])
        data = PasswordData("password")
        assert validator.validate(data) == validator.validate(data)


class TestGetMessages:
    """Test message rendering."""

    def test_messages_in_detail_order(self):
        """Test that each detail becomes one message."""
        validator = PasswordValidator(
            [LengthRule(8), CharacterRule(EnglishCharacterData.DIGIT, 2)]
        )
        result = validator.validate(PasswordData("abc"))
        assert validator.get_messages(result) == [
            "Password must be 8 or more characters in length.",
            "Password must contain 2 or more digit characters.",
        ]

    def test_valid_result_has_no_messages(self):
        """Test that valid results render nothing."""
        validator = PasswordValidator([LengthRule(1)])
        assert validator.get_messages(validator.validate(PasswordData("a"))) == []

    def test_injected_resolver(self):
        """Test that a custom message resolver is used."""
        resolver = MessageResolver({"TOO_SHORT": "Need {{ minimum_length }}."})
        validator = PasswordValidator([LengthRule(8)], message_resolver=resolver)
        result = validator.validate(PasswordData("abc"))
        assert validator.get_messages(result) == ["Need 8."]
