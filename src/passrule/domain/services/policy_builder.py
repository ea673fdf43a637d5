"""Builds the default password policy from settings."""

from passrule.core.config import Settings
from passrule.core.rules import (
    CharacterCharacteristicsRule,
    CharacterRule,
    DictionarySubstringRule,
    EnglishSequenceData,
    IllegalSequenceRule,
    LengthRule,
    RepeatCharacterRegexRule,
    Rule,
    UsernameRule,
    WhitespaceRule,
)
from passrule.domain.entities.character_data import EnglishCharacterData
from passrule.domain.entities.word_dictionary import WordDictionary


def character_rules() -> list[CharacterRule]:
    """One character of each of upper case, lower case, digit and special."""
    return [
        CharacterRule(EnglishCharacterData.UPPER_CASE, 1),
        CharacterRule(EnglishCharacterData.LOWER_CASE, 1),
        CharacterRule(EnglishCharacterData.DIGIT, 1),
        CharacterRule(EnglishCharacterData.SPECIAL, 1),
    ]


def build_rules(settings: Settings, dictionary: WordDictionary | None = None) -> list[Rule]:
    """Build the rule list described by settings.

    Args:
        settings: Policy settings.
        dictionary: Optional words to reject as substrings, forwards and backwards.

    Returns:
        Rules in evaluation order.
    """
    rules: list[Rule] = [
        LengthRule(settings.min_length, settings.max_length),
        CharacterCharacteristicsRule(
            character_rules(),
            settings.characteristics_required,
            report_rule_failures=settings.report_characteristic_failures,
        ),
        WhitespaceRule(),
    ]
    for sequence_data in (
        EnglishSequenceData.NUMERICAL,
        EnglishSequenceData.ALPHABETICAL,
        EnglishSequenceData.USQWERTY,
    ):
        rules.append(
            IllegalSequenceRule(
                sequence_data,
                length=settings.sequence_length,
                wrap=settings.sequence_wrap,
                ignore_case=sequence_data is EnglishSequenceData.ALPHABETICAL,
            )
        )
    rules.append(RepeatCharacterRegexRule(settings.repeat_length))
    if settings.check_username:
        rules.append(UsernameRule(match_backwards=True, ignore_case=True))
    if dictionary is not None:
        rules.append(DictionarySubstringRule(dictionary, match_backwards=True))
    return rules
