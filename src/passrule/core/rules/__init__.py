"""Password policy rules API."""

from .base import Rule
from .character import CharacterCharacteristicsRule, CharacterRule
from .dictionary import DictionaryRule, DictionarySubstringRule
from .length import LengthRule
from .pattern import (
    AllowedCharacterRule,
    AllowedRegexRule,
    IllegalCharacterRule,
    IllegalRegexRule,
    RepeatCharacterRegexRule,
    UsernameRule,
    WhitespaceRule,
)
from .reference import (
    Digester,
    DigestHistoryRule,
    DigestSourceRule,
    HistoryRule,
    SourceRule,
)
from .sequence import EnglishSequenceData, IllegalSequenceRule, SequenceData

__all__ = [
    "Rule",
    "LengthRule",
    "CharacterRule",
    "CharacterCharacteristicsRule",
    "DictionaryRule",
    "DictionarySubstringRule",
    "IllegalSequenceRule",
    "SequenceData",
    "EnglishSequenceData",
    "RepeatCharacterRegexRule",
    "IllegalRegexRule",
    "AllowedRegexRule",
    "IllegalCharacterRule",
    "AllowedCharacterRule",
    "WhitespaceRule",
    "UsernameRule",
    "HistoryRule",
    "DigestHistoryRule",
    "SourceRule",
    "DigestSourceRule",
    "Digester",
]
