"""Domain entities for password policies."""

from passrule.domain.entities.character_data import CharacterData, EnglishCharacterData
from passrule.domain.entities.password_data import (
    HistoricalReference,
    PasswordData,
    Reference,
    SourceReference,
)
from passrule.domain.entities.rule_result import RuleResult, RuleResultDetail
from passrule.domain.entities.word_dictionary import WordDictionary

__all__ = [
    "CharacterData",
    "EnglishCharacterData",
    "PasswordData",
    "Reference",
    "HistoricalReference",
    "SourceReference",
    "RuleResult",
    "RuleResultDetail",
    "WordDictionary",
]
