"""PassRule - password policy validation and generation.

Composable password rules, a validator that reports every violation, and a
generator for passwords that meet character class minimums.
"""

__version__ = "0.1.0"

from passrule.core.exceptions import (
    InsufficientLengthError,
    PolicyConfigurationError,
    PolicyError,
    UnsortedDictionaryError,
)
from passrule.core.rules import (
    AllowedCharacterRule,
    AllowedRegexRule,
    CharacterCharacteristicsRule,
    CharacterRule,
    Digester,
    DictionaryRule,
    DictionarySubstringRule,
    DigestHistoryRule,
    DigestSourceRule,
    EnglishSequenceData,
    HistoryRule,
    IllegalCharacterRule,
    IllegalRegexRule,
    IllegalSequenceRule,
    LengthRule,
    RepeatCharacterRegexRule,
    Rule,
    SequenceData,
    SourceRule,
    UsernameRule,
    WhitespaceRule,
)
from passrule.domain.entities import (
    CharacterData,
    EnglishCharacterData,
    HistoricalReference,
    PasswordData,
    Reference,
    RuleResult,
    RuleResultDetail,
    SourceReference,
    WordDictionary,
)
from passrule.domain.services import PasswordGenerator, PasswordValidator
from passrule.infrastructure.messages import MessageResolver

__all__ = [
    "__version__",
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
    "CharacterData",
    "EnglishCharacterData",
    "PasswordData",
    "Reference",
    "HistoricalReference",
    "SourceReference",
    "RuleResult",
    "RuleResultDetail",
    "WordDictionary",
    "PasswordValidator",
    "PasswordGenerator",
    "MessageResolver",
    "PolicyError",
    "PolicyConfigurationError",
    "UnsortedDictionaryError",
    "InsufficientLengthError",
]
