"""Domain services for PassRule.

Services apply rules to passwords and generate passwords from rules.
"""

from passrule.domain.services.password_generator import PasswordGenerator, RandomSource
from passrule.domain.services.password_validator import PasswordValidator
from passrule.domain.services.policy_builder import build_rules, character_rules

__all__ = [
    "PasswordGenerator",
    "PasswordValidator",
    "RandomSource",
    "build_rules",
    "character_rules",
]
