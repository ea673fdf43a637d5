"""Password generator service.

Generates passwords that satisfy a set of character rules:

1. draw each rule's minimum number of characters from its class;
2. fill the remaining length from the union of all classes;
3. shuffle, so required characters do not sit at predictable positions.

All draws are uniform and made with replacement. The union is deduplicated,
so characters belonging to several classes are not favoured.
"""

import secrets
from collections.abc import Sequence
from typing import Protocol

from passrule.core.exceptions import InsufficientLengthError, PolicyConfigurationError
from passrule.core.logging import get_logger
from passrule.core.rules.character import CharacterRule

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Source of uniform random integers.

    Satisfied by ``secrets.SystemRandom`` and ``random.Random``.
    """

    def randrange(self, stop: int) -> int: ...


class PasswordGenerator:
    """Generates random passwords meeting character rule minimums.

    Thread-Safety:
        The default ``secrets.SystemRandom`` source is safe to share between
        threads. A seeded ``random.Random`` is not; give each thread its own
        generator in that case.

    Example:
        >>> generator = PasswordGenerator()
        >>> password = generator.generate(12, [CharacterRule(EnglishCharacterData.DIGIT, 2)])
        >>> len(password)
        12
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        """Initialize the generator.

        Args:
            random_source: Random integer source. Defaults to the operating
                system's cryptographically strong source.
        """
        self.random_source = random_source if random_source is not None else secrets.SystemRandom()

    def _choice(self, pool: str) -> str:
        return pool[self.random_source.randrange(len(pool))]

    def _shuffle(self, chars: list[str]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(chars) - 1, 0, -1):
            j = self.random_source.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    def generate(self, length: int, rules: Sequence[CharacterRule]) -> str:
        """Generate a password.

        Args:
            length: Length of the password.
            rules: Character rules the password must satisfy.

        Returns:
            A password of exactly ``length`` characters containing at least the
            minimum number of characters of every rule's class.

        Raises:
            PolicyConfigurationError: If length is not positive, no rules are
                given or a rule is not a CharacterRule.
            InsufficientLengthError: If length is less than the sum of minimums.
        """
        if length <= 0:
            raise PolicyConfigurationError(f"Password length must be positive, got {length}")
        if not rules:
            raise PolicyConfigurationError("At least one character rule is required")
        for rule in rules:
            if not isinstance(rule, CharacterRule):
                raise PolicyConfigurationError(
                    f"Only character rules can be generated, got {type(rule).__name__}"
                )

        required = sum(rule.num_characters for rule in rules)
        if length < required:
            raise InsufficientLengthError(length, required)

        chars: list[str] = []
        for rule in rules:
            chars.extend(self._choice(rule.characters) for _ in range(rule.num_characters))

        pool = "".join(sorted({char for rule in rules for char in rule.characters}))
        chars.extend(self._choice(pool) for _ in range(length - required))

        self._shuffle(chars)
        logger.debug("Password generated", length=length, rule_count=len(rules), pool_size=len(pool))
        return "".join(chars)
