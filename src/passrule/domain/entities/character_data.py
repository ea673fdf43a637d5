"""Character classes used by character rules and the password generator."""

import string
from dataclasses import dataclass, field

from passrule.core.exceptions import PolicyConfigurationError


@dataclass(frozen=True)
class CharacterData:
    """A named class of characters.

    Attributes:
        error_code: Error code reported when a password lacks enough members.
        characters: Member characters. Order is kept, duplicates are ignored.
        members: Set view of the member characters.
    """

    error_code: str
    characters: str
    members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.characters:
            raise PolicyConfigurationError(
                f"Character data {self.error_code!r} must contain at least one character"
            )
        object.__setattr__(self, "characters", "".join(dict.fromkeys(self.characters)))
        object.__setattr__(self, "members", frozenset(self.characters))

    def __contains__(self, char: object) -> bool:
        return char in self.members


class EnglishCharacterData:
    """Character classes for English passwords."""

    UPPER_CASE = CharacterData("INSUFFICIENT_UPPERCASE", string.ascii_uppercase)
    LOWER_CASE = CharacterData("INSUFFICIENT_LOWERCASE", string.ascii_lowercase)
    ALPHABETICAL = CharacterData("INSUFFICIENT_ALPHABETICAL", string.ascii_letters)
    DIGIT = CharacterData("INSUFFICIENT_DIGIT", string.digits)
    SPECIAL = CharacterData("INSUFFICIENT_SPECIAL", string.punctuation)
