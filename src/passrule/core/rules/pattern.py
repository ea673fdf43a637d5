"""Pattern rules.

Regular expression, character set, whitespace, username and repeated
character rules. Regex and character set rules come in pairs: the Illegal
variant fails when the pattern or character is present, the Allowed variant
fails when the required pattern is absent or a character falls outside the
allowed set.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import groupby

from passrule.core.exceptions import PolicyConfigurationError
from passrule.core.rules.base import Rule, detail, distinct, reverse
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult, RuleResultDetail

ILLEGAL_MATCH = "ILLEGAL_MATCH"
ALLOWED_MATCH = "ALLOWED_MATCH"
ILLEGAL_CHAR = "ILLEGAL_CHAR"
ALLOWED_CHAR = "ALLOWED_CHAR"
ILLEGAL_WHITESPACE = "ILLEGAL_WHITESPACE"
ILLEGAL_USERNAME = "ILLEGAL_USERNAME"
ILLEGAL_USERNAME_REVERSED = "ILLEGAL_USERNAME_REVERSED"

# Unicode White_Space code points
WHITESPACE_CHARACTERS = frozenset(
    "\u0009\u000a\u000b\u000c\u000d\u0020\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

MINIMUM_REPEAT_LENGTH = 3
DEFAULT_REPEAT_LENGTH = 4


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PolicyConfigurationError(f"Invalid pattern {pattern!r}: {e}") from e


def _character_details(
    password: str,
    offending: Callable[[str], bool],
    error_code: str,
    parameter: str,
    report_all: bool,
) -> list[RuleResultDetail]:
    """Build one detail per distinct offending character of password."""
    chars = [char for char in distinct(password) if offending(char)]
    if not report_all:
        chars = chars[:1]
    return [detail(error_code, **{parameter: char}) for char in chars]


@dataclass(frozen=True)
class IllegalRegexRule(Rule):
    """Rejects passwords in which the pattern is found."""

    pattern: str | re.Pattern[str]
    report_all: bool = True
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", _compile(self.pattern))

    def validate(self, password_data: PasswordData) -> RuleResult:
        details = []
        for match in self._regex.finditer(password_data.password):
            details.append(detail(ILLEGAL_MATCH, match=match.group(), pattern=self._regex.pattern))
            if not self.report_all:
                break
        return RuleResult.from_details(details)


@dataclass(frozen=True)
class AllowedRegexRule(Rule):
    """Requires the pattern to be found in the password."""

    pattern: str | re.Pattern[str]
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", _compile(self.pattern))

    def validate(self, password_data: PasswordData) -> RuleResult:
        if self._regex.search(password_data.password):
            return RuleResult.success()
        return RuleResult.failure([detail(ALLOWED_MATCH, pattern=self._regex.pattern)])


@dataclass(frozen=True)
class IllegalCharacterRule(Rule):
    """Rejects passwords containing any of the given characters."""

    characters: str
    report_all: bool = True

    def __post_init__(self) -> None:
        if not self.characters:
            raise PolicyConfigurationError("Illegal characters must not be empty")

    def validate(self, password_data: PasswordData) -> RuleResult:
        return RuleResult.from_details(
            _character_details(
                password_data.password,
                lambda char: char in self.characters,
                ILLEGAL_CHAR,
                "illegal_character",
                self.report_all,
            )
        )


@dataclass(frozen=True)
class AllowedCharacterRule(Rule):
    """Rejects passwords containing characters outside the given set."""

    characters: str
    report_all: bool = True

    def __post_init__(self) -> None:
        if not self.characters:
            raise PolicyConfigurationError("Allowed characters must not be empty")

    def validate(self, password_data: PasswordData) -> RuleResult:
        return RuleResult.from_details(
            _character_details(
                password_data.password,
                lambda char: char not in self.characters,
                ALLOWED_CHAR,
                "illegal_character",
                self.report_all,
            )
        )


@dataclass(frozen=True)
class WhitespaceRule(Rule):
    """Rejects passwords containing whitespace."""

    report_all: bool = True

    def validate(self, password_data: PasswordData) -> RuleResult:
        return RuleResult.from_details(
            _character_details(
                password_data.password,
                WHITESPACE_CHARACTERS.__contains__,
                ILLEGAL_WHITESPACE,
                "whitespace_character",
                self.report_all,
            )
        )


@dataclass(frozen=True)
class UsernameRule(Rule):
    """Rejects passwords containing the username.

    Attributes:
        match_backwards: Also reject the reversed username.
        ignore_case: Compare without regard to case.
    """

    match_backwards: bool = False
    ignore_case: bool = False

    def validate(self, password_data: PasswordData) -> RuleResult:
        username = password_data.username
        if not username:
            return RuleResult.success()

        password = password_data.password
        search = username
        if self.ignore_case:
            password = password.lower()
            search = search.lower()

        details = []
        if search in password:
            details.append(detail(ILLEGAL_USERNAME, username=username))
        if self.match_backwards and reverse(search) in password:
            details.append(detail(ILLEGAL_USERNAME_REVERSED, username=username))
        return RuleResult.from_details(details)


@dataclass(frozen=True)
class RepeatCharacterRegexRule(Rule):
    """Rejects runs of the same character repeated ``sequence_length`` or more times."""

    sequence_length: int = DEFAULT_REPEAT_LENGTH

    def __post_init__(self) -> None:
        if self.sequence_length < MINIMUM_REPEAT_LENGTH:
            raise PolicyConfigurationError(
                f"Repeat length must be at least {MINIMUM_REPEAT_LENGTH}, "
                f"got {self.sequence_length}"
            )

    def validate(self, password_data: PasswordData) -> RuleResult:
        details = []
        for char, run in groupby(password_data.password):
            length = len(list(run))
            if length >= self.sequence_length:
                details.append(
                    detail(ILLEGAL_MATCH, match=char * length, character=char, length=length)
                )
        return RuleResult.from_details(details)
