"""Sequence rule.

Rejects passwords containing a run of consecutive characters from a
reference sequence such as the digits or a keyboard row. Sequences may be
treated as circular (``wrap``) and may be matched in reverse.
"""

from dataclasses import dataclass, field

from passrule.core.exceptions import PolicyConfigurationError
from passrule.core.rules.base import Rule, detail, distinct, reverse
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult

ERROR_CODE = "ILLEGAL_SEQUENCE"

MINIMUM_SEQUENCE_LENGTH = 3
DEFAULT_SEQUENCE_LENGTH = 5


@dataclass(frozen=True)
class SequenceData:
    """A named group of reference sequences.

    Attributes:
        name: Name of the group, e.g. 'NUMERICAL'.
        sequences: Reference strings, each searched independently.
    """

    name: str
    sequences: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.sequences, str):
            object.__setattr__(self, "sequences", (self.sequences,))
        else:
            object.__setattr__(self, "sequences", tuple(self.sequences))
        if not self.sequences or not all(self.sequences):
            raise PolicyConfigurationError(f"Sequence data {self.name!r} has an empty sequence")


class EnglishSequenceData:
    """Common English sequences."""

    NUMERICAL = SequenceData("NUMERICAL", ("0123456789",))
    ALPHABETICAL = SequenceData("ALPHABETICAL", ("abcdefghijklmnopqrstuvwxyz",))
    USQWERTY = SequenceData(
        "USQWERTY",
        (
            "`1234567890-=",
            "qwertyuiop[]\\",
            "asdfghjkl;'",
            "zxcvbnm,./",
            "~!@#$%^&*()_+",
            "QWERTYUIOP{}|",
            'ASDFGHJKL:"',
            "ZXCVBNM<>?",
        ),
    )


@dataclass(frozen=True)
class IllegalSequenceRule(Rule):
    """Rejects windows of ``length`` consecutive characters from a sequence.

    Attributes:
        sequence_data: Reference sequences, or a single sequence string.
        length: Window length.
        wrap: Treat each sequence as circular.
        match_backwards: Also match each sequence in reverse order.
        ignore_case: Compare without regard to case.
        report_all: Report every distinct matching window, or only the first.
    """

    sequence_data: SequenceData | str
    length: int = DEFAULT_SEQUENCE_LENGTH
    wrap: bool = False
    match_backwards: bool = True
    ignore_case: bool = False
    report_all: bool = True
    _search_texts: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.sequence_data, str):
            object.__setattr__(self, "sequence_data", SequenceData("CUSTOM", (self.sequence_data,)))
        if self.length < MINIMUM_SEQUENCE_LENGTH:
            raise PolicyConfigurationError(
                f"Sequence length must be at least {MINIMUM_SEQUENCE_LENGTH}, got {self.length}"
            )
        texts: list[str] = []
        for sequence in self.sequence_data.sequences:
            forward = self._fold(sequence)
            if self.wrap:
                forward += forward[: self.length - 1]
            texts.append(forward)
            if self.match_backwards:
                texts.append(reverse(forward))
        object.__setattr__(self, "_search_texts", tuple(texts))

    def _fold(self, text: str) -> str:
        return text.lower() if self.ignore_case else text

    def _matches(self, window: str) -> bool:
        folded = self._fold(window)
        return any(folded in text for text in self._search_texts)

    def validate(self, password_data: PasswordData) -> RuleResult:
        password = password_data.password
        windows = (
            password[start : start + self.length]
            for start in range(len(password) - self.length + 1)
        )
        matches = list(distinct(window for window in windows if self._matches(window)))
        if not self.report_all:
            matches = matches[:1]
        return RuleResult.from_details(detail(ERROR_CODE, sequence=match) for match in matches)
