"""Dictionary rules.

DictionaryRule rejects passwords that are a dictionary word.
DictionarySubstringRule rejects passwords that contain dictionary words.
With ``match_backwards`` the reversed password is searched as well and its
hits are reported under a separate error code.
"""

from dataclasses import dataclass

from passrule.core.rules.base import Rule, detail, distinct, reverse
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.rule_result import RuleResult, RuleResultDetail
from passrule.domain.entities.word_dictionary import WordDictionary

ERROR_CODE = "ILLEGAL_WORD"
ERROR_CODE_REVERSED = "ILLEGAL_WORD_REVERSED"


def find_substring_words(dictionary: WordDictionary, text: str) -> list[str]:
    """Return every distinct dictionary word contained in text."""
    folded = dictionary.fold(text)
    return list(
        distinct(word for start in range(len(folded)) for word in dictionary.words_at(folded, start))
    )


@dataclass(frozen=True)
class DictionaryRule(Rule):
    """Rejects passwords that exactly match a dictionary word.

    Attributes:
        dictionary: Words to reject.
        match_backwards: Also reject passwords whose reverse is a word.
    """

    dictionary: WordDictionary
    match_backwards: bool = False

    def validate(self, password_data: PasswordData) -> RuleResult:
        password = password_data.password
        details: list[RuleResultDetail] = []

        word = self.dictionary.search(password)
        if word is not None:
            details.append(detail(ERROR_CODE, matching_word=word))

        if self.match_backwards:
            word = self.dictionary.search(reverse(password))
            if word is not None:
                details.append(detail(ERROR_CODE_REVERSED, matching_word=word))

        return RuleResult.from_details(details)


@dataclass(frozen=True)
class DictionarySubstringRule(Rule):
    """Rejects passwords that contain any dictionary word.

    Attributes:
        dictionary: Words to reject.
        match_backwards: Also search the reversed password.
    """

    dictionary: WordDictionary
    match_backwards: bool = False

    def validate(self, password_data: PasswordData) -> RuleResult:
        password = password_data.password
        details = [
            detail(ERROR_CODE, matching_word=word)
            for word in find_substring_words(self.dictionary, password)
        ]
        if self.match_backwards:
            details.extend(
                detail(ERROR_CODE_REVERSED, matching_word=word)
                for word in find_substring_words(self.dictionary, reverse(password))
            )
        return RuleResult.from_details(details)
