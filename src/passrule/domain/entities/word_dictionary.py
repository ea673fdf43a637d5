"""Sorted word dictionary.

Supports exact lookup and prefix range search by binary search over the
sorted word list. Words are compared by their case-folded form when the
dictionary is case-insensitive, and the list must be sorted by that form.
"""

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from passrule.core.exceptions import UnsortedDictionaryError


def fold_case(text: str, case_sensitive: bool) -> str:
    """Return the comparison form of text for a dictionary."""
    return text if case_sensitive else text.lower()


@dataclass(frozen=True)
class WordDictionary:
    """Immutable sorted word list.

    Attributes:
        words: Words in sorted order.
        case_sensitive: Whether lookups distinguish upper and lower case.
    """

    words: tuple[str, ...]
    case_sensitive: bool = True
    _keys: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        words = tuple(self.words)
        keys = tuple(fold_case(word, self.case_sensitive) for word in words)
        for index in range(1, len(keys)):
            if keys[index] < keys[index - 1]:
                raise UnsortedDictionaryError(index, words[index - 1], words[index])
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "_keys", keys)

    @classmethod
    def from_words(cls, words: Iterable[str], case_sensitive: bool = True) -> "WordDictionary":
        """Build a dictionary from words in any order."""
        ordered = sorted(words, key=lambda word: fold_case(word, case_sensitive))
        return cls(tuple(ordered), case_sensitive=case_sensitive)

    @classmethod
    def from_file(cls, path: str | Path, case_sensitive: bool = True) -> "WordDictionary":
        """Load one word per line from a UTF-8 text file, skipping blank lines."""
        with open(path, encoding="utf-8") as handle:
            words = [line.strip() for line in handle if line.strip()]
        return cls.from_words(words, case_sensitive=case_sensitive)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word) is not None

    def fold(self, text: str) -> str:
        return fold_case(text, self.case_sensitive)

    def search(self, word: str) -> str | None:
        """Find a word by exact match.

        Returns:
            The stored dictionary word, or None if absent.
        """
        key = self.fold(word)
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self.words[index]
        return None

    def has_prefix(self, prefix: str) -> bool:
        """Check whether any word starts with prefix."""
        key = self.fold(prefix)
        index = bisect_left(self._keys, key)
        return index < len(self._keys) and self._keys[index].startswith(key)

    def words_at(self, folded: str, start: int) -> list[str]:
        """Find every word that occurs in folded text beginning at start.

        The candidate is extended one character at a time and the search
        stops as soon as no word carries the candidate as a prefix.

        Args:
            folded: Text already passed through :meth:`fold`.
            start: Index in folded where matches must begin.

        Returns:
            Matched dictionary words, shortest first.
        """
        found: list[str] = []
        for end in range(start + 1, len(folded) + 1):
            candidate = folded[start:end]
            index = bisect_left(self._keys, candidate)
            if index >= len(self._keys) or not self._keys[index].startswith(candidate):
                break
            if self._keys[index] == candidate:
                found.append(self.words[index])
        return found
