"""Exceptions for policy configuration errors.

Validation outcomes are never raised; they are returned as RuleResult data.
The exceptions below signal a misconfigured rule, dictionary or generator
and are raised at construction or generation time.
"""


class PolicyError(Exception):
    """Base class for all policy-related errors."""
    pass


class PolicyConfigurationError(PolicyError, ValueError):
    """Raised when a rule, dictionary or generator is configured incorrectly."""
    pass


class UnsortedDictionaryError(PolicyConfigurationError):
    """Raised when a word dictionary is built from an unsorted word sequence."""

    def __init__(self, index: int, previous: str, word: str):
        self.index = index
        super().__init__(
            f"Dictionary words must be sorted: {word!r} at position {index} "
            f"sorts before {previous!r}"
        )


class InsufficientLengthError(PolicyConfigurationError):
    """Raised when a generated password cannot hold all required characters."""

    def __init__(self, length: int, required: int):
        self.length = length
        self.required = required
        super().__init__(
            f"Password length {length} is less than the {required} characters "
            "required by the character rules"
        )
