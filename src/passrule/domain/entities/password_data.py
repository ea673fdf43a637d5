"""Password data entity.

Carries the candidate password together with the username and the
reference passwords that history and source rules compare against.
"""

from dataclasses import dataclass, field
from typing import TypeVar


@dataclass(frozen=True)
class Reference:
    """A password known from somewhere else.

    Attributes:
        label: Identifies the reference, e.g. the system it came from.
        password: Cleartext secret or an opaque digest of one.
    """

    label: str
    password: str


@dataclass(frozen=True)
class HistoricalReference(Reference):
    """A password previously used by the same user."""


@dataclass(frozen=True)
class SourceReference(Reference):
    """A password the user holds on another system."""


ReferenceT = TypeVar("ReferenceT", bound=Reference)


@dataclass(frozen=True)
class PasswordData:
    """Input for a single password validation.

    Attributes:
        password: The candidate password.
        username: Optional username of the password owner.
        references: Ordered reference passwords.
    """

    password: str
    username: str | None = None
    references: tuple[Reference, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.references, tuple):
            object.__setattr__(self, "references", tuple(self.references))

    def references_of(self, kind: type[ReferenceT]) -> list[ReferenceT]:
        """Return the references of one kind, preserving order."""
        return [ref for ref in self.references if isinstance(ref, kind)]
