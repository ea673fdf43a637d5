"""Message resolution for rule result details.

Maps an error code and its parameters to display text using Jinja2
templates rendered in a sandboxed environment.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import StrictUndefined, Template, TemplateSyntaxError, UndefinedError
from jinja2.sandbox import SandboxedEnvironment

from passrule.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MESSAGES: dict[str, str] = {
    "HISTORY_VIOLATION": "Password matches one of {{ history_size }} previous passwords.",
    "ILLEGAL_WORD": "Password contains the dictionary word '{{ matching_word }}'.",
    "ILLEGAL_WORD_REVERSED": "Password contains the reversed dictionary word '{{ matching_word }}'.",
    "ILLEGAL_MATCH": "Password matches the illegal pattern '{{ match }}'.",
    "ALLOWED_MATCH": "Password must match pattern '{{ pattern }}'.",
    "ILLEGAL_CHAR": "Password contains the illegal character '{{ illegal_character }}'.",
    "ALLOWED_CHAR": "Password contains the illegal character '{{ illegal_character }}'.",
    "ILLEGAL_SEQUENCE": "Password contains the illegal sequence '{{ sequence }}'.",
    "ILLEGAL_USERNAME": "Password contains the user id '{{ username }}'.",
    "ILLEGAL_USERNAME_REVERSED": "Password contains the user id '{{ username }}' in reverse.",
    "ILLEGAL_WHITESPACE": "Password contains a whitespace character.",
    "INSUFFICIENT_UPPERCASE": "Password must contain {{ required }} or more uppercase characters.",
    "INSUFFICIENT_LOWERCASE": "Password must contain {{ required }} or more lowercase characters.",
    "INSUFFICIENT_ALPHABETICAL": "Password must contain {{ required }} or more alphabetical characters.",
    "INSUFFICIENT_DIGIT": "Password must contain {{ required }} or more digit characters.",
    "INSUFFICIENT_SPECIAL": "Password must contain {{ required }} or more special characters.",
    "INSUFFICIENT_CHARACTERISTICS": (
        "Password matches {{ satisfied }} of {{ rule_count }} character rules, "
        "but {{ required }} are required."
    ),
    "SOURCE_VIOLATION": "Password cannot be the same as your {{ source }} password.",
    "TOO_LONG": "Password must be no more than {{ maximum_length }} characters in length.",
    "TOO_SHORT": "Password must be {{ minimum_length }} or more characters in length.",
}


class MessageResolver:
    """Resolves rule result details to display text.

    Templates are compiled once at construction. Parameters of the detail
    are available to its template as variables.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        """Initialize the resolver.

        Args:
            messages: Templates overriding or extending the default catalog.

        Raises:
            TemplateSyntaxError: If a template is invalid.
        """
        self.env = SandboxedEnvironment(autoescape=False, undefined=StrictUndefined)
        catalog = {**DEFAULT_MESSAGES, **(messages or {})}
        self._templates: dict[str, Template] = {}
        for code, source in catalog.items():
            try:
                self._templates[code] = self.env.from_string(source)
            except TemplateSyntaxError as e:
                logger.error("Message template syntax error", error_code=code, error=str(e), line=e.lineno)
                raise

    @classmethod
    def from_file(cls, path: str | Path) -> "MessageResolver":
        """Load template overrides from a JSON object of error code to template."""
        with open(path, encoding="utf-8") as handle:
            messages = json.load(handle)
        if not isinstance(messages, dict):
            raise ValueError(f"Message file {path} must contain a JSON object")
        return cls(messages)

    def resolve(self, error_code: str, parameters: Mapping[str, Any]) -> str:
        """Render the message for an error code.

        Args:
            error_code: Error code of the detail.
            parameters: Parameters of the detail.

        Returns:
            Display text. Unknown codes render as the code followed by the parameters.

        Raises:
            UndefinedError: If the template uses a parameter the detail lacks.
        """
        template = self._templates.get(error_code)
        if template is None:
            logger.warning("No message template for error code", error_code=error_code)
            return f"{error_code}: {dict(parameters)}"
        try:
            return template.render(**parameters)
        except UndefinedError as e:
            logger.error("Undefined parameter in message template", error_code=error_code, error=str(e))
            raise


# Global message resolver instance
_message_resolver: MessageResolver | None = None


def get_message_resolver() -> MessageResolver:
    """Get the global message resolver with the default catalog.

    Returns:
        MessageResolver: Global message resolver instance.
    """
    global _message_resolver
    if _message_resolver is None:
        _message_resolver = MessageResolver()
    return _message_resolver
