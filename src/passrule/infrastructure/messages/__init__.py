"""Message resolution for rule results."""

from passrule.infrastructure.messages.message_resolver import (
    DEFAULT_MESSAGES,
    MessageResolver,
    get_message_resolver,
)

__all__ = ["DEFAULT_MESSAGES", "MessageResolver", "get_message_resolver"]
