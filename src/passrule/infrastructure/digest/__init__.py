"""Digest providers."""

from passrule.infrastructure.digest.digesters import Argon2Digester, HashlibDigester

__all__ = ["Argon2Digester", "HashlibDigester"]
