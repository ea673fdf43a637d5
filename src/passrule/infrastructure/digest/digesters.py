"""Digest providers for digest-based reference rules.

A digester turns a cleartext password into the same encoded string that
was stored for a reference password, so that digest rules can compare the
two for equality. Digests must be deterministic for a given configuration.
"""

import base64
import hashlib
from dataclasses import dataclass
from typing import Literal

from argon2 import Type
from argon2.low_level import hash_secret

from passrule.core.exceptions import PolicyConfigurationError


@dataclass(frozen=True)
class HashlibDigester:
    """Salted message digest using a hashlib algorithm.

    Attributes:
        algorithm: Any name accepted by hashlib.new, e.g. 'sha256'.
        salt: Prefix hashed before the password.
        encoding: Output encoding of the digest bytes.

    Example:
        >>> HashlibDigester("sha1").digest("password")
        '5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8'
    """

    algorithm: str = "sha256"
    salt: str = ""
    encoding: Literal["hex", "base64"] = "hex"

    def __post_init__(self) -> None:
        try:
            hashlib.new(self.algorithm)
        except ValueError as e:
            raise PolicyConfigurationError(f"Unsupported digest algorithm {self.algorithm!r}") from e
        if self.encoding not in ("hex", "base64"):
            raise PolicyConfigurationError(f"Unsupported digest encoding {self.encoding!r}")

    def digest(self, cleartext: str) -> str:
        hasher = hashlib.new(self.algorithm)
        hasher.update((self.salt + cleartext).encode("utf-8"))
        raw = hasher.digest()
        if self.encoding == "hex":
            return raw.hex()
        return base64.b64encode(raw).decode("ascii")


@dataclass(frozen=True)
class Argon2Digester:
    """Argon2id digest with a fixed salt.

    Produces the encoded ``$argon2id$...`` form. The salt is fixed so that the
    same password always yields the same digest.

    Attributes:
        salt: Salt shared with the stored digests, at least 8 bytes.
    """

    salt: bytes
    time_cost: int = 3
    memory_cost: int = 65536
    parallelism: int = 4
    hash_len: int = 32

    def __post_init__(self) -> None:
        if len(self.salt) < 8:
            raise PolicyConfigurationError("Argon2 salt must be at least 8 bytes")

    def digest(self, cleartext: str) -> str:
        encoded = hash_secret(
            cleartext.encode("utf-8"),
            self.salt,
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_len=self.hash_len,
            type=Type.ID,
        )
        return encoded.decode("ascii")
