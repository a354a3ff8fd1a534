"""Self-describing password digest.

Stored password hashes are PHC strings, e.g.::

    $argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>

Salt and hash are standard base64 without padding. ``PasswordDigest``
is the parsed, tagged form of such a string so callers can inspect the
algorithm and cost parameters without re-parsing.
"""

import base64
import binascii
import re
from typing import Literal

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from gate.domain.error import FormatError
from gate.domain.value.common import ValueObject

Argon2Variant = Literal["argon2id", "argon2i", "argon2d"]

# Hashes written before version 1.3 omit the v= segment
LEGACY_ARGON2_VERSION = 0x10

_PHC_PATTERN = re.compile(
    r"^\$(?P<algorithm>argon2id|argon2i|argon2d)"
    r"(?:\$v=(?P<version>\d+))?"
    r"\$m=(?P<m>\d+),t=(?P<t>\d+),p=(?P<p>\d+)"
    r"\$(?P<salt>[A-Za-z0-9+/]+)"
    r"\$(?P<digest>[A-Za-z0-9+/]+)$"
)


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def _b64decode(value: str) -> bytes:
    padded = value + "=" * (-len(value) % 4)
    return base64.b64decode(padded, validate=True)


class PasswordDigest(ValueObject):
    """Parsed Argon2 password hash."""

    algorithm: Argon2Variant
    version: int = Field(ge=1)
    memory_cost: int = Field(ge=1)  # KiB
    time_cost: int = Field(ge=1)
    parallelism: int = Field(ge=1)
    salt: bytes = Field(min_length=8)
    digest: bytes = Field(min_length=4)

    def encode(self) -> str:
        """Render as a PHC string."""
        return (
            f"${self.algorithm}$v={self.version}"
            f"$m={self.memory_cost},t={self.time_cost},p={self.parallelism}"
            f"${_b64encode(self.salt)}${_b64encode(self.digest)}"
        )

    @classmethod
    def parse(cls, encoded: str) -> "PasswordDigest":
        """Parse a PHC string.

        Args:
            encoded: Stored password hash

        Returns:
            Parsed digest

        Raises:
            FormatError: If the string is not a well-formed Argon2 hash
        """
        if not isinstance(encoded, str):
            raise FormatError("Password hash must be a string")

        match = _PHC_PATTERN.match(encoded)
        if not match:
            raise FormatError("Password hash is not a recognised Argon2 string")

        try:
            return cls(
                algorithm=match["algorithm"],
                version=int(match["version"] or LEGACY_ARGON2_VERSION),
                memory_cost=int(match["m"]),
                time_cost=int(match["t"]),
                parallelism=int(match["p"]),
                salt=_b64decode(match["salt"]),
                digest=_b64decode(match["digest"]),
            )
        except (binascii.Error, PydanticValidationError) as e:
            raise FormatError(f"Password hash is malformed: {e}") from e
