"""Password hashing with Argon2."""

import hmac
import secrets

from argon2 import Parameters, extract_parameters
from argon2.exceptions import HashingError, InvalidHashError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from gate.config import CredentialSettings
from gate.domain.error import FormatError
from gate.domain.value import PasswordDigest

from .base import Service

_ARGON2_TYPES: dict[str, Type] = {
    "argon2id": Type.ID,
    "argon2i": Type.I,
    "argon2d": Type.D,
}


class CredentialHasher(Service):
    """Memory-hard password hashing and verification.

    New hashes are always Argon2id with a fresh random salt. Verification
    honours whatever variant and cost parameters are embedded in the stored
    string, so older hashes keep working until they are upgraded.

    Holds no mutable state; safe to share across threads.
    """

    algorithm = "argon2id"

    def __init__(self, settings: CredentialSettings) -> None:
        """Initialize credential hasher.

        Args:
            settings: Argon2 cost parameters
        """
        self.settings = settings
        self.parameters = Parameters(
            type=Type.ID,
            version=ARGON2_VERSION,
            salt_len=settings.salt_len,
            hash_len=settings.hash_len,
            time_cost=settings.time_cost,
            memory_cost=settings.memory_cost,
            parallelism=settings.parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a password.

        Args:
            password: Plaintext password

        Returns:
            PHC string embedding algorithm, parameters, salt and digest
        """
        salt = secrets.token_bytes(self.settings.salt_len)
        digest = hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=salt,
            time_cost=self.settings.time_cost,
            memory_cost=self.settings.memory_cost,
            parallelism=self.settings.parallelism,
            hash_len=self.settings.hash_len,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
        return PasswordDigest(
            algorithm=self.algorithm,
            version=ARGON2_VERSION,
            memory_cost=self.settings.memory_cost,
            time_cost=self.settings.time_cost,
            parallelism=self.settings.parallelism,
            salt=salt,
            digest=digest,
        ).encode()

    def verify(self, password_hash: str, password: str) -> bool:
        """Verify a password against a stored hash.

        Args:
            password_hash: Stored PHC string
            password: Candidate plaintext password

        Returns:
            True if the password matches

        Raises:
            FormatError: If the stored hash cannot be parsed
        """
        parsed = PasswordDigest.parse(password_hash)
        try:
            candidate = hash_secret_raw(
                secret=password.encode("utf-8"),
                salt=parsed.salt,
                time_cost=parsed.time_cost,
                memory_cost=parsed.memory_cost,
                parallelism=parsed.parallelism,
                hash_len=len(parsed.digest),
                type=_ARGON2_TYPES[parsed.algorithm],
                version=parsed.version,
            )
        except HashingError as e:
            # Parameters parsed but rejected by argon2 (e.g. m < 8p)
            raise FormatError(f"Password hash parameters are invalid: {e}") from e
        return hmac.compare_digest(candidate, parsed.digest)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check whether a stored hash differs from the current parameters.

        Same comparison as ``argon2.PasswordHasher.check_needs_rehash``.

        Raises:
            FormatError: If the stored hash cannot be parsed
        """
        PasswordDigest.parse(password_hash)
        try:
            stored = extract_parameters(password_hash)
        except InvalidHashError as e:
            raise FormatError(f"Password hash is malformed: {e}") from e
        return stored != self.parameters
