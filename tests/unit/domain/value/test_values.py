"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from gate.domain.error import FormatError
from gate.domain.value import CodeDigest, CodePepper, InviteCode, PasswordDigest


class TestInviteCode:
    """Tests for InviteCode."""

    def test_normalizes_on_construction(self):
        assert InviteCode("  abc-123 ").root == "ABC-123"

    @pytest.mark.parametrize("raw", ["", "   ", "ab", "abc ", "X" * 129])
    def test_rejects_out_of_bounds_length(self, raw):
        """Codes must be 4-128 characters after normalization."""
        with pytest.raises(ValidationError):
            InviteCode(raw)

    def test_accepts_bounds(self):
        assert InviteCode("abcd").root == "ABCD"
        assert len(InviteCode("x" * 128).root) == 128


class TestCodeDigest:
    """Tests for CodeDigest."""

    def test_accepts_lowercase_hex(self):
        assert CodeDigest("a" * 64).root == "a" * 64

    @pytest.mark.parametrize("raw", ["A" * 64, "a" * 63, "g" * 64, ""])
    def test_rejects_other_formats(self, raw):
        with pytest.raises(ValidationError):
            CodeDigest(raw)


class TestCodePepper:
    """Tests for CodePepper."""

    def test_rejects_blank(self):
        with pytest.raises(ValidationError):
            CodePepper(secret="  ")

    def test_is_immutable(self):
        pepper = CodePepper(secret="pepper")

        with pytest.raises(ValidationError):
            pepper.secret = "other"


class TestPasswordDigest:
    """Tests for PasswordDigest parsing and encoding."""

    STORED = (
        "$argon2id$v=19$m=65536,t=3,p=4"
        "$c29tZXNhbHRzb21lc2FsdA"
        "$aGFzaGhhc2hoYXNoaGFzaGhhc2hoYXNoaGFzaGhhc2g"
    )

    def test_parse_reads_parameters(self):
        parsed = PasswordDigest.parse(self.STORED)

        assert parsed.algorithm == "argon2id"
        assert parsed.version == 19
        assert parsed.memory_cost == 65536
        assert parsed.time_cost == 3
        assert parsed.parallelism == 4
        assert parsed.salt == b"somesaltsomesalt"
        assert parsed.digest == b"hashhashhashhashhashhashhashhash"

    def test_encode_reproduces_stored_string(self):
        assert PasswordDigest.parse(self.STORED).encode() == self.STORED

    def test_missing_version_means_legacy(self):
        """Pre-1.3 hashes have no v= segment."""
        legacy = self.STORED.replace("$v=19", "")

        assert PasswordDigest.parse(legacy).version == 0x10

    @pytest.mark.parametrize(
        "stored",
        [
            "",
            "$argon2id$v=19$m=65536,t=3,p=4",
            "$scrypt$ln=16,r=8,p=1$c2FsdA$aGFzaA",
            # salt shorter than 8 bytes
            "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaGhhc2g",
            # zero cost
            "$argon2id$v=19$m=65536,t=0,p=4"
            "$c29tZXNhbHRzb21lc2FsdA$aGFzaGhhc2hoYXNo",
            # not valid base64 (length 1 mod 4)
            "$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHRzb21lc2Fsd$aGFzaGhhc2g",
        ],
    )
    def test_parse_rejects_malformed(self, stored):
        with pytest.raises(FormatError):
            PasswordDigest.parse(stored)

    def test_parse_rejects_non_string(self):
        with pytest.raises(FormatError):
            PasswordDigest.parse(None)
