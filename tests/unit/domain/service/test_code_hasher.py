"""Unit tests for CodeHasher."""

import re

import pytest
from pydantic import SecretStr

from gate.config import InviteSettings
from gate.domain.service import CodeHasher, load_code_pepper
from gate.domain.service.code_hasher import CODE_ALPHABET
from gate.domain.value import CodeDigest, CodePepper
from gate.util.error import ConfigurationError


class TestHash:
    """Tests for CodeHasher.hash."""

    def test_normalization_variants_share_digest(self, code_hasher):
        """Case and surrounding whitespace should not change the digest."""
        assert code_hasher.hash(" abc-123 ") == code_hasher.hash("ABC-123")
        assert code_hasher.hash("abc-123") == code_hasher.hash("ABC-123")
        assert code_hasher.hash("\tAbC-123\n") == code_hasher.hash("ABC-123")

    def test_hash_is_deterministic(self, code_hasher):
        """Same code should always produce the same digest."""
        assert code_hasher.hash("K7QM-XP3D") == code_hasher.hash("K7QM-XP3D")

    def test_digest_is_64_lowercase_hex(self, code_hasher):
        """Digest should be a CodeDigest of 64 lowercase hex chars."""
        digest = code_hasher.hash("ABC-123")

        assert isinstance(digest, CodeDigest)
        assert re.fullmatch(r"[0-9a-f]{64}", digest.root)

    def test_inner_whitespace_is_significant(self, code_hasher):
        """Only surrounding whitespace is stripped."""
        assert code_hasher.hash("ABC 123") != code_hasher.hash("ABC123")

    def test_random_codes_do_not_collide(self, code_hasher):
        """1000 distinct codes should give 1000 distinct digests."""
        codes = set()
        while len(codes) < 1000:
            codes.add(CodeHasher.generate_code())

        digests = {code_hasher.hash(code).root for code in codes}

        assert len(digests) == 1000

    def test_digest_depends_on_pepper(self, code_hasher):
        """A different pepper should give a different digest."""
        other = CodeHasher(CodePepper(secret="another-pepper"))

        assert other.hash("ABC-123") != code_hasher.hash("ABC-123")

    def test_digest_does_not_contain_code(self, code_hasher):
        """The digest should not leak the plaintext."""
        assert "ABC" not in code_hasher.hash("ABC-123").root.upper()


class TestGenerateCode:
    """Tests for CodeHasher.generate_code."""

    def test_default_shape(self):
        """Default codes are three groups of four."""
        code = CodeHasher.generate_code()

        groups = code.split("-")
        assert len(groups) == 3
        assert all(len(group) == 4 for group in groups)

    def test_uses_unambiguous_alphabet(self):
        """Generated codes avoid look-alike characters."""
        for _ in range(50):
            code = CodeHasher.generate_code(groups=2, group_size=6)
            assert set(code.replace("-", "")) <= set(CODE_ALPHABET)

    def test_generated_code_survives_normalization(self):
        """Generated codes are already in normalized form."""
        code = CodeHasher.generate_code()

        assert CodeHasher.normalize(code) == code


class TestLoadCodePepper:
    """Tests for load_code_pepper."""

    def test_missing_pepper_raises(self):
        """Startup must fail without a pepper."""
        with pytest.raises(ConfigurationError, match="INVITES__CODE_PEPPER"):
            load_code_pepper(InviteSettings(code_pepper=None))

    def test_blank_pepper_raises(self):
        """A whitespace-only pepper is as good as none."""
        with pytest.raises(ConfigurationError):
            load_code_pepper(InviteSettings(code_pepper=SecretStr("   ")))

    def test_pepper_is_hidden_from_repr(self):
        """The secret should not appear in repr output."""
        pepper = load_code_pepper(InviteSettings(code_pepper=SecretStr("s3cret")))

        assert "s3cret" not in repr(pepper)
        assert pepper.key() == b"s3cret"
