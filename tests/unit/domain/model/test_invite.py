"""Unit tests for the Invite entity."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from gate.domain.model import Invite
from gate.domain.value import AccountId, InviteId
from tests.factories import make_invite


class TestUsedPair:
    """used_at and used_by are set together or not at all."""

    def test_unused_invite(self, code_hasher):
        invite = make_invite(code_hasher)

        assert invite.is_used is False
        assert invite.used_at is None
        assert invite.used_by is None

    def test_used_invite(self, code_hasher):
        invite = make_invite(code_hasher)

        used = Invite.model_validate(
            {
                **invite.model_dump(),
                "used_at": datetime.now(timezone.utc),
                "used_by": AccountId(uuid4()),
            }
        )

        assert used.is_used is True

    def test_rejects_used_at_without_used_by(self, code_hasher):
        with pytest.raises(ValidationError, match="set together"):
            Invite(
                id=InviteId(uuid4()),
                code_hash=code_hasher.hash("ABC-123"),
                used_at=datetime.now(timezone.utc),
            )

    def test_rejects_used_by_without_used_at(self, code_hasher):
        with pytest.raises(ValidationError, match="set together"):
            Invite(
                id=InviteId(uuid4()),
                code_hash=code_hasher.hash("ABC-123"),
                used_by=AccountId(uuid4()),
            )

    def test_invite_is_immutable(self, code_hasher):
        invite = make_invite(code_hasher)

        with pytest.raises(ValidationError):
            invite.used_at = datetime.now(timezone.utc)


class TestExpiry:
    """Tests for Invite.is_expired."""

    def test_expired_from_expires_at_onwards(self, code_hasher):
        invite = make_invite(code_hasher)

        assert invite.is_expired(invite.expires_at - timedelta(seconds=1)) is False
        assert invite.is_expired(invite.expires_at) is True
        assert invite.is_expired(invite.expires_at + timedelta(days=1)) is True

    def test_no_expiry_never_expires(self, code_hasher):
        invite = make_invite(code_hasher, expires_in=None)

        assert invite.is_expired(datetime(2999, 1, 1, tzinfo=timezone.utc)) is False


class TestBoundEmail:
    """Tests for Invite.bound_email."""

    def test_normalizes_email(self, code_hasher):
        invite = make_invite(code_hasher, email="  A@X.com ")

        assert invite.bound_email == "a@x.com"

    def test_unbound_invite(self, code_hasher):
        assert make_invite(code_hasher).bound_email is None

    def test_null_binding_is_unbound(self, code_hasher):
        invite = make_invite(code_hasher).model_copy(update={"meta": {"email": None}})

        assert invite.is_email_bound is False
        assert invite.bound_email is None

    @pytest.mark.parametrize("value", ["", "   ", 42, ["a@x.com"]])
    def test_unusable_binding_is_still_bound(self, code_hasher, value):
        """An unusable value has no email to match but still counts as bound."""
        invite = make_invite(code_hasher).model_copy(update={"meta": {"email": value}})

        assert invite.is_email_bound is True
        assert invite.bound_email is None
