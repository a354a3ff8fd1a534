"""In-memory invite repository for testing."""

import threading
from datetime import datetime
from typing import Optional

from gate.domain.error import AlreadyUsedError, DuplicateCodeError, NotFoundError
from gate.domain.model.invite import Invite
from gate.domain.repository.invite import InviteRepository
from gate.domain.value import AccountId, CodeDigest, InviteId


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository.

    A single lock guards every read-modify-write, which makes ``claim`` a
    check-and-set equivalent to the conditional UPDATE used in Postgres.
    The lock is a threading lock, so the guarantee holds across threads
    and event loops, not just within one loop.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._invites: dict[InviteId, Invite] = {}
        self._by_hash: dict[str, InviteId] = {}

    async def create(self, invite: Invite) -> Invite:
        """Store a new invite.

        Raises:
            DuplicateCodeError: If the code hash already exists
        """
        with self._lock:
            if invite.code_hash.root in self._by_hash:
                raise DuplicateCodeError()
            self._invites[invite.id] = invite
            self._by_hash[invite.code_hash.root] = invite.id
            return invite

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        with self._lock:
            return self._invites.get(invite_id)

    async def find_by_hash(self, code_hash: CodeDigest) -> Optional[Invite]:
        """Find an invite by code digest."""
        with self._lock:
            invite_id = self._by_hash.get(code_hash.root)
            return self._invites.get(invite_id) if invite_id else None

    async def claim(
        self, invite_id: InviteId, account_id: AccountId, now: datetime
    ) -> Invite:
        """Claim an invite with a locked check-and-set.

        Raises:
            AlreadyUsedError: If the invite was already claimed
            NotFoundError: If the invite does not exist
        """
        with self._lock:
            invite = self._invites.get(invite_id)
            if invite is None:
                raise NotFoundError("Invite", str(invite_id))
            if invite.used_at is not None:
                raise AlreadyUsedError(str(invite_id))

            # Re-validate rather than model_copy so the used pair is checked
            claimed = Invite.model_validate(
                {**invite.model_dump(), "used_at": now, "used_by": account_id}
            )
            self._invites[invite_id] = claimed
            return claimed

    async def list_invites(
        self, used: Optional[bool] = None, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites, newest first."""
        with self._lock:
            matches = [
                invite
                for invite in self._invites.values()
                if used is None or invite.is_used == used
            ]

        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches[offset : offset + limit]

    async def count_invites(self, used: Optional[bool] = None) -> int:
        """Count invites."""
        with self._lock:
            return sum(
                1
                for invite in self._invites.values()
                if used is None or invite.is_used == used
            )
