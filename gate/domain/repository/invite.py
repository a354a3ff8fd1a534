"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from gate.domain.model.invite import Invite
from gate.domain.value import AccountId, CodeDigest, InviteId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(self, invite: Invite) -> Invite:
        """Store a new invite.

        Args:
            invite: The invite to store

        Returns:
            The stored invite

        Raises:
            DuplicateCodeError: If an invite with the same code hash exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_hash(self, code_hash: CodeDigest) -> Invite | None:
        """Find an invite by its code digest.

        Used on every redemption.

        Args:
            code_hash: Keyed digest of the normalized code

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def claim(
        self, invite_id: InviteId, account_id: AccountId, now: datetime
    ) -> Invite:
        """Mark an invite as used, atomically.

        Sets ``used_at`` and ``used_by`` in one conditional mutation that
        only applies while ``used_at`` is still empty. Of any number of
        concurrent calls for the same invite, at most one succeeds.

        Args:
            invite_id: The invite to claim
            account_id: The account the invite is claimed for
            now: Claim timestamp

        Returns:
            The claimed invite

        Raises:
            AlreadyUsedError: If the invite was already claimed
            NotFoundError: If the invite does not exist
        """
        pass

    @abstractmethod
    async def list_invites(
        self, used: bool | None = None, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites, newest first.

        Args:
            used: Filter by used (True) or unused (False); None for all
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def count_invites(self, used: bool | None = None) -> int:
        """Count invites.

        Args:
            used: Filter by used (True) or unused (False); None for all

        Returns:
            Number of invites
        """
        pass
