"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Select, Update, func, literal, select, true, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.error import AlreadyUsedError, DuplicateCodeError, NotFoundError
from gate.domain.model import Invite
from gate.domain.repository import InviteRepository
from gate.domain.value import AccountId, CodeDigest, InviteId
from gate.persistence.mappers import invite_to_dict, row_to_invite
from gate.persistence.tables import invites_table


def build_claim_statement(
    invite_id: InviteId, account_id: AccountId, now: datetime
) -> Update:
    """Conditional update that claims an unused invite.

    Only matches while ``used_at`` is NULL, and sets ``used_at`` and
    ``used_by`` in the same statement. Concurrent claims on one row are
    serialized by the row lock; every claim after the first re-checks the
    predicate and matches nothing.
    """
    return (
        update(invites_table)
        .where(
            invites_table.c.id == invite_id,
            invites_table.c.used_at.is_(None),
        )
        .values(used_at=now, used_by=account_id)
        .returning(invites_table)
    )


def build_claim_query(
    invite_id: InviteId, account_id: AccountId, now: datetime
) -> Select:
    """Claim statement plus an existence check, in one round trip.

    Always yields exactly one row: ``invite_exists`` and, when the claim
    matched, the claimed invite's columns (all NULL otherwise). The
    existence check reads the statement snapshot, so it sees the row
    whether or not the claim updated it.
    """
    claimed = build_claim_statement(invite_id, account_id, now).cte("claimed")
    anchor = select(literal(1).label("one")).subquery("anchor")
    invite_exists = (
        select(invites_table.c.id).where(invites_table.c.id == invite_id).exists()
    )
    return select(invite_exists.label("invite_exists"), claimed).select_from(
        anchor.outerjoin(claimed, true())
    )


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, invite: Invite) -> Invite:
        """Insert an invite unless its code hash is taken.

        Uses ON CONFLICT DO NOTHING so a duplicate doesn't abort the
        surrounding transaction.

        Args:
            invite: Invite to insert

        Returns:
            Stored invite

        Raises:
            DuplicateCodeError: If the code hash already exists
        """
        stmt = (
            insert(invites_table)
            .values(**invite_to_dict(invite))
            .on_conflict_do_nothing(index_elements=[invites_table.c.code_hash])
            .returning(invites_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise DuplicateCodeError()
        return row_to_invite(dict(row))

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_hash(self, code_hash: CodeDigest) -> Optional[Invite]:
        """Find an invite by its code digest.

        Args:
            code_hash: Digest to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.code_hash == code_hash.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def claim(
        self, invite_id: InviteId, account_id: AccountId, now: datetime
    ) -> Invite:
        """Claim an invite with a single conditional update.

        The update and the existence check for a missed claim go out as
        one statement, so a claim costs one round trip either way.

        Args:
            invite_id: Invite to claim
            account_id: Claiming account
            now: Claim timestamp

        Returns:
            Claimed invite

        Raises:
            AlreadyUsedError: If another claim got there first
            NotFoundError: If the invite does not exist
        """
        result = await self.session.execute(
            build_claim_query(invite_id, account_id, now)
        )
        row = dict(result.mappings().one())
        invite_exists = row.pop("invite_exists")
        if row["id"] is not None:
            return row_to_invite(row)

        if invite_exists:
            raise AlreadyUsedError(str(invite_id))
        raise NotFoundError("Invite", str(invite_id))

    async def list_invites(
        self, used: Optional[bool] = None, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites, newest first.

        Args:
            used: Optional used/unused filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of matching invites
        """
        stmt = (
            select(invites_table)
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        if used is not None:
            stmt = stmt.where(self._used_filter(used))

        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def count_invites(self, used: Optional[bool] = None) -> int:
        """Count invites.

        Args:
            used: Optional used/unused filter

        Returns:
            Count of matching invites
        """
        stmt = select(func.count()).select_from(invites_table)
        if used is not None:
            stmt = stmt.where(self._used_filter(used))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @staticmethod
    def _used_filter(used: bool):
        if used:
            return invites_table.c.used_at.is_not(None)
        return invites_table.c.used_at.is_(None)
