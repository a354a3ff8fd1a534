"""PostgreSQL implementation of Credential repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.model import Credential
from gate.domain.repository import CredentialRepository
from gate.domain.value import AccountId
from gate.persistence.mappers import credential_to_dict, row_to_credential
from gate.persistence.tables import credentials_table


class PostgresCredentialRepository(CredentialRepository):
    """PostgreSQL implementation of CredentialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_account(self, account_id: AccountId) -> Optional[Credential]:
        """Find the credential for an account."""
        stmt = select(credentials_table).where(
            credentials_table.c.account_id == account_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_credential(dict(row)) if row else None

    async def save(self, credential: Credential) -> Credential:
        """Upsert the credential, replacing hash and timestamp together."""
        values = credential_to_dict(credential)
        stmt = insert(credentials_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[credentials_table.c.account_id],
            set_={
                "password_hash": stmt.excluded.password_hash,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return credential
