"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.error import ValidationError
from gate.domain.model import Account
from gate.domain.repository import AccountRepository
from gate.domain.value import AccountId
from gate.persistence.mappers import account_to_dict, row_to_account
from gate.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def create(self, account: Account) -> Account:
        stmt = (
            insert(accounts_table)
            .values(**account_to_dict(account))
            .on_conflict_do_nothing(index_elements=[accounts_table.c.email])
            .returning(accounts_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise ValidationError("Email is already registered")
        return row_to_account(dict(row))
