"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through the ORM.
"""

from typing import Any, Dict
from uuid import UUID

from gate.domain.model import Account, Credential, Invite
from gate.domain.value import AccountId, CodeDigest, InviteId


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    used_by = _uuid(row.get("used_by"))
    created_by = _uuid(row.get("created_by"))
    return Invite(
        id=InviteId(_uuid(row["id"])),
        code_hash=CodeDigest(row["code_hash"].strip()),
        meta=row.get("meta") or {},
        expires_at=row.get("expires_at"),
        used_at=row.get("used_at"),
        used_by=AccountId(used_by) if used_by else None,
        created_by=AccountId(created_by) if created_by else None,
        created_at=row["created_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    # CodeDigest serializes to its root string
    return invite.model_dump()


def row_to_credential(row: Dict[str, Any]) -> Credential:
    """Convert database row to Credential domain model."""
    return Credential(
        account_id=AccountId(_uuid(row["account_id"])),
        password_hash=row["password_hash"],
        updated_at=row["updated_at"],
    )


def credential_to_dict(credential: Credential) -> Dict[str, Any]:
    """Convert Credential domain model to database dict."""
    return credential.model_dump()


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        email=row["email"],
        invite_id=InviteId(_uuid(row["invite_id"])),
        created_at=row["created_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return account.model_dump()
