"""Strongly typed identifiers for domain entities.

Using NewType prevents mixing up invite and account IDs.
"""

from typing import NewType
from uuid import UUID

InviteId = NewType("InviteId", UUID)
AccountId = NewType("AccountId", UUID)
