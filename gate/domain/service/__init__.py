"""Domain services."""

from .base import Service
from .code_hasher import CodeHasher, load_code_pepper
from .credential_hasher import CredentialHasher
from .credential_service import CredentialService, PasswordCheck
from .invite_service import InviteService
from .provisioning import AccountProvisioner, RepositoryAccountProvisioner
from .redemption_service import (
    REDEMPTION_ERROR_MAP,
    RedemptionService,
    collapse_redemption_errors,
)

__all__ = [
    "AccountProvisioner",
    "CodeHasher",
    "CredentialHasher",
    "CredentialService",
    "InviteService",
    "PasswordCheck",
    "REDEMPTION_ERROR_MAP",
    "RedemptionService",
    "RepositoryAccountProvisioner",
    "Service",
    "collapse_redemption_errors",
    "load_code_pepper",
]
