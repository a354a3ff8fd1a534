"""Test configuration and fixtures.

Environment is set at import time, before any Settings() is built.
Argon2 costs are lowered so password tests stay fast.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("INVITES__CODE_PEPPER", "test-pepper-not-for-production")
os.environ.setdefault("INVITES__ISSUER_API_KEY", "test-issuer-key")
os.environ.setdefault("CREDENTIALS__TIME_COST", "1")
os.environ.setdefault("CREDENTIALS__MEMORY_COST", "1024")
os.environ.setdefault("CREDENTIALS__PARALLELISM", "1")

if os.environ.get("GATE_TEST_DATABASE_URL"):
    os.environ["DATABASE__URL"] = os.environ["GATE_TEST_DATABASE_URL"]

import logfire  # noqa: E402
import pytest  # noqa: E402

from gate.domain.service import CodeHasher, CredentialHasher  # noqa: E402
from gate.domain.value import CodePepper  # noqa: E402
from tests.factories import FAST_CREDENTIALS, TEST_PEPPER  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def code_hasher() -> CodeHasher:
    """Code hasher keyed with the test pepper."""
    return CodeHasher(CodePepper(secret=TEST_PEPPER))


@pytest.fixture
def credential_hasher() -> CredentialHasher:
    """Credential hasher with minimum costs."""
    return CredentialHasher(FAST_CREDENTIALS)
