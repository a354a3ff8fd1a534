"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCodeError(DomainError):
    """Raised when an invite code cannot be redeemed.

    Covers unknown, malformed and already-used codes alike, so callers
    cannot probe which codes exist.
    """

    def __init__(self) -> None:
        super().__init__("Invalid invite code")


class ExpiredError(DomainError):
    """Raised when redeeming an invite past its expiry."""

    def __init__(self) -> None:
        super().__init__("Invite code has expired")


class EmailMismatchError(DomainError):
    """Raised when the invite is bound to a different email."""

    def __init__(self) -> None:
        super().__init__("Invite code is bound to another email address")


class DuplicateCodeError(DomainError):
    """Raised at issuance when an invite with the same digest exists."""

    def __init__(self) -> None:
        super().__init__("An invite with this code already exists")


class AlreadyUsedError(DomainError):
    """Raised when a claim finds the invite already claimed.

    Internal to the redemption flow; never surfaced to applicants.
    """

    def __init__(self, invite_id: str):
        self.invite_id = invite_id
        super().__init__(f"Invite {invite_id} has already been used")


class FormatError(DomainError):
    """Raised when a stored password hash cannot be parsed.

    Distinct from a failed verification: the account needs a forced
    password reset rather than a "wrong password" response.
    """

    pass
