"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change an account they don't own."""

    def __init__(self, nickname: str, target: str):
        super().__init__(f"user {nickname} is not allowed to change {target}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateUserError(DomainError):
    """Raised when registering a nickname or email that is already taken."""

    def __init__(self):
        super().__init__("user with this email or username exists")


class InvalidCredentialsError(DomainError):
    """Raised when a login password does not match."""

    def __init__(self):
        super().__init__("password incorrect")


class UnauthorizedError(DomainError):
    """Raised when a bearer credential cannot be resolved to a user."""

    def __init__(self, reason: str):
        super().__init__(f"unauthorized: {reason}")


class SenderNotFoundError(NotFoundError):
    """Raised when the acting user of a vote no longer exists.

    Deliberately not a ``VotingError``: the vote routes let it propagate
    as a generic server error.
    """

    def __init__(self, nickname: str):
        super().__init__("sender", nickname)


class PersistenceError(DomainError):
    """Raised when a single-row write could not be applied."""

    pass


class VotingError(BusinessRuleViolationError):
    """Base for vote rejections reported back to the voter."""

    pass


class TargetNotFoundError(VotingError):
    """Raised when the user being voted on does not exist."""

    def __init__(self, nickname: str):
        self.nickname = nickname
        super().__init__(f"user not found: {nickname}")


class SelfVoteError(VotingError):
    """Raised when a user votes for themselves."""

    def __init__(self):
        super().__init__("user can't vote for themselves")


class RateLimitedError(VotingError):
    """Raised when a user votes again inside the cooldown window."""

    def __init__(self, cooldown_seconds: int):
        self.cooldown_seconds = cooldown_seconds
        minutes = cooldown_seconds // 60
        super().__init__(f"you can vote once per {minutes} minutes")


class DuplicateVoteError(VotingError):
    """Raised when a voter repeats the vote they already cast."""

    def __init__(self):
        super().__init__("user can't vote twice for one person")


class CorruptLedgerError(VotingError):
    """Raised when a stored vote ledger cannot be decoded."""

    def __init__(self, detail: str):
        super().__init__(f"can't read user vote list: {detail}")


class LedgerEncodingError(VotingError):
    """Raised when a vote ledger cannot be encoded for storage."""

    def __init__(self, detail: str):
        super().__init__(f"can't encode user vote list: {detail}")
