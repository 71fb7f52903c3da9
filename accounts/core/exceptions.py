"""
Account errors. Callers branch on the exception type, never on message text.
Storage failures are not wrapped: whatever SQLAlchemy raises reaches the caller.
"""

from sqlalchemy.exc import SQLAlchemyError

# Opaque passthrough from the backing store.
StorageError = SQLAlchemyError


class AccountsError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NilEntityError(AccountsError):
    """Validation was asked to check an entity that does not exist."""

    def __init__(self, message: str = "cannot validate a missing entity"):
        super().__init__(message)


class ValidationError(AccountsError):
    """One or more fields broke their rules.

    Attributes:
        violations: FieldViolation entries in field declaration order.
    """

    def __init__(self, violations):
        self.violations = list(violations)
        super().__init__("\n".join(str(v) for v in self.violations))


class MismatchError(AccountsError):
    def __init__(self, message: str = "password confirmation does not match"):
        super().__init__(message)


class HashingError(AccountsError):
    """The hashing primitive rejected the password."""


class InactiveAccountError(AccountsError):
    def __init__(self, message: str = "user is inactive"):
        super().__init__(message)


class CredentialMismatchError(AccountsError):
    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)


class InvalidArgumentError(AccountsError):
    """A lookup argument has the wrong shape (non-positive id, empty email)."""


class NotFoundError(AccountsError):
    def __init__(self, message: str = "unable to find user"):
        super().__init__(message)
