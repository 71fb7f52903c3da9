"""
User model - identity, password lifecycle and field rules.
Challenge: Never hold a plaintext password on a persisted entity.
Design: Pure domain objects; the repository maps them to rows.
"""

from typing import Any

from pydantic import BaseModel, Field

from accounts.core.exceptions import (
    CredentialMismatchError,
    InactiveAccountError,
    MismatchError,
    NilEntityError,
    ValidationError,
)
from accounts.core.security import hash_password, verify_password
from accounts.domain.schema import FieldSpec, check_fields, contains, min_length, required

NAME_RULES = (required(), min_length(4))
EMAIL_RULES = (required(), contains("@"))
PLAINTEXT_PASSWORD_RULES = (required(), min_length(8))


class TempUser(BaseModel):
    """Registration input. Built from untrusted data, consumed once by new_user."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = Field(default="", exclude=True, repr=False)
    confirm_password: str = Field(default="", exclude=True, repr=False)


TEMP_USER_FIELDS = (
    FieldSpec("first_name", NAME_RULES, wire="first_name"),
    FieldSpec("last_name", NAME_RULES, wire="last_name"),
    FieldSpec("email", EMAIL_RULES, wire="email"),
    FieldSpec("password", PLAINTEXT_PASSWORD_RULES),
    FieldSpec("confirm_password", PLAINTEXT_PASSWORD_RULES),
)


class User(BaseModel):
    """User entity. id stays 0 until the row is persisted."""

    id: int = 0
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    # Always a bcrypt hash, never the plaintext.
    password: str = Field(default="", exclude=True, repr=False)
    visible: bool = True

    @classmethod
    def from_temp(cls, temp: TempUser) -> "User":
        """Turn a registration into a user with a hashed password. Does not validate fields."""
        if temp.password != temp.confirm_password:
            raise MismatchError()
        user = cls(
            first_name=temp.first_name,
            last_name=temp.last_name,
            email=temp.email,
            visible=True,
        )
        user.set_password(temp.password)
        return user

    def set_password(self, password: str) -> None:
        self.password = hash_password(password)

    def authenticate(self, password: str) -> None:
        """Raise unless the account is active and the password matches the stored hash."""
        if not self.visible:
            raise InactiveAccountError()
        if not verify_password(password, self.password):
            raise CredentialMismatchError()

    def to_wire(self) -> dict[str, Any]:
        """External representation keyed by wire names. Never carries the password."""
        return {spec.wire: getattr(self, spec.name) for spec in USER_FIELDS if spec.wire}


# The hash is checked for presence only; length rules apply to the plaintext on TempUser.
USER_FIELDS = (
    FieldSpec("id", column="id", wire="id"),
    FieldSpec("first_name", NAME_RULES, column="first_name", wire="first_name"),
    FieldSpec("last_name", NAME_RULES, column="last_name", wire="last_name"),
    FieldSpec("email", EMAIL_RULES, column="email", wire="email"),
    FieldSpec("password", (required(),), column="password"),
    FieldSpec("visible", column="visible", wire="visible"),
)

_SCHEMAS = (
    (User, USER_FIELDS),
    (TempUser, TEMP_USER_FIELDS),
)


def new_user(temp: TempUser) -> User:
    return User.from_temp(temp)


def validate(entity: User | TempUser | None) -> None:
    """Check every field rule. Raises NilEntityError or an aggregated ValidationError."""
    if entity is None:
        raise NilEntityError()
    fields = next((spec for kind, spec in _SCHEMAS if isinstance(entity, kind)), None)
    if fields is None:
        raise TypeError(f"no validation schema for {type(entity).__name__}")
    violations = check_fields(entity, fields)
    if violations:
        raise ValidationError(violations)
