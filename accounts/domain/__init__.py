from accounts.domain.schema import FieldSpec, FieldViolation, Rule
from accounts.domain.user import (
    TEMP_USER_FIELDS,
    USER_FIELDS,
    TempUser,
    User,
    new_user,
    validate,
)

__all__ = [
    "FieldSpec",
    "FieldViolation",
    "Rule",
    "TEMP_USER_FIELDS",
    "USER_FIELDS",
    "TempUser",
    "User",
    "new_user",
    "validate",
]
