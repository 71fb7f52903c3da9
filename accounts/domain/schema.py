"""
Declarative field schema: one place that says, per field, which column stores it,
which name it travels under, and which rules it must satisfy.
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Rule:
    name: str
    check: Callable[[str], bool]


def required() -> Rule:
    return Rule("required", lambda value: bool(value))


def min_length(size: int) -> Rule:
    return Rule(f"min_length={size}", lambda value: len(value) >= size)


def contains(needle: str) -> Rule:
    return Rule(f"contains={needle}", lambda value: needle in value)


@dataclass(frozen=True)
class FieldSpec:
    """How one entity attribute is validated, stored and serialized.

    column is None for fields that are never persisted; wire is None for
    fields that must never leave the process (password hashes).
    """

    name: str
    rules: tuple[Rule, ...] = ()
    column: str | None = None
    wire: str | None = None


@dataclass(frozen=True)
class FieldViolation:
    entity: str
    field: str
    rule: str

    def __str__(self) -> str:
        return f"{self.entity}.{self.field}: failed on the '{self.rule}' rule"


def check_fields(entity: object, fields: tuple[FieldSpec, ...]) -> list[FieldViolation]:
    """Apply rules in declaration order. Only the first broken rule of a field is reported."""
    entity_name = type(entity).__name__
    violations: list[FieldViolation] = []
    for spec in fields:
        value = getattr(entity, spec.name)
        for rule in spec.rules:
            if not rule.check(value):
                violations.append(FieldViolation(entity_name, spec.name, rule.name))
                break
    return violations
