"""
result.py - validation outcome records
======================================

Validation never raises for a bad value: every outcome is one of these
records.  Callers that prefer exceptions can opt in through
:meth:`ValidationResult.raise_for_errors`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "SchemaError",
    "ValidationError",
    "ValidationRecord",
    "ValidationResult",
]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a schema cannot be compiled."""


class ValidationError(SchemaError):
    """Raised on request when a candidate violates a compiled schema."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        lines = [_describe(record) for record in result.errors]
        super().__init__("; ".join(lines) or "invalid")


def _describe(record: "ValidationRecord") -> str:
    where = record.key if record.key is not None else "root"
    if record.attr is None:
        return f"{where}: {record.rule}"
    return f"{where}: {record.rule} ({record.attr!r})"


# --------------------------------------------------------------------------- #
# Records                                                                     #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class ValidationRecord:
    """Outcome of checking one field (or the root value).

    ``rule`` names the first rule that failed, ``attr`` carries that rule's
    configured parameter.  Both are ``None`` on success, except for optional
    empty values which report ``rule="required"`` with ``attr=False``.
    """

    valid: bool
    rule: str | None = None
    value: Any = None
    key: Any = None
    attr: Any = None

    def __bool__(self) -> bool:
        return self.valid

    def as_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "rule": self.rule,
            "value": self.value,
            "key": self.key,
            "attr": self.attr,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Overall verdict plus one record per failing field, in field order."""

    valid: bool
    errors: tuple[ValidationRecord, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def from_records(cls, records: list[ValidationRecord]) -> "ValidationResult":
        errors = tuple(r for r in records if not r.valid)
        return cls(valid=not errors, errors=errors)

    def as_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [r.as_dict() for r in self.errors],
        }

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationError` unless the candidate was valid."""
        if not self.valid:
            raise ValidationError(self)
