"""
validator.py - factory and entry points
=======================================

Every call to :func:`create` returns an independent :class:`Validator` with
its own ``TYPES``/``RULES`` tables, so extensions made by one embedder are
invisible to the others.

Public API
----------
create(types=None, rules=None) -> Validator
    Fresh validator factory, optionally extended with custom types/rules.

Validator(schema, *, root=None) -> callable
    Compile *schema*; the result maps a candidate to a ValidationResult.

validate(value, *, schema, root=None) -> ValidationResult
    One-shot helper using a pristine factory.
"""

from __future__ import annotations

from typing import Any, Mapping

from .compiler import CompiledValidator, compile_schema
from .datatypes import TypePredicate
from .registry import Registry
from .result import ValidationResult
from .rules import RuleFactory

__all__ = [
    "Validator",
    "create",
    "validate",
]


class Validator:
    """Compiles schemas against this instance's type and rule tables.

    >>> v = create()
    >>> v.TYPES["even"] = lambda value, key, obj: isinstance(value, int) and value % 2 == 0
    >>> v({"n": {"type": "even"}})({"n": 3}).valid
    False
    """

    def __init__(
        self,
        types: Mapping[str, TypePredicate] | None = None,
        rules: Mapping[str, RuleFactory] | None = None,
    ):
        self.registry = Registry(types=types, rules=rules)

    @property
    def TYPES(self) -> dict[str, TypePredicate]:
        return self.registry.types

    @property
    def RULES(self) -> dict[str, RuleFactory]:
        return self.registry.rules

    def __call__(self, schema: Any, *, root: bool | None = None) -> CompiledValidator:
        return compile_schema(schema, self.registry.snapshot(), root=root)

    def assert_valid(self, schema: Any, candidate: Any = None, *, root: bool | None = None) -> ValidationResult:
        """Compile, validate and raise :class:`ValidationError` on failure."""
        result = self(schema, root=root)(candidate)
        result.raise_for_errors()
        return result


def create(
    types: Mapping[str, TypePredicate] | None = None,
    rules: Mapping[str, RuleFactory] | None = None,
) -> Validator:
    """Return a new :class:`Validator` that shares no state with any other."""
    return Validator(types=types, rules=rules)


def validate(value: Any, *, schema: Any, root: bool | None = None) -> ValidationResult:
    """Validate *value* against *schema* using only the built-in types and rules."""
    return create()(schema, root=root)(value)
