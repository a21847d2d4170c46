"""
rules.py - built-in constraint rule factories
=============================================

A rule factory receives the parameter configured in the declaration (and the
rule's own name) and returns a predicate ``predicate(value, key, obj)``.
Rules only run after the value has passed its type check, but a declaration
may attach any rule to any type, so each predicate fails rather than raises
when handed a value it cannot measure.  A parameter the factory cannot use
(an invalid regular expression, a non-numeric length) raises ``SchemaError``
while the schema is compiled.

String lengths are measured in UTF-8 encoded bytes, not characters.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Sized
from typing import Any, Callable, Sequence

from .result import SchemaError

__all__ = [
    "RULES",
    "RuleFactory",
    "byte_length",
]

RulePredicate = Callable[[Any, Any, Any], bool]
RuleFactory = Callable[[Any, str], RulePredicate]

ENCODING = "utf-8"


def byte_length(value: Any) -> int | None:
    """Length of *value* in bytes for text, ``len`` otherwise, ``None`` if unsized."""
    if isinstance(value, str):
        return len(value.encode(ENCODING))
    if isinstance(value, Sized):
        return len(value)
    return None


# --------------------------------------------------------------------------- #
# Numeric bounds (inclusive)                                                  #
# --------------------------------------------------------------------------- #

def minimum(bound: Any, name: str = "minimum") -> RulePredicate:
    def check(value: Any, key: Any = None, obj: Any = None) -> bool:
        try:
            return value >= bound
        except TypeError:
            return False
    return check


def maximum(bound: Any, name: str = "maximum") -> RulePredicate:
    def check(value: Any, key: Any = None, obj: Any = None) -> bool:
        try:
            return value <= bound
        except TypeError:
            return False
    return check


# --------------------------------------------------------------------------- #
# Byte-length bounds (inclusive)                                              #
# --------------------------------------------------------------------------- #

def _length_bound(bound: Any, name: str) -> int:
    if isinstance(bound, bool) or not isinstance(bound, numbers.Real):
        raise SchemaError(f"{name} must be a number, got {bound!r}")
    return bound


def min_length(bound: int, name: str = "minLength") -> RulePredicate:
    bound = _length_bound(bound, name)

    def check(value: Any, key: Any = None, obj: Any = None) -> bool:
        size = byte_length(value)
        return size is not None and size >= bound
    return check


def max_length(bound: int, name: str = "maxLength") -> RulePredicate:
    bound = _length_bound(bound, name)

    def check(value: Any, key: Any = None, obj: Any = None) -> bool:
        size = byte_length(value)
        return size is not None and size <= bound
    return check


# --------------------------------------------------------------------------- #
# Membership & patterns                                                       #
# --------------------------------------------------------------------------- #

def enum(values: Sequence[Any], name: str = "enum") -> RulePredicate:
    """Membership by strict equality: ``True`` never matches ``1``."""
    choices = list(values)

    def check(value: Any, key: Any = None, obj: Any = None) -> bool:
        return any(_strict_equal(value, choice) for choice in choices)
    return check


def _strict_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def pattern(expr: str | re.Pattern, name: str = "pattern") -> RulePredicate:
    """Unanchored search; anchor the expression yourself for a full match."""
    if isinstance(expr, re.Pattern):
        regex = expr
    else:
        try:
            regex = re.compile(expr)
        except (re.error, TypeError) as exc:
            raise SchemaError(f"{name}: invalid regular expression {expr!r}: {exc}") from exc

    def check(value: Any, key: Any = None, obj: Any = None) -> bool:
        if not isinstance(value, str):
            return False
        return regex.search(value) is not None
    return check


RULES: dict[str, RuleFactory] = {
    "minimum": minimum,
    "maximum": maximum,
    "minLength": min_length,
    "maxLength": max_length,
    "enum": enum,
    "pattern": pattern,
}
