"""
registry.py - per-instance type and rule tables
===============================================

Each :class:`Registry` owns its own copies of the built-in tables so that
one embedder's custom type or rule never leaks into another instance.  The
compiler reads a :meth:`Registry.snapshot`, so entries added after a schema
was compiled only affect schemas compiled later.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from . import rules as _rules
from . import datatypes as _types
from .rules import RuleFactory
from .datatypes import TypePredicate

__all__ = ["Registry", "Snapshot"]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a registry taken at compile time."""

    types: Mapping[str, TypePredicate]
    rules: Mapping[str, RuleFactory]

    def lookup_type(self, name: str) -> TypePredicate:
        return self.types.get(name, _types.unknown_type)

    def lookup_rule(self, name: str) -> RuleFactory | None:
        return self.rules.get(name)


class Registry:
    """Mutable type/rule tables seeded with the built-ins."""

    def __init__(
        self,
        types: Mapping[str, TypePredicate] | None = None,
        rules: Mapping[str, RuleFactory] | None = None,
    ):
        self.types: dict[str, TypePredicate] = dict(_types.TYPES)
        self.rules: dict[str, RuleFactory] = dict(_rules.RULES)
        if types:
            self.types.update(types)
        if rules:
            self.rules.update(rules)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            types=MappingProxyType(dict(self.types)),
            rules=MappingProxyType(dict(self.rules)),
        )
