"""
compiler.py - turn declarative schemas into validation functions
================================================================

Compilation happens once per schema; the functions it returns are plain
closures over a registry snapshot and hold no mutable state, so they are
safe to share between threads.

Declarations
------------
A declaration describes one field (or the whole root value)::

    {"type": "string", "required": True, "minLength": 5}

``type`` may also be a list of names tried in order, and a field may be
declared as a list of declarations, tried in order as well.  Without a
``type`` any kind of value is accepted and only the rules run.  ``repeat``
means the value must be a list whose every element matches.

Resolution order for one value
------------------------------
1. ``None`` passes unless every candidate is ``required``.
2. Lists go to the ``repeat`` candidates, anything else to the plain ones;
   an empty pool fails with ``rule="repeat"``.
3. The first candidate whose type accepts every element wins; its rule
   chain then decides the outcome.  If no type matches, the last type
   failure is reported.
"""

from __future__ import annotations

import enum
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from .datatypes import TypePredicate, any_type
from .registry import Snapshot
from .result import SchemaError, ValidationRecord, ValidationResult
from .rules import RulePredicate

__all__ = [
    "CompiledRule",
    "Shape",
    "compile_declaration",
    "compile_rules",
    "compile_schema",
    "is_root_declaration",
    "shape_of",
]

log = logging.getLogger(__name__)

RESERVED_KEYS = frozenset({"type", "required", "repeat"})

FieldValidator = Callable[..., ValidationRecord]
CompiledValidator = Callable[..., ValidationResult]


# --------------------------------------------------------------------------- #
# Value shapes                                                                #
# --------------------------------------------------------------------------- #

class Shape(enum.Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"


def shape_of(value: Any) -> Shape:
    """Strings are scalars; only lists and tuples are repeated values."""
    if isinstance(value, (list, tuple)):
        return Shape.SEQUENCE
    return Shape.SCALAR


# --------------------------------------------------------------------------- #
# Call arity                                                                  #
# --------------------------------------------------------------------------- #

def _fit_arity(fn: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """Wrap *fn* so it can be called with *arity* positional arguments.

    Custom predicates may take just ``(value)`` and rule factories just
    ``(param)``; extra arguments are dropped from the right.
    """
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return fn
    if any(p.kind is p.VAR_POSITIONAL for p in params):
        return fn
    accepted = sum(
        1 for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    )
    if accepted >= arity:
        return fn

    def call(*args: Any) -> Any:
        return fn(*args[:accepted])
    return call


# --------------------------------------------------------------------------- #
# Rule chains                                                                 #
# --------------------------------------------------------------------------- #

class CompiledRule(NamedTuple):
    name: str
    check: RulePredicate
    param: Any


def compile_rules(declaration: Mapping[str, Any], snapshot: Snapshot) -> list[CompiledRule]:
    """Build the rule chain for *declaration* in its own key order.

    Keys that name no registered rule are skipped so schemas can carry
    annotations (``description``, ``default`` ...) the engine ignores.
    """
    chain: list[CompiledRule] = []
    for name, param in declaration.items():
        if name in RESERVED_KEYS:
            continue
        factory = snapshot.lookup_rule(name)
        if factory is None:
            log.debug("ignoring declaration key %r: no such rule", name)
            continue
        check = _fit_arity(factory, 2)(param, name)
        chain.append(CompiledRule(name, _fit_arity(check, 3), param))
    return chain


# --------------------------------------------------------------------------- #
# Declarations                                                                #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class _Candidate:
    type_name: str | None
    check_type: TypePredicate
    rules: tuple[CompiledRule, ...]
    required: bool
    repeat: bool


def _type_names(declaration: Mapping[str, Any]) -> list[str | None]:
    """Declared type names; ``[None]`` when the declaration has no ``type``."""
    if "type" not in declaration:
        return [None]
    names = declaration["type"]
    if isinstance(names, str):
        return [names]
    if (
        isinstance(names, (list, tuple)) and names
        and all(isinstance(n, str) for n in names)
    ):
        return list(names)
    raise SchemaError(f"type must be a name or a list of names, got {names!r}")


def _candidates(declaration: Any, snapshot: Snapshot) -> list[_Candidate]:
    if declaration is None:
        return []
    if isinstance(declaration, Mapping):
        declarations: Sequence[Any] = [declaration]
    elif isinstance(declaration, (list, tuple)):
        declarations = declaration
    else:
        raise SchemaError(
            f"declaration must be a mapping or a list of mappings, "
            f"got {type(declaration).__name__}"
        )

    out: list[_Candidate] = []
    for decl in declarations:
        if not isinstance(decl, Mapping):
            raise SchemaError(f"declaration must be a mapping, got {type(decl).__name__}")
        chain = tuple(compile_rules(decl, snapshot))
        for name in _type_names(decl):
            if name is None:
                check_type = any_type
            else:
                if name not in snapshot.types:
                    log.warning("type %r is not registered; values can never match it", name)
                check_type = _fit_arity(snapshot.lookup_type(name), 3)
            out.append(_Candidate(
                type_name=name,
                check_type=check_type,
                rules=chain,
                required=bool(decl.get("required")),
                repeat=bool(decl.get("repeat")),
            ))
    return out


def _type_mismatch(candidate: _Candidate, values: Sequence[Any], key: Any, obj: Any) -> int | None:
    """Index of the first element the candidate's type rejects, else ``None``."""
    for index, item in enumerate(values):
        if not candidate.check_type(item, key, obj):
            return index
    return None


def _run_rules(
    candidate: _Candidate, values: Sequence[Any], value: Any, key: Any, obj: Any,
) -> ValidationRecord:
    for item in values:
        for rule in candidate.rules:
            if not rule.check(item, key, obj):
                return ValidationRecord(False, rule.name, item, key, rule.param)
    return ValidationRecord(True, None, value, key)


def compile_declaration(declaration: Any, snapshot: Snapshot) -> FieldValidator:
    """Compile one declaration (or list of alternatives) into ``fn(value, key, obj)``."""
    candidates = _candidates(declaration, snapshot)
    optional = not candidates or any(not c.required for c in candidates)
    pools = {
        Shape.SCALAR: tuple(c for c in candidates if not c.repeat),
        Shape.SEQUENCE: tuple(c for c in candidates if c.repeat),
    }

    def validate(value: Any, key: Any = None, obj: Any = None) -> ValidationRecord:
        if value is None:
            return ValidationRecord(optional, "required", value, key, not optional)

        shape = shape_of(value)
        pool = pools[shape]
        if not pool:
            # attr tells whether a sequence was expected
            return ValidationRecord(False, "repeat", value, key, shape is Shape.SCALAR)

        values = value if shape is Shape.SEQUENCE else (value,)
        failure: ValidationRecord | None = None
        for candidate in pool:
            index = _type_mismatch(candidate, values, key, obj)
            if index is None:
                return _run_rules(candidate, values, value, key, obj)
            failure = ValidationRecord(False, "type", values[index], key, candidate.type_name)
        return failure

    return validate


# --------------------------------------------------------------------------- #
# Schemas                                                                     #
# --------------------------------------------------------------------------- #

def is_root_declaration(schema: Any) -> bool:
    """True when *schema* describes the whole value instead of its fields."""
    if isinstance(schema, (list, tuple)):
        return True
    if isinstance(schema, Mapping) and "type" in schema:
        names = schema["type"]
        if isinstance(names, str):
            return True
        return isinstance(names, (list, tuple)) and all(isinstance(n, str) for n in names)
    return False


def _always_valid(candidate: Any = None) -> ValidationResult:
    return ValidationResult(valid=True)


def compile_schema(schema: Any, snapshot: Snapshot, *, root: bool | None = None) -> CompiledValidator:
    """Compile *schema* into ``fn(candidate) -> ValidationResult``.

    Parameters
    ----------
    schema
        Mapping of field name to declaration, or a single root declaration.
    snapshot
        Registry contents frozen for this compilation.
    root
        Force root mode (``True``) or field mode (``False``); ``None``
        decides from the shape of *schema*.
    """
    if not schema:
        return _always_valid

    if root is None:
        root = is_root_declaration(schema)

    if root:
        check = compile_declaration(schema, snapshot)
        log.debug("compiled root declaration")

        def validate_root(candidate: Any = None) -> ValidationResult:
            return ValidationResult.from_records([check(candidate, None, None)])

        return validate_root

    if not isinstance(schema, Mapping):
        raise SchemaError(f"schema must be a mapping of fields, got {type(schema).__name__}")

    fields = [(name, compile_declaration(decl, snapshot)) for name, decl in schema.items()]
    log.debug("compiled %d field(s): %s", len(fields), ", ".join(map(str, schema)))

    def validate_fields(candidate: Any = None) -> ValidationResult:
        if candidate is None:
            candidate = {}
        get = candidate.get if isinstance(candidate, Mapping) else (lambda name: None)
        return ValidationResult.from_records(
            [check(get(name), name, candidate) for name, check in fields]
        )

    return validate_fields
