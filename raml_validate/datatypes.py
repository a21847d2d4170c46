"""
datatypes.py - built-in type predicates
=======================================

Every predicate answers one question: *is this value of my kind?*  They are
called as ``predicate(value, key, obj)`` so custom types may look at sibling
fields, but none of the built-ins need to.  Custom predicates may also take
fewer arguments, e.g. just ``(value)``.

Public API
----------
TYPES
    Mapping of type name to predicate, copied into every fresh registry.

unknown_type
    Predicate that always fails; stands in for unregistered type names.

any_type
    Predicate that always passes; used when a declaration names no type.
"""

from __future__ import annotations

import datetime as _dt
import math
import numbers
from typing import Any, Callable, Mapping

import pandas as pd

__all__ = [
    "TYPES",
    "TypePredicate",
    "any_type",
    "unknown_type",
]

TypePredicate = Callable[[Any, Any, Any], bool]

# --------------------------------------------------------------------------- #
# Scalars                                                                     #
# --------------------------------------------------------------------------- #

def is_string(value: Any, key: Any = None, obj: Any = None) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any, key: Any = None, obj: Any = None) -> bool:
    return isinstance(value, bool)


def is_number(value: Any, key: Any = None, obj: Any = None) -> bool:
    """Finite real number; ``bool`` is not a number here."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_integer(value: Any, key: Any = None, obj: Any = None) -> bool:
    """Finite number without a fractional part (``5.0`` counts)."""
    return is_number(value) and value % 1 == 0


# --------------------------------------------------------------------------- #
# Dates                                                                       #
# --------------------------------------------------------------------------- #

def is_date(value: Any, key: Any = None, obj: Any = None) -> bool:
    """Date-like object that points at a real instant.

    ``pandas.NaT`` passes an ``isinstance`` check against ``datetime`` but
    represents no point in time, so it is rejected.
    """
    if not isinstance(value, (_dt.date, pd.Timestamp)):
        return False
    return not pd.isna(value)


# --------------------------------------------------------------------------- #
# Files & sentinels                                                           #
# --------------------------------------------------------------------------- #

def is_file(value: Any, key: Any = None, obj: Any = None) -> bool:
    """File payload: raw text/bytes, a parsed mapping, or a readable handle."""
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return True
    return callable(getattr(value, "read", None))


def any_type(value: Any, key: Any = None, obj: Any = None) -> bool:
    return True


def unknown_type(value: Any, key: Any = None, obj: Any = None) -> bool:
    return False


TYPES: dict[str, TypePredicate] = {
    "string": is_string,
    "number": is_number,
    "integer": is_integer,
    "boolean": is_boolean,
    "date": is_date,
    "file": is_file,
}
