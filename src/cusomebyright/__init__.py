"""Cumulative right-to-left "at least n elements pass" scans over arrays."""

from cusomebyright.arrays import (
    AccessorArray,
    ArrayAccess,
    is_accessor_array,
    resolve_access,
    to_accessor_array,
)
from cusomebyright.predicates import PREDICATES, adapt_predicate, get_predicate
from cusomebyright.scan import assign, cusome_by_right

__version__ = "0.1.0"

__all__ = [
    "cusome_by_right",
    "assign",
    "AccessorArray",
    "ArrayAccess",
    "is_accessor_array",
    "resolve_access",
    "to_accessor_array",
    "PREDICATES",
    "adapt_predicate",
    "get_predicate",
]
