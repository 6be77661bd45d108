"""Adapting caller-supplied predicates to a fixed ``(value, index, collection)``
calling convention."""

import inspect
import logging
import types

logger = logging.getLogger(__name__)

MAX_ARITY = 3


def positional_arity(fn):
    """Returns how many of ``(value, index, collection)`` fn can accept
    positionally. Callables whose signature can't be inspected (some
    builtins and extension types) are assumed to take the value only."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1
    arity = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return MAX_ARITY
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            arity += 1
    return min(arity, MAX_ARITY)


def adapt_predicate(predicate, this_arg=None):
    """Returns a callable taking exactly ``(value, index, collection)`` that
    forwards to predicate with as many of those arguments as it accepts.

    If this_arg is not None the predicate is bound to it the way a method is
    bound to an instance, so it receives this_arg as its first argument.
    """
    if not callable(predicate):
        raise TypeError(f"Predicate must be callable, got {predicate!r}")
    if this_arg is not None:
        predicate = types.MethodType(predicate, this_arg)

    arity = positional_arity(predicate)
    logger.debug("Adapting %r with positional arity %d", predicate, arity)

    if arity == 0:
        return lambda value, index, collection: predicate()
    if arity == 1:
        return lambda value, index, collection: predicate(value)
    if arity == 2:
        return lambda value, index, collection: predicate(value, index)
    return predicate


def is_positive(v):
    return v > 0


def is_negative(v):
    return v < 0


def is_nonzero(v):
    return v != 0


def is_null(v):
    return v is None


def is_not_null(v):
    return v is not None


PREDICATES = {
    "truthy": bool,
    "positive": is_positive,
    "negative": is_negative,
    "nonzero": is_nonzero,
    "null": is_null,
    "not-null": is_not_null,
}


def get_predicate(name):
    try:
        return PREDICATES[name]
    except KeyError:
        raise KeyError(
            f"Unknown predicate {name!r}. Known predicates: {', '.join(sorted(PREDICATES))}"
        ) from None
