import functools

import pytest

from cusomebyright.predicates import (
    PREDICATES,
    adapt_predicate,
    get_predicate,
    positional_arity,
)


def test_arity_of_plain_functions():
    assert positional_arity(lambda: True) == 0
    assert positional_arity(lambda v: True) == 1
    assert positional_arity(lambda v, i: True) == 2
    assert positional_arity(lambda v, i, x: True) == 3
    assert positional_arity(lambda v, i, x, extra=None: True) == 3
    assert positional_arity(lambda *args: True) == 3


def test_keyword_only_parameters_are_not_counted():
    def fcn(v, *, scale=1):
        return v * scale > 0

    assert positional_arity(fcn) == 1


def test_partial_arity():
    def fcn(limit, v):
        return v > limit

    assert positional_arity(functools.partial(fcn, 2)) == 1


@pytest.mark.parametrize(
    "fn, expected",
    [
        (lambda: "nullary", "nullary"),
        (lambda v: v, "value"),
        (lambda v, i: (v, i), ("value", 1)),
        (lambda v, i, x: (v, i, x), ("value", 1, "collection")),
        (lambda *args: args, ("value", 1, "collection")),
    ],
)
def test_adapted_predicates_receive_what_they_accept(fn, expected):
    assert adapt_predicate(fn)("value", 1, "collection") == expected


def test_this_arg_binding():
    def fcn(self, v, i):
        return (self, v, i)

    ctx = object()
    assert adapt_predicate(fcn, ctx)("value", 1, "collection") == (ctx, "value", 1)


def test_non_callable_is_rejected():
    with pytest.raises(TypeError):
        adapt_predicate(3)


def test_named_predicates():
    assert get_predicate("positive")(1)
    assert not get_predicate("positive")(0)
    assert get_predicate("negative")(-1)
    assert get_predicate("nonzero")(2)
    assert get_predicate("null")(None)
    assert get_predicate("not-null")({})
    assert not get_predicate("truthy")("")
    assert set(PREDICATES) == {"truthy", "positive", "negative", "nonzero", "null", "not-null"}


def test_unknown_predicate_lists_known_names():
    with pytest.raises(KeyError, match="not-null"):
        get_predicate("odd")
