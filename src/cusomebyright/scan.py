"""Cumulative right-to-left "at least n" scans.

The scan walks an input array from its last element to its first, counting
how many elements pass a predicate. After visiting each element it emits
whether the running count has reached ``n``, so the k-th emitted value
answers "do at least n of the last k + 1 elements pass?". Once an emitted
value is True every later one is True as well.
"""

import logging
import numbers

from cusomebyright.arrays import resolve_access
from cusomebyright.predicates import adapt_predicate

logger = logging.getLogger(__name__)


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_threshold(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def scan_into(x, n, out, stride, offset, predicate, this_arg=None):
    """Runs the scan over x, writing the result for input index
    ``len(x) - 1 - k`` to ``out[offset + k * stride]``. No other slot of out
    is touched. Returns out."""
    source = resolve_access(x)
    target = resolve_access(out)
    test = adapt_predicate(predicate, this_arg)

    logger.debug(
        "Scanning %d elements for at least %r hits (accessor input: %s, accessor output: %s)",
        len(x),
        n,
        source.accessor_protocol,
        target.accessor_protocol,
    )

    get, data = source.getter, source.data
    put = target.setter
    count = 0
    io = offset
    for i in range(len(x) - 1, -1, -1):
        if test(get(data, i), i, x):
            count += 1
        put(out, io, bool(count >= n))
        io += stride
    return out


def cusome_by_right(x, n, predicate, this_arg=None):
    """Cumulatively tests whether at least n elements of x pass predicate,
    iterating from right to left, and returns the results as a new list.

    predicate is called as ``predicate(value, index, x)``, or with fewer
    arguments if it accepts fewer. If this_arg is given the predicate is
    bound to it as its first argument.

    >>> cusome_by_right([1, 1, 0, 0, 0], 2, lambda v: v > 0)
    [False, False, False, False, True]
    """
    return scan_into(x, n, [False] * len(x), 1, 0, predicate, this_arg)


def _parse_assign_args(args, stride, offset, predicate, this_arg):
    """Works out which form of assign was called. Returns
    ``(n, out, stride, offset, predicate, this_arg)``."""
    args = list(args)

    if args and _is_threshold(args[0]):
        n = args.pop(0)
    else:
        # The form without n counts a single passing element as enough.
        n = 1

    if not args:
        raise TypeError("assign() missing required argument: 'out'")
    out = args.pop(0)

    if len(args) >= 2 and _is_integer(args[0]) and _is_integer(args[1]):
        if stride is not None or offset is not None:
            raise TypeError("assign() got multiple values for 'stride' and 'offset'")
        stride, offset = args.pop(0), args.pop(0)

    if args:
        if predicate is not None:
            raise TypeError("assign() got multiple values for argument 'predicate'")
        predicate = args.pop(0)
    if args:
        if this_arg is not None:
            raise TypeError("assign() got multiple values for argument 'this_arg'")
        this_arg = args.pop(0)
    if args:
        raise TypeError(f"assign() got {len(args)} unexpected positional argument(s)")
    if predicate is None:
        raise TypeError("assign() missing required argument: 'predicate'")

    return (
        n,
        out,
        1 if stride is None else stride,
        0 if offset is None else offset,
        predicate,
        this_arg,
    )


def assign(x, *args, stride=None, offset=None, predicate=None, this_arg=None):
    """Like cusome_by_right, but writes the results into a provided output
    array and returns that array.

    Accepted forms::

        assign(x, n, out, stride, offset, predicate[, this_arg])
        assign(x, out, stride, offset, predicate[, this_arg])

    The second form has no threshold and behaves as if n were 1. stride and
    offset may be omitted (or passed by keyword), defaulting to 1 and 0, in
    which case predicate has to be passed by keyword or directly follow out.

    Results go to ``out[offset]``, ``out[offset + stride]``, ... in scan
    order. Numeric buffers store them in their own element type, so a float
    array receives 0.0 and 1.0. Entries of out outside that pattern are left
    alone.
    """
    n, out, stride, offset, predicate, this_arg = _parse_assign_args(
        args, stride, offset, predicate, this_arg
    )
    return scan_into(x, n, out, stride, offset, predicate, this_arg)


cusome_by_right.assign = assign
