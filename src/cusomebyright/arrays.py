"""Element access over heterogeneous array-like containers.

Most containers support native indexing (lists, tuples, numpy arrays,
array.array). Accessor arrays instead expose ``get(index)`` and
``set(index, value)``. The access strategy is resolved once per call by
``resolve_access`` so that scan loops never have to re-check it.
"""

import attr


def is_accessor_array(obj):
    """Returns True if obj exposes callable ``get`` and ``set`` methods."""
    return callable(getattr(obj, "get", None)) and callable(getattr(obj, "set", None))


def indexed_get(data, i):
    return data[i]


def indexed_set(data, i, value):
    data[i] = value


def accessor_get(data, i):
    return data.get(i)


def accessor_set(data, i, value):
    data.set(i, value)


@attr.s(slots=True, frozen=True)
class ArrayAccess(object):
    """A container together with the functions used to read and write it."""

    data = attr.ib()
    accessor_protocol = attr.ib()
    getter = attr.ib(repr=False)
    setter = attr.ib(repr=False)

    def get(self, i):
        return self.getter(self.data, i)

    def set(self, i, value):
        self.setter(self.data, i, value)


def resolve_access(obj):
    if is_accessor_array(obj):
        return ArrayAccess(obj, True, accessor_get, accessor_set)
    return ArrayAccess(obj, False, indexed_get, indexed_set)


@attr.s(slots=True, eq=False)
class AccessorArray(object):
    """Wraps an indexable sequence so that it can only be reached through
    ``get`` and ``set``. Mostly useful for exercising code paths that have to
    cope with containers which do not support native indexing."""

    _data = attr.ib()

    def get(self, i):
        return self._data[i]

    def set(self, i, value):
        self._data[i] = value

    def __len__(self):
        return len(self._data)


def to_accessor_array(seq):
    if is_accessor_array(seq):
        return seq
    return AccessorArray(seq)
