"""Deterministic ordering of mapping keys."""

from yamlsort.constants import NAME_KEY
from yamlsort.kinds import UnsupportedKeyError


def _sort_key(key):
    # False sorts before True, so "name" leads
    return (key != NAME_KEY, key)


def ordered_keys(mapping):
    """Return the keys of mapping with "name" first, then ascending.

    str comparison is by code point, which matches UTF-8 byte order.
    The mapping itself is left untouched.
    """
    keys = list(mapping)
    for k in keys:
        if not isinstance(k, str):
            raise UnsupportedKeyError(k)
    return sorted(keys, key=_sort_key)
