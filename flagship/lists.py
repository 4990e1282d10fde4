"""
Keep/drop filtering over argument and flag mappings.

The same two operations serve both ends of the pipeline:
- before interpretation, to restrict which captured arguments become flags;
- after interpretation, to suppress particular flag/value combinations
  ("omit -threads when it equals 1").

Inputs
- mapping: any Mapping, or a sequence of (name, value) pairs. Pair sequences
  may repeat names; a name selector then matches every entry under that name.
  The result keeps the input's shape: dict for mappings, list of pairs otherwise.
- selector, one of
  • names:      a set/sequence of str        → match by key
  • pairs:      a Mapping                    → match by key and equal value
                (booleans only equal booleans: {"n": True} does not match n=1)
  • positions:  a set/sequence of int        → match by 0-based insertion index
                (negative indexes count from the end; out of range is an error)

keep() and drop() are complements: for any mapping m and selector s, the two
results together hold every entry of m exactly once.
"""
from collections.abc import Mapping, Sequence, Set

from .faults import FaultCode, InvalidArgumentError
from .utils import Unset


def _entries(mapping, /):
    """
    flatten a mapping or pair sequence into a list of (key, value) tuples.
    """
    if isinstance(mapping, Mapping):
        return list(mapping.items())
    if isinstance(mapping, str | bytes) or not isinstance(mapping, Sequence):
        raise InvalidArgumentError(
            "expected a mapping or a sequence of (name, value) pairs, got %s" % type(mapping).__name__,
            code=FaultCode.INVALID_ARGUMENT,
            hint="pass a dict or a list of 2-tuples",
        )
    entries = []
    for index, entry in enumerate(mapping):
        if isinstance(entry, str | bytes) or not isinstance(entry, Sequence) or len(entry) != 2:
            raise InvalidArgumentError(
                "entry at position %d is not a (name, value) pair" % index,
                code=FaultCode.INVALID_ARGUMENT,
                position=index,
            )
        entries.append((entry[0], entry[1]))
    return entries


def _same(value, expected, /):
    # True == 1 in Python; a flag switch and a count must not match each other.
    return isinstance(value, bool) == isinstance(expected, bool) and value == expected


def _matcher(selector, size, /):
    """
    turn a selector into a predicate over (index, key, value).
    """
    if isinstance(selector, Mapping):
        pairs = dict(selector)
        return lambda index, key, value: key in pairs and _same(value, pairs[key])

    if isinstance(selector, str | bytes) or not isinstance(selector, Set | Sequence):
        raise InvalidArgumentError(
            "selector must be a set of names, a set of positions or a mapping, got %s" % type(selector).__name__,
            code=FaultCode.INVALID_SELECTOR,
            hint="wrap a single name in a set, e.g. {%r}" % (selector,) if isinstance(selector, str) else Unset,
        )

    items = list(selector)

    if all(isinstance(item, str) for item in items):
        names = set(items)
        return lambda index, key, value: key in names

    if all(isinstance(item, int) and not isinstance(item, bool) for item in items):
        positions = set()
        for position in items:
            if not -size <= position < size:
                raise InvalidArgumentError(
                    "position %d is out of range for %d entries" % (position, size),
                    code=FaultCode.INVALID_SELECTOR,
                    position=position,
                )
            positions.add(position % size)
        return lambda index, key, value: index in positions

    raise InvalidArgumentError(
        "selector mixes names and positions (or holds other types)",
        code=FaultCode.INVALID_SELECTOR,
        hint="use only names or only integer positions in one selector",
    )


def _split(mapping, selector, /):
    entries = _entries(mapping)
    match = _matcher(selector, len(entries))
    kept, dropped = [], []
    for index, (key, value) in enumerate(entries):
        (kept if match(index, key, value) else dropped).append((key, value))
    return kept, dropped


def _shape(mapping, entries, /):
    return dict(entries) if isinstance(mapping, Mapping) else entries


def keep(mapping, selector, /):
    """
    return only the entries of `mapping` matched by `selector`.

    Examples
        >>> keep({"a": 1, "b": 2}, {"a"})
        {'a': 1}
        >>> keep({"threads": 1, "out": "x"}, {"threads": 4})
        {}
        >>> keep([("x", 1), ("y", 2)], [1])
        [('y', 2)]
    """
    kept, _ = _split(mapping, selector)
    return _shape(mapping, kept)


def drop(mapping, selector, /):
    """
    return the entries of `mapping` not matched by `selector`.

    Examples
        >>> drop([("value1", True), ("value2", "Hello"), ("value2", [1, 2])], {"value2"})
        [('value1', True)]
        >>> drop({"threads": "1", "out": "x"}, {"threads": "1"})
        {'out': 'x'}
    """
    _, dropped = _split(mapping, selector)
    return _shape(mapping, dropped)


def select(mapping, /, keep=Unset, drop=Unset):
    """
    apply at most one of `keep` / `drop` to `mapping`.

    Requesting both in the same call is ambiguous and raises
    InvalidArgumentError; requesting neither returns an unfiltered copy.
    """
    if keep is not Unset and drop is not Unset:
        raise InvalidArgumentError(
            "keep and drop cannot be combined in a single call",
            code=FaultCode.CONFLICTING_SELECTORS,
            hint="filter in two steps: keep first, then drop",
        )
    if keep is not Unset:
        return _shape(mapping, _split(mapping, keep)[0])
    if drop is not Unset:
        return _shape(mapping, _split(mapping, drop)[1])
    return _shape(mapping, _entries(mapping))


__all__ = (
    "keep",
    "drop",
    "select",
)
