"""
Process-wide option store.

PathSearch consults a "named option" before environment variables. The
options live here:

- setoption(**pairs): set (or, with Unset, remove) values; returns the
  previous values so callers can restore them.
- getoption(name, default=None): values set through setoption() win, then the
  host application's __main__.__options__ mapping, then `default`.
- options: a read-only, live Mapping over the same lookup. It is the default
  option accessor of every PathSearch.

Example
    >>> previous = setoption(**{"mytool.path": "/opt/mytool/bin"})
    >>> getoption("mytool.path")
    '/opt/mytool/bin'
    >>> setoption(**previous)  # restore
"""
from collections.abc import Mapping

from .utils import Unset

_store = {}


def _host():
    return getattr(__import__("__main__"), "__options__", {})


def getoption(name, default=None, /):
    """
    look up an option by name (store first, then __main__.__options__).
    """
    if not isinstance(name, str):
        raise TypeError("getoption() argument must be a string")
    try:
        return _store[name]
    except KeyError:
        pass
    return _host().get(name, default)


def setoption(**pairs):
    """
    set options and return a mapping of their previous store values.

    previous values that did not exist are reported as Unset, so feeding the
    result back into setoption() restores the original state.
    """
    previous = {}
    for name, value in pairs.items():
        previous[name] = _store.get(name, Unset)
        if value is Unset:
            _store.pop(name, None)
        else:
            _store[name] = value
    return previous


class OptionView(Mapping):
    """
    read-only live view over getoption().
    """
    __slots__ = ()

    def __getitem__(self, name, /):
        value = getoption(name, Unset)
        if value is Unset:
            raise KeyError(name)
        return value

    def __iter__(self):
        yield from _store
        yield from (name for name in _host() if name not in _store)

    def __len__(self):
        return sum(1 for _ in self)

    def __repr__(self):
        return "options(%s)" % ", ".join("%s=%r" % (name, self[name]) for name in self)


options = OptionView()


__all__ = (
    "getoption",
    "setoption",
    "OptionView",
    "options",
)
