"""
Flagship utilities (internal helpers shared by every module).

Overview
- UnsetType / Unset
  • Singleton sentinel for “argument not provided”, distinct from None.
  • Falsey, printable as "Unset", and sealed against subclassing.

- coalesce(value, default=None)
  • Materialize Unset into a concrete default; None/0/""/[] pass through.

- rename(callable, name) / @rename("name")
  • Stable __name__/__qualname__ for generated closures (searches, validity checks).

- view("attr")
  • Read-only property over a private backing field (self._attr), returning
    immutable views for containers (tuple, MappingProxyType, frozenset).

- pluralize(text) / counted(count, noun)
  • Tiny English pluralizer for fault messages ("2 missing files").

Stability
- Names outside __all__ are internal and may change without notice.
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Sentinel type for values that were not provided.

    - bool(Unset) is False, but Unset is neither None nor 0.
    - UnsetType() always returns the same instance.
    - The type cannot be subclassed.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `object` unless it is Unset, in which case return `default`.

    Falsey values other than Unset (None, 0, "", []) are preserved:
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable, or build a decorator that does.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name)           -> decorator

    Used on the closures returned by install_is_valid() and friends, so their
    tracebacks read "install_is_valid" instead of "<locals>.check".
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def view(name, /):
    """
    Build a read-only property exposing the backing field "_{name}".

    Containers come back as immutable views so callers cannot reach into the
    owner's state:
    - Sequence (non-str) → tuple
    - Mapping           → MappingProxyType
    - Set               → frozenset
    - anything else     → returned as-is
    """
    if not isinstance(name, str):
        raise TypeError("view() argument must be a string")

    @rename(name)
    def getter(self):
        value = getattr(self, "_" + name)
        if isinstance(value, Sequence) and not isinstance(value, str):
            return tuple(value)
        if isinstance(value, Mapping):
            return MappingProxyType(value)
        if isinstance(value, Set):
            return frozenset(value)
        return value

    return property(getter)


@functools.cache
def pluralize(text, /):
    """
    Best-effort English pluralizer for fault messages.

    Only the last word of a phrase is pluralized; casing of that word is kept.
    - pluralize("file")           -> "files"
    - pluralize("missing file")   -> "missing files"
    - pluralize("utility")        -> "utilities"
    - pluralize("Source")         -> "Sources"
    """
    if not isinstance(text, str):
        raise TypeError("pluralize() argument must be a string")

    head, _, last = text.rpartition(" ")
    if not last:
        return text

    lower = last.lower()
    if lower.endswith(("s", "sh", "ch", "x", "z")):
        plural = lower + "es"
    elif lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        plural = lower[:-1] + "ies"
    else:
        plural = lower + "s"

    if last.isupper():
        plural = plural.upper()
    elif last[:1].isupper():
        plural = plural[:1].upper() + plural[1:]

    return (head + " " if head else "") + plural


def counted(count, noun, /):
    """
    Render "<count> <noun>" with the noun pluralized when count != 1.
    """
    return "%d %s" % (count, noun if count == 1 else pluralize(noun))


Unset = UnsetType()
"""
Singleton for “not provided”.

Use it as a default when None is itself a meaningful value (e.g. the absent
marker of an argument mapping), then materialize with coalesce().
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "view",
    "pluralize",
    "counted",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
