r"""
Flagship flag conversion: argument mappings → interpreted flags → argv tokens.

Pipeline
- interpret(args, aliases)  normalizes every value into a string (or drops it)
  and renames keys through an alias table.
- serialize(flags, prefix)  flattens the interpreted mapping into an ordered
  token list ready for an argv-style process call.
- similar(valid, flags) / suggest(suggestions)  compare user-supplied flag
  names against a known list and fail with "did you mean ..." hints.

Interpretation rules (per entry, order preserving)
- True                       → ""     (flag present, no value)
- False                      → dropped
- None / Unset / NaN / empty → dropped
- str                        → verbatim
- path-like (pathlib.Path)   → os.fsdecode(value)
- number                     → str(value); ints too long to print are rejected
- sequence of str/number/path → joined with `sep` (",")
- enum member                → its value, interpreted by the rules above

Security
- serialize() does not quote or escape anything. A value such as "x; rm -rf ~"
  reaches the token list unchanged. Always hand the tokens to an argv-based
  runner (subprocess.run([program, *tokens])); never join them into a shell
  string.

Quick example:
    >>> flags = interpret({"arg1": "input", "arg2": None, "bool": True, "vals": [1, 2, 3]})
    >>> flags
    {'arg1': 'input', 'bool': '', 'vals': '1,2,3'}
    >>> serialize(flags)
    ['-arg1', 'input', '-bool', '-vals', '1,2,3']
"""
import difflib
import math
import numbers
import os
from collections.abc import Mapping, Sequence
from enum import Enum

from .faults import FaultCode, InvalidArgumentError, UnknownFlagError
from .lists import _entries
from .utils import Unset, coalesce


def _describe(value, /):
    return type(value).__name__


def _stringify(key, value, /):
    """
    render a str, number or path-like scalar; Unset for anything else.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        return os.fsdecode(value)
    # bool is an int subclass; callers handle it before reaching here.
    if isinstance(value, numbers.Number) and not isinstance(value, bool | complex):
        try:
            return str(value)
        except ValueError:
            # ints past sys.get_int_max_str_digits() refuse to convert.
            raise InvalidArgumentError(
                "argument %r holds a number too large to render" % key,
                code=FaultCode.UNREPRESENTABLE_VALUE,
                hint="pass it as a string instead",
                key=key,
            ) from None
    return Unset


def _interpret(key, value, sep, /):
    """
    interpret a single value; Unset means "drop the entry".
    """
    if value is None or value is Unset:
        return Unset
    # bool before numbers: bool is an int subclass.
    if isinstance(value, bool):
        return "" if value else Unset
    if isinstance(value, Enum):
        return _interpret(key, value.value, sep)
    if isinstance(value, float) and math.isnan(value):
        return Unset
    if (text := _stringify(key, value)) is not Unset:
        return text
    if isinstance(value, Sequence) and not isinstance(value, bytes | bytearray):
        if not value:
            return Unset
        items = []
        for item in value:
            if isinstance(item, Enum):
                item = item.value
            if isinstance(item, bool) or (text := _stringify(key, item)) is Unset:
                raise InvalidArgumentError(
                    "argument %r holds a %s inside its sequence" % (key, _describe(item)),
                    code=FaultCode.UNREPRESENTABLE_VALUE,
                    hint="sequences may only hold strings, numbers and paths",
                    key=key,
                )
            items.append(text)
        return sep.join(items)
    raise InvalidArgumentError(
        "argument %r has an unrepresentable value of type %s" % (key, _describe(value)),
        code=FaultCode.UNREPRESENTABLE_VALUE,
        hint="convert it to a string, a number, a path, a boolean or a sequence first",
        key=key,
    )


def interpret(args, aliases=Unset, /, sep=","):
    """
    Convert an argument mapping into an interpreted flag mapping.

    Parameters
    - args: Mapping or sequence of (name, value) pairs. Names must be unique.
    - aliases: optional Mapping from argument name to flag name. Names missing
      from the table pass through unchanged. Aliases never touch values.
    - sep: separator used to join sequence values (default ",").

    Returns
    - dict[str, str]: flag name → normalized value, in input order, without the
      entries that were False or absent.

    Raises
    - InvalidArgumentError: unrepresentable value, non-string name, duplicated
      name, or two names collapsing onto the same flag through aliases.
    """
    aliases = coalesce(aliases, {})
    if not isinstance(aliases, Mapping):
        raise InvalidArgumentError(
            "aliases must be a mapping, got %s" % _describe(aliases),
            code=FaultCode.INVALID_ARGUMENT,
        )
    for name, flag in aliases.items():
        if not isinstance(name, str) or not isinstance(flag, str) or not flag:
            raise InvalidArgumentError(
                "alias %r → %r must map a string to a non-empty string" % (name, flag),
                code=FaultCode.INVALID_ARGUMENT,
                key=name,
            )
    if not isinstance(sep, str):
        raise InvalidArgumentError("separator must be a string", code=FaultCode.INVALID_ARGUMENT)

    seen = set()
    flags = {}
    for key, value in _entries(args):
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError(
                "argument names must be non-empty strings, got %r" % (key,),
                code=FaultCode.INVALID_ARGUMENT,
                key=key,
            )
        if key in seen:
            raise InvalidArgumentError(
                "argument %r was given more than once" % key,
                code=FaultCode.DUPLICATED_NAME,
                hint="pass each argument a single time",
                key=key,
            )
        seen.add(key)

        if (value := _interpret(key, value, sep)) is Unset:
            continue

        flag = aliases.get(key, key)
        if flag in flags:
            raise InvalidArgumentError(
                "argument %r maps onto flag %r, which is already set" % (key, flag),
                code=FaultCode.ALIAS_COLLISION,
                hint="check the alias table for two names sharing one flag",
                key=key,
            )
        flags[flag] = value
    return flags


def serialize(flags, /, prefix="-"):
    """
    Flatten an interpreted mapping into an argv token list.

    Each entry yields `prefix + name`, followed by the value unless it is the
    empty string (a valueless boolean flag).

        >>> serialize({"i": "in.txt", "v": "", "k": "3,4"}, prefix="--")
        ['--i', 'in.txt', '--v', '--k', '3,4']

    No quoting or escaping is performed (see the module notes on security).
    """
    if not isinstance(prefix, str):
        raise InvalidArgumentError("prefix must be a string", code=FaultCode.INVALID_ARGUMENT)

    tokens = []
    for name, value in _entries(flags):
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(
                "flag names must be non-empty strings, got %r" % (name,),
                code=FaultCode.INVALID_ARGUMENT,
                key=name,
            )
        if not isinstance(value, str):
            raise InvalidArgumentError(
                "flag %r has a non-string value of type %s" % (name, _describe(value)),
                code=FaultCode.UNREPRESENTABLE_VALUE,
                hint="run the arguments through interpret() first",
                key=name,
            )
        tokens.append(prefix + name)
        if value:
            tokens.append(value)
    return tokens


def similar(valid, flags, /, transform=Unset, cutoff=0.6):
    """
    Find the closest valid flag for every user flag that is not valid.

    Parameters
    - valid: iterable of flag names the target program accepts (as the
      caller knows them; nothing here reads help output).
    - flags: iterable (or mapping keys) of user-supplied names.
    - transform: optional callable applied to each valid name before
      comparing, e.g. lambda name: name.replace("-", "_") when users write
      Python-style argument names for dashed flags.
    - cutoff: difflib similarity threshold in [0, 1].

    Returns
    - dict: unknown user flag → closest (transformed) valid name. Unknown flags
      with nothing close enough are left out.
    """
    candidates = [name if transform is Unset else transform(name) for name in valid]
    known = set(candidates)

    suggestions = {}
    for flag in flags:
        if flag in known:
            continue
        if matches := difflib.get_close_matches(flag, candidates, 1, cutoff):
            suggestions[flag] = matches[0]
    return suggestions


def suggest(suggestions, /):
    """
    Raise UnknownFlagError listing every suggestion; no-op when empty.
    """
    if not suggestions:
        return None
    unknown = ", ".join(map(repr, suggestions))
    hint = "did you mean %s?" % ", ".join(
        "%r instead of %r" % (suggestion, flag) for flag, suggestion in suggestions.items()
    )
    raise UnknownFlagError(
        "unknown %s: %s" % ("flag" if len(suggestions) == 1 else "flags", unknown),
        hint=hint,
        suggestions=dict(suggestions),
    )


__all__ = (
    "interpret",
    "serialize",
    "similar",
    "suggest",
)
