"""
Capture the calling function's arguments as an ordered mapping.

A wrapper around an external tool usually mirrors the tool's flags in its
own signature. Instead of rebuilding a dict by hand, the wrapper asks for its
own arguments:

    def align(input, threads=1, *, verbose=False, **extra):
        flags = interpret(args_all(drop={"input"}), {"threads": "t"})
        return ["aligner", input, *serialize(flags)]

Captured
- args_named(): named parameters (positional-only, positional-or-keyword and
  keyword-only) in signature order, with their current values. A leading
  "self"/"cls" is skipped so methods can wrap tools too.
- args_dots(): the entries of the **kwargs parameter, in call order.
  Positional *args carry no names, so they are never captured.
- args_all(): named parameters followed by **kwargs entries.

Each accepts keep= or drop= (names, see flagship.lists) but not both.

Capture reads the frame's current locals: call these before reassigning
any parameter.
"""
import inspect
import logging

from .faults import FaultCode, InvalidArgumentError
from .lists import select
from .utils import Unset

LOGGER = logging.getLogger(__name__)
LOGGER.addHandler(logging.NullHandler())


def _capture(depth, /):
    """
    return (named, dots) pair lists for the frame `depth` levels above this one.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            frame = frame.f_back if frame is not None else None
        if frame is None or frame.f_code.co_name == "<module>":
            raise InvalidArgumentError(
                "arguments can only be captured from inside a function",
                code=FaultCode.INVALID_ARGUMENT,
                hint="call args_all() from the body of the wrapping function",
            )
        code = frame.f_code
        locals = frame.f_locals

        count = code.co_argcount + code.co_kwonlyargcount
        names = list(code.co_varnames[:count])
        if names and names[0] in ("self", "cls"):
            names = names[1:]

        index = count + bool(code.co_flags & inspect.CO_VARARGS)
        extra = code.co_varnames[index] if code.co_flags & inspect.CO_VARKEYWORDS else None

        named = [(name, locals[name]) for name in names if name in locals]
        dots = list(locals[extra].items()) if extra is not None and extra in locals else []
        LOGGER.debug("captured %d named and %d extra arguments from %s()", len(named), len(dots), code.co_name)
        return named, dots
    finally:
        del frame


def args_named(keep=Unset, drop=Unset):
    """
    Named parameters of the calling function, as a dict in signature order.
    """
    named, _ = _capture(2)
    return select(dict(named), keep=keep, drop=drop)


def args_dots(keep=Unset, drop=Unset):
    """
    **kwargs entries of the calling function, as a dict in call order.
    """
    _, dots = _capture(2)
    return select(dict(dots), keep=keep, drop=drop)


def args_all(keep=Unset, drop=Unset):
    """
    Named parameters followed by **kwargs entries of the calling function.

        >>> def tool(input, *, threads=4, **extra):
        ...     return args_all(drop={"input"})
        >>> tool("x", threads=2, mode="fast")
        {'threads': 2, 'mode': 'fast'}
    """
    named, dots = _capture(2)
    return select(dict(named + dots), keep=keep, drop=drop)


__all__ = (
    "args_named",
    "args_dots",
    "args_all",
)
