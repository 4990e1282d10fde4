"""
Flagship faults (errors) and rendering.

Scope
- FaultCode: stable numeric identifiers for every failure the library raises.
  Codes are grouped by domain so logs and searches stay predictable.
- FlagshipException: base type carrying a message plus read-only options
  (code, title, hint and any context such as the offending key or the sources
  a search attempted). Faults render themselves through rich.
- getdoc(): optional description lookup for a code from the host application.

Taxonomy
- InvalidArgumentError: malformed input to a pure transform (unrepresentable
  value, duplicate names, bad selector, keep+drop together, bad configuration).
  • UnknownFlagError: user flags that are not valid for the target program.
- PathNotFoundError: no configured source yields an existing path.
  • UnknownUtilityError: the requested utility was never configured.
  • MissingFilesError: expected files are absent.

Nothing here retries: every fault is a deterministic function of the inputs
and the filesystem at the time of the call.

Host integration
- __main__.__prog__   → program label in rendered headers (default "flagship").
- __main__.__styles__ → rich style overrides keyed like the defaults below.
- __main__.__codes__  → FaultCode → label remapping.
- __main__.__docs__   → FaultCode → short documentation string.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - arguments (211xx)
      • INVALID_ARGUMENT, UNREPRESENTABLE_VALUE, DUPLICATED_NAME, ALIAS_COLLISION,
        INVALID_SELECTOR, CONFLICTING_SELECTORS, INVALID_CONFIGURATION, UNKNOWN_FLAG
    - paths (212xx)
      • PATH_NOT_FOUND, UNKNOWN_UTILITY, MISSING_FILES
    """
    # --- argument errors (211xx) ---
    INVALID_ARGUMENT        = 21101
    UNREPRESENTABLE_VALUE   = 21102
    DUPLICATED_NAME         = 21103
    ALIAS_COLLISION         = 21104
    INVALID_SELECTOR        = 21105
    CONFLICTING_SELECTORS   = 21106
    INVALID_CONFIGURATION   = 21107
    UNKNOWN_FLAG            = 21111

    # --- path errors (212xx) ---
    PATH_NOT_FOUND          = 21201
    UNKNOWN_UTILITY         = 21202
    MISSING_FILES           = 21211

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host can provide a __codes__ mapping in __main__ to relabel codes;
        otherwise the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class FlagshipException(Exception):
    """
    base class of every flagship fault.

    options
    - code: FaultCode (defaults to the class' own code)
    - title: short headline (defaults to the class' own title)
    - hint: one actionable sentence, or Unset
    - colorful / fancy: rendering switches (default True / False)
    - anything else is context (key, sources, files, ...) exposed via .options
    """
    code = FaultCode.INVALID_ARGUMENT
    title = "flagship error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType({
            "code": type(self).code,
            "title": type(self).title,
            "hint": Unset,
            "colorful": True,
            "fancy": False,
        } | options)

    def __str__(self):
        if self.message is Unset:
            return self.options["title"]
        return self.message

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # green arrow
            "hint": "italic #9CE19C",  # green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if self.options["colorful"] else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options["colorful"]:
                return Text(str(fragment))
            return Text(str(fragment), style)

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "flagship"), styler("prog-name")),
            " — ",
            text(self.options["code"].normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(str(self), styler("error-message"))
        parts = [message]
        if self.options["hint"]:
            parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint"))))

        if self.options["fancy"]:
            return Panel(Group(*parts), title=header, title_align="left")

        return Group(header, *parts)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidArgumentError(FlagshipException):
    code = FaultCode.INVALID_ARGUMENT
    title = "invalid argument"


class UnknownFlagError(InvalidArgumentError):
    code = FaultCode.UNKNOWN_FLAG
    title = "unknown flag"


class PathNotFoundError(FlagshipException):
    code = FaultCode.PATH_NOT_FOUND
    title = "path not found"


class UnknownUtilityError(PathNotFoundError):
    code = FaultCode.UNKNOWN_UTILITY
    title = "unknown utility"


class MissingFilesError(PathNotFoundError):
    code = FaultCode.MISSING_FILES
    title = "missing files"


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host may expose a __docs__ mapping in __main__ keyed by FaultCode;
    None is returned when nothing is registered.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "FlagshipException",
    "InvalidArgumentError",
    "UnknownFlagError",
    "PathNotFoundError",
    "UnknownUtilityError",
    "MissingFilesError",
    "getdoc",
)
