"""
Flagship executable lookup: build a search once, resolve it many times.

What this module provides
- PathSearch: an immutable search over up to four sources, consulted in a
  fixed order on every call:
      explicit path argument > named option > environment variable > default path
  plus an optional set of "utilities" (sub-executables living in the same
  directory, e.g. the many binaries of one suite's bin/).
- path_search(...): convenience factory for PathSearch.
- install_is_valid(search): closure answering True/False instead of raising.
- install_check(search): prints one status line per target (tool + utilities).

Resolution rules
- An explicit path is authoritative: when it does not exist the call fails at
  once, and no fallback source is consulted.
- Unconfigured sources are skipped silently; configured sources whose option or
  variable is unset, or whose option holds something other than a path, are
  recorded as attempted and skipped.
- util="name" resolves source/name and moves on to the next source when it is
  absent. util=True lists every configured utility under the first existing
  source without checking each utility file.
- "~" is expanded in every source. Existence is re-checked on every call.

Quick example:
    >>> search = path_search(
    ...     default_path="~/tools/suite/bin",
    ...     utils=("align", "index"),
    ...     environment_var="SUITE_PATH",
    ...     option_name="suite.path",
    ... )
    >>> search()                    # first existing source
    >>> search(util="align")        # .../bin/align
    >>> search(util=True)           # {"align": ".../align", "index": ".../index"}
    >>> search("/opt/suite/bin")    # explicit path, never overridden

Testing
- environ, options and exists can be injected (plain dicts and a predicate),
  so resolution can be exercised without touching the real environment.
"""
import difflib
import logging
import os
import os.path

from . import config
from .faults import FaultCode, InvalidArgumentError, PathNotFoundError, UnknownUtilityError
from .ui import status
from .utils import Unset, coalesce, counted, rename, view

LOGGER = logging.getLogger(__name__)
LOGGER.addHandler(logging.NullHandler())


def _source(name, value, /):
    if value is Unset:
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            "path search %r must be a non-empty string, got %r" % (name, value),
            code=FaultCode.INVALID_CONFIGURATION,
            key=name,
        )
    return value


def _utilities(utils, /):
    if utils is Unset:
        return ()
    if isinstance(utils, str):
        raise InvalidArgumentError(
            "path search 'utils' must be a collection of names, not a single string",
            code=FaultCode.INVALID_CONFIGURATION,
            hint="wrap a single utility in a tuple, e.g. (%r,)" % utils,
            key="utils",
        )
    names = []
    for name in utils:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(
                "utility names must be non-empty strings, got %r" % (name,),
                code=FaultCode.INVALID_CONFIGURATION,
                key="utils",
            )
        if name in names:
            raise InvalidArgumentError(
                "utility %r is listed more than once" % name,
                code=FaultCode.INVALID_CONFIGURATION,
                key="utils",
            )
        names.append(name)
    return tuple(names)


def _describe(label, value, /):
    if value is Unset:
        return "%s (unset)" % label
    if value is None:
        return "%s (not a path)" % label
    return "%s %r" % (label, value)


class PathSearch:
    """
    Immutable, reusable executable search.

    Sources (all optional, each a non-empty string)
    - default_path: last-resort location, e.g. "~/tools/bin".
    - environment_var: name of an environment variable holding a location.
    - option_name: name of a flagship option (see flagship.config) holding a location.
    - utils: names of sub-executables expected inside the resolved location.

    Accessors (injectable, looked up at call time)
    - environ: Mapping of environment variables (default os.environ).
    - options: Mapping of options (default flagship.config.options).
    - exists: predicate on a path string (default os.path.exists).

    Calling
    - search(path=Unset, util=Unset) -> str | dict[str, str]
      raises PathNotFoundError / UnknownUtilityError.
    """
    __introspectable__ = ("default_path", "utils", "environment_var", "option_name")
    __slots__ = ("_default_path", "_utils", "_environment_var", "_option_name", "_environ", "_options", "_exists")

    default_path = view("default_path")
    utils = view("utils")
    environment_var = view("environment_var")
    option_name = view("option_name")

    def __init__(
            self,
            default_path=Unset,
            utils=Unset,
            environment_var=Unset,
            option_name=Unset,
            *,
            environ=Unset,
            options=Unset,
            exists=Unset,
    ):
        if exists is not Unset and not callable(exists):
            raise InvalidArgumentError(
                "path search 'exists' must be callable",
                code=FaultCode.INVALID_CONFIGURATION,
                key="exists",
            )
        for name, value in {
            "_default_path": _source("default_path", default_path),
            "_utils": _utilities(utils),
            "_environment_var": _source("environment_var", environment_var),
            "_option_name": _source("option_name", option_name),
            "_environ": environ,
            "_options": options,
            "_exists": exists,
        }.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value, /):
        raise AttributeError("path searches are immutable")

    def __delattr__(self, name, /):
        raise AttributeError("path searches are immutable")

    def __repr__(self):
        return "path-search(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def _check(self, path, /):
        exists = coalesce(self._exists, os.path.exists)(path)
        LOGGER.debug("checking %r: %s", path, "found" if exists else "missing")
        return exists

    def _utility(self, util, /):
        """
        normalize `util` into Unset (none), True (listing) or a configured name.
        """
        if util is Unset or util is None or util is False:
            return Unset
        if util is not True and not isinstance(util, str):
            raise InvalidArgumentError(
                "util must be a utility name or True, got %r" % (util,),
                code=FaultCode.INVALID_ARGUMENT,
                key="util",
            )
        if not self._utils:
            raise UnknownUtilityError(
                "this path search has no utilities configured",
                hint="pass utils=(...) when building the search",
                util=util,
            )
        if util is True or util in self._utils:
            return util
        matches = difflib.get_close_matches(util, self._utils, 1)
        raise UnknownUtilityError(
            "utility %r is not one of %s" % (util, ", ".join(map(repr, self._utils))),
            hint="did you mean %r?" % matches[0] if matches else Unset,
            util=util,
        )

    def _sources(self):
        """
        yield (label, location) for each configured source in precedence order.

        location is Unset when the source is configured but holds no value, and None
        when its option holds something that is not a path.
        """
        if self._option_name is not Unset:
            value = coalesce(self._options, config.options).get(self._option_name)
            if value and not isinstance(value, str | os.PathLike):
                LOGGER.debug("option %r holds a %s, not a path", self._option_name, type(value).__name__)
                yield "option %r" % self._option_name, None
            else:
                yield "option %r" % self._option_name, os.fspath(value) if value else Unset
        if self._environment_var is not Unset:
            value = coalesce(self._environ, os.environ).get(self._environment_var)
            yield "environment variable %r" % self._environment_var, value if value else Unset
        if self._default_path is not Unset:
            yield "default path", self._default_path

    def _resolve(self, location, util, /):
        """
        return the resolved result for `location`, or Unset when it does not validate.
        """
        if util is Unset or util is True:
            if not self._check(location):
                return Unset
            if util is True:
                return {name: os.path.join(location, name) for name in self._utils}
            return location
        target = os.path.join(location, util)
        return target if self._check(target) else Unset

    def __call__(self, path=Unset, util=Unset):
        util = self._utility(util)

        if path is not Unset and path is not None:
            if not isinstance(path, str | os.PathLike):
                raise InvalidArgumentError(
                    "path must be a string or a path-like object, got %r" % (path,),
                    code=FaultCode.INVALID_ARGUMENT,
                    key="path",
                )
            location = os.path.expanduser(os.fspath(path))
            if not self._check(location):
                raise PathNotFoundError(
                    "path argument %r does not exist" % location,
                    hint="fix the path or omit it to search the configured sources",
                    sources=(("path argument", location),),
                )
            if util is Unset:
                return location
            if util is True:
                return {name: os.path.join(location, name) for name in self._utils}
            if not self._check(target := os.path.join(location, util)):
                raise PathNotFoundError(
                    "utility %r does not exist under path argument %r" % (util, location),
                    hint="check that %r is installed in that directory" % util,
                    sources=(("path argument", target),),
                )
            return target

        attempted = []
        for label, location in self._sources():
            if location is Unset or location is None:
                LOGGER.debug("skipping %s: %s", label, "unset" if location is Unset else "not a path")
                attempted.append((label, location))
                continue
            location = os.path.expanduser(location)
            attempted.append((label, location if util is Unset or util is True else os.path.join(location, util)))
            if (resolved := self._resolve(location, util)) is not Unset:
                LOGGER.debug("resolved %r through %s", resolved, label)
                return resolved

        if not attempted:
            raise PathNotFoundError(
                "no path was given and this search has no sources configured",
                hint="pass a path or build the search with default_path/environment_var/option_name",
                sources=(),
            )
        raise PathNotFoundError(
            "no valid path found after trying %s: %s" % (
                counted(len(attempted), "source"),
                "; ".join(_describe(label, value) for label, value in attempted),
            ),
            hint="install the tool or point one of the sources at it",
            sources=tuple(attempted),
        )


def path_search(
        default_path=Unset,
        utils=Unset,
        environment_var=Unset,
        option_name=Unset,
        *,
        environ=Unset,
        options=Unset,
        exists=Unset,
):
    """
    Build a PathSearch; see PathSearch for the meaning of every parameter.
    """
    return PathSearch(
        default_path,
        utils,
        environment_var,
        option_name,
        environ=environ,
        options=options,
        exists=exists,
    )


def install_is_valid(search, /, path=Unset, util=Unset):
    """
    Return a zero-argument closure reporting whether `search` resolves.

    Only PathNotFoundError (and its subclasses) is turned into False; any
    other fault still propagates.

        >>> is_installed = install_is_valid(search, util="align")
        >>> if is_installed(): ...
    """
    if not callable(search):
        raise InvalidArgumentError(
            "install_is_valid() argument must be a path search",
            code=FaultCode.INVALID_ARGUMENT,
        )

    @rename("install_is_valid")
    def check():
        try:
            search(path=path, util=util)
        except PathNotFoundError as fault:
            LOGGER.debug("install is not valid: %s", fault)
            return False
        return True

    return check


def install_check(search, /, path=Unset):
    """
    Print a status line for the tool and for each configured utility.

    Never raises on a missing install. Returns a dict from target (None for
    the main tool, otherwise the utility name) to whether it resolved.
    """
    if not callable(search):
        raise InvalidArgumentError(
            "install_check() argument must be a path search",
            code=FaultCode.INVALID_ARGUMENT,
        )

    report = {}
    for util in (Unset, *getattr(search, "utils", ())):
        label = "main install" if util is Unset else "util: %s" % util
        try:
            resolved = search(path=path, util=util)
        except PathNotFoundError as fault:
            LOGGER.debug("%s failed: %s", label, fault)
            report[coalesce(util)] = status(False, label)
        else:
            report[coalesce(util)] = status(True, label, resolved)
    return report


__all__ = (
    "PathSearch",
    "path_search",
    "install_is_valid",
    "install_check",
)
