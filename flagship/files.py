"""
Expected-output helpers for tool wrappers.

Most tools write files named after a prefix plus one or more extensions
(sample.bam, sample.bai, ...). These helpers build those names and check
that a run actually produced them.

- file_combn(prefix, ext, outdir=".")       every outdir/prefix.ext combination
- file_expect(prefix, ext, outdir=".")      same, raising when any is missing
- error_if_missing(files)                   raise MissingFilesError for absent files
- ui_file_exists(file)                      print a ✔/✖ line for one file
"""
import logging
import os
import os.path

from .faults import FaultCode, InvalidArgumentError, MissingFilesError
from .ui import status
from .utils import counted

LOGGER = logging.getLogger(__name__)
LOGGER.addHandler(logging.NullHandler())


def _names(name, value, /):
    values = [value] if isinstance(value, str) else list(value)
    if not values or not all(isinstance(item, str) and item for item in values):
        raise InvalidArgumentError(
            "%s must be a non-empty string or a collection of them" % name,
            code=FaultCode.INVALID_ARGUMENT,
            key=name,
        )
    return values


def file_combn(prefix, ext, /, outdir="."):
    """
    Return outdir/prefix.ext for every prefix × extension pair (prefix-major).

    Extensions may carry a leading dot or not: "bam" and ".bam" are the same.

        >>> file_combn(["a", "b"], ["txt", ".csv"], outdir="out")
        ['out/a.txt', 'out/a.csv', 'out/b.txt', 'out/b.csv']
    """
    prefixes = _names("prefix", prefix)
    extensions = [extension.removeprefix(".") for extension in _names("ext", ext)]
    return [
        os.path.join(os.fspath(outdir), "%s.%s" % (name, extension))
        for name in prefixes
        for extension in extensions
    ]


def error_if_missing(files, /):
    """
    Raise MissingFilesError naming every path in `files` that does not exist.
    """
    files = [files] if isinstance(files, str | os.PathLike) else list(files)
    missing = [os.fspath(file) for file in files if not os.path.exists(file)]
    LOGGER.debug("checked %d files, %d missing", len(files), len(missing))
    if missing:
        raise MissingFilesError(
            "%s: %s" % (counted(len(missing), "missing file"), ", ".join(map(repr, missing))),
            hint="check the tool's output directory and its log for errors",
            files=tuple(missing),
        )
    return None


def file_expect(prefix, ext, /, outdir="."):
    """
    Build the expected output paths and fail unless all of them exist.
    """
    files = file_combn(prefix, ext, outdir=outdir)
    error_if_missing(files)
    return files


def ui_file_exists(file, /):
    """
    Print a status line for `file` and return whether it exists.
    """
    return status(os.path.exists(file), os.fspath(file))


__all__ = (
    "file_combn",
    "file_expect",
    "error_if_missing",
    "ui_file_exists",
)
