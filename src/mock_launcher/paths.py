"""Path helpers: Unix-style to Windows-style translation and self-location."""

import logging
import os
import sys

from mock_launcher.constants import NATIVE_SEP
from mock_launcher.errors import MissingConfiguration

log = logging.getLogger(__name__)


def translate_path(path: str, sep: str = NATIVE_SEP, max_length: int | None = None) -> str:
    """Convert ``/c/some/dir`` style paths to ``C:\\some\\dir``.

    Paths that do not start with ``/`` are assumed to be native already and
    only have their forward slashes replaced.
    """
    if path.startswith("/"):
        # The character after the leading slash is the drive letter.
        translated = f"{path[1:2].upper()}:{path[2:]}"
    else:
        translated = path
    translated = translated.replace("/", sep)
    if max_length is not None:
        translated = translated[:max_length]
    return translated


def windows_dirname(path: str) -> str:
    """Return *path* up to its last separator, or *path* itself when there is none."""
    index = path.rfind("\\")
    if index < 0:
        index = path.rfind("/")
    if index < 0:
        return path
    return path[:index]


def join_native(base: str, *parts: str) -> str:
    return NATIVE_SEP.join([base, *parts])


def executable_path() -> str:
    """Return the absolute path of the running launcher."""
    if getattr(sys, "frozen", False):
        candidate = sys.executable
    else:
        candidate = sys.argv[0] if sys.argv else ""
    if not candidate:
        raise MissingConfiguration("executable path")
    path = os.path.abspath(candidate)
    log.debug("executable path: %s", path)
    return path
