# studiogen/utils/paths.py
"""
Path construction and directory creation.
Paths are plain '/'-joined strings; the generated layout is always
described with forward slashes regardless of platform.
"""
import logging
import os

from studiogen.core.constants import DIR_MODE
from studiogen.core.exceptions import MissingParentError

_log = logging.getLogger("studiogen.utils.paths")


def join_base(base: str, suffix: str) -> str:
    """Return base/suffix, or suffix alone when base is empty."""
    if base:
        return base + "/" + suffix
    return suffix


def looks_like_file(path: str) -> bool:
    """
    True if the last path segment contains a '.'.
    Known limitation: a directory named 'v1.0' is reported as a file.
    """
    return "." in path.rsplit("/", 1)[-1]


def ensure_dir(path: str) -> None:
    """Create path and any missing ancestors. Existing directories are fine."""
    os.makedirs(path + "/", mode=DIR_MODE, exist_ok=True)
    _log.debug("directory ready: %s", path)


def ensure_path(path: str) -> None:
    """
    Make sure the directory part of path exists.

    Paths whose last segment has an extension are treated as files and only
    their parent is created. Anything else is created as a directory tree.

    Raises:
        MissingParentError: file-like path without any '/'.
    """
    if looks_like_file(path):
        slash = path.rfind("/")
        if slash == -1:
            raise MissingParentError(path)
        parent = path[:slash]
        # "/x.txt": parent is the filesystem root
        ensure_dir(parent or "/")
        return
    ensure_dir(path)
