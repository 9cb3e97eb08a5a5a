"""Reading and writing of small sysfs-style control files."""

from __future__ import annotations

import errno
import os
from typing import Optional

from .log import get_log, squeeze_whitespace

DEFAULT_MAXSIZE = 0x1000

_SILENT_OPEN_ERRORS = (errno.ENOENT, errno.EACCES)


def strip_whitespace(text: str) -> str:
    """Trim whitespace at both ends and collapse inner whitespace runs to one space."""
    return squeeze_whitespace(text)


def read_from_file(path: str, maxsize: int = DEFAULT_MAXSIZE) -> Optional[str]:
    """Return at most ``maxsize`` bytes of ``path`` as whitespace-squeezed text.

    Returns None when the file cannot be opened or read. Missing and
    unreadable files are ignored silently; other failures are logged.
    """
    log = get_log()
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        if exc.errno not in _SILENT_OPEN_ERRORS:
            log.warning("%s: open: %s", path, exc.strerror)
        return None
    try:
        data = os.read(fd, maxsize)
    except OSError as exc:
        log.warning("%s: read: %s", path, exc.strerror)
        return None
    finally:
        os.close(fd)
    return strip_whitespace(data.decode("utf-8", errors="replace"))


def write_to_file(path: str, text: str) -> None:
    """Write ``text`` to an already existing file; raise OSError on failure.

    The file is never created and not truncated, as with sysfs attributes.
    """
    payload = text.encode("utf-8")
    fd = os.open(path, os.O_WRONLY)
    try:
        view = memoryview(payload)
        while view:
            written = os.write(fd, view)
            view = view[written:]
    finally:
        os.close(fd)