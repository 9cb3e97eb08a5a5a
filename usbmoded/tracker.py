"""Tracking of values written to control files, so later changes can be noticed."""

from __future__ import annotations

import errno
import string
from typing import Dict, Iterable, Optional, Tuple

from .log import get_log
from .sysfsio import DEFAULT_MAXSIZE, read_from_file, strip_whitespace, write_to_file

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_CLEAR_VALUES = ("", "none")


def _ascii_casefold_equal(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


class ValueTracker:
    """Remembers what was written where, and checks the files still hold it.

    ``clear_paths`` lists function-list files where writing "" or "none"
    means clearing the list: "none" is written, a resulting EINVAL is
    expected, and the file is assumed to read back as an empty string.
    """

    def __init__(self, clear_paths: Iterable[str] = ()) -> None:
        self.clear_paths = frozenset(clear_paths)
        self._values: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, path: object) -> bool:
        return path in self._values

    def get(self, path: str) -> Optional[str]:
        """Return the value expected at ``path``, or None if it is not tracked."""
        return self._values.get(path)

    def track(self, path: Optional[str], text: Optional[str]) -> None:
        """Expect ``text`` at ``path``; a None ``text`` stops tracking the path."""
        if path is None:
            return
        if text is None:
            self._values.pop(path, None)
        else:
            self._values[path] = text

    def write(self, path: Optional[str], text: Optional[str]) -> None:
        """Write ``text`` to ``path`` and track it if the file is readable.

        Raises ValueError if either argument is missing and OSError if
        the file cannot be opened or written.
        """
        log = get_log()
        if path is None or text is None:
            raise ValueError("both path and text are required")

        clear = False
        if path in self.clear_paths and text in _CLEAR_VALUES:
            text = "none"
            clear = True

        shown = strip_whitespace(text)
        previous = read_from_file(path, DEFAULT_MAXSIZE)
        if previous is not None:
            self.track(path, "" if clear else shown)

        log.debug(
            "WRITE '%s' : '%s' --> '%s'",
            path,
            previous if previous is not None else "???",
            shown,
        )

        try:
            write_to_file(path, text)
        except OSError as exc:
            if clear and exc.errno == errno.EINVAL:
                log.debug("write(%s): %s (expected failure)", path, exc.strerror)
            else:
                log.warning("write(%s): %s", path, exc.strerror)
            raise

    def verify(self) -> Dict[str, Tuple[str, Optional[str]]]:
        """Compare tracked values with file contents and adopt any changes.

        Returns a mapping from each changed path to its (expected, current)
        values; a current value of None means the file could not be read.
        """
        log = get_log()
        changes: Dict[str, Tuple[str, Optional[str]]] = {}
        for path, expected in list(self._values.items()):
            current = read_from_file(path, DEFAULT_MAXSIZE)
            if current == expected:
                continue
            shown = current if current is not None else "???"
            if current is not None and _ascii_casefold_equal(expected, current):
                # Hex values often differ only in case between config and kernel.
                log.debug(
                    "unexpected change '%s' : '%s' -> '%s' (case diff only)",
                    path, expected, shown,
                )
            else:
                log.warning("unexpected change '%s' : '%s' -> '%s'", path, expected, shown)
            changes[path] = (expected, current)
            self.track(path, current)
        return changes

    def clear(self) -> None:
        """Forget every tracked value."""
        self._values.clear()