"""Lookup of block devices for mount points listed in an fstab file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .log import get_log

FSTAB_PATH = "/etc/fstab"

_ESCAPES = {
    "\\040": " ",
    "\\011": "\t",
    "\\012": "\n",
    "\\134": "\\",
    "\\\\": "\\",
}
_ESCAPE_PATTERN = re.compile(r"\\040|\\011|\\012|\\134|\\\\")


def _decode(field: str) -> str:
    return _ESCAPE_PATTERN.sub(lambda match: _ESCAPES[match.group(0)], field)


def _to_int(field: Optional[str]) -> int:
    if field is None:
        return 0
    match = re.match(r"[+-]?\d+", field)
    return int(match.group(0)) if match else 0


@dataclass(frozen=True)
class FstabEntry:
    """One file system description line of an fstab file."""

    device: str
    mountpoint: str
    fstype: str = ""
    options: str = ""
    freq: int = 0
    passno: int = 0


def parse_fstab(path: str = FSTAB_PATH) -> List[FstabEntry]:
    """Return the entries of an fstab file in file order.

    Blank lines, comment lines and lines without a mount point are
    skipped. Octal escapes for space, tab, newline and backslash are
    decoded. Raises OSError if the file cannot be read.
    """
    entries: List[FstabEntry] = []
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            fields = line.split()
            if not fields or fields[0].startswith("#"):
                continue
            if len(fields) < 2:
                continue
            entries.append(
                FstabEntry(
                    device=_decode(fields[0]),
                    mountpoint=_decode(fields[1]),
                    fstype=_decode(fields[2]) if len(fields) > 2 else "",
                    options=_decode(fields[3]) if len(fields) > 3 else "",
                    freq=_to_int(fields[4] if len(fields) > 4 else None),
                    passno=_to_int(fields[5] if len(fields) > 5 else None),
                )
            )
    return entries


def find_mount_device(mountpoint: str, fstab: str = FSTAB_PATH) -> Optional[str]:
    """Return the device of the first fstab entry mounted at ``mountpoint``.

    Returns None when there is no such entry or the file cannot be read.
    """
    device: Optional[str] = None
    try:
        entries = parse_fstab(fstab)
    except OSError:
        entries = []
    for entry in entries:
        if entry.mountpoint == mountpoint:
            device = entry.device
            break
    get_log().debug("%s -> %s", mountpoint, device)
    return device