"""Name server data needed for IP forwarding, read from resolv.conf."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .log import get_log

RESOLV_CONF_PATH = "/etc/resolv.conf"

_ASCII_WHITESPACE = " \t\n\r\f\v"


class ConnectionDataError(Exception):
    """Raised when no connection data can be found."""


@dataclass
class IpForwardData:
    """Name servers and the interface packets are forwarded from."""

    dns1: Optional[str] = None
    dns2: Optional[str] = None
    nat_interface: Optional[str] = None

    def clear(self) -> None:
        """Forget all values."""
        self.dns1 = None
        self.dns2 = None
        self.nat_interface = None


def read_resolv_conf(path: str = RESOLV_CONF_PATH) -> IpForwardData:
    """Read the first two name servers from a resolv.conf file.

    With only one name server it is used as the secondary one too.
    Raises ConnectionDataError when the file cannot be read or holds
    no name server lines.
    """
    log = get_log()
    data = IpForwardData()
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        log.warning("%s: can't open for reading: %s", path, exc.strerror)
        raise ConnectionDataError(f"{path}: can't open for reading") from exc

    count = 0
    with handle:
        for line in handle:
            if count >= 2:
                break
            if not line or line[0] in "#\n":
                continue
            tokens = line.split(" ", 2)
            if len(tokens) < 2 or tokens[0] != "nameserver":
                continue
            server = tokens[1].strip(_ASCII_WHITESPACE)
            count += 1
            if count == 1:
                data.dns1 = server
            else:
                data.dns2 = server

    if count < 1:
        log.warning("%s: no nameserver lines found", path)
        raise ConnectionDataError(f"{path}: no nameserver lines found")

    if count == 1:
        data.dns2 = data.dns1
    return data