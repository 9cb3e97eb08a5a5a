"""Random locally administered MAC address for the g_ether gadget module."""

from __future__ import annotations

import os
from typing import Optional

from .log import get_log

G_ETHER_CONF = "/etc/modprobe.d/g_ether.conf"
_PREFIX = "options g_ether host_addr="
_MAC_LENGTH = 17


def random_ether_addr() -> bytes:
    """Return six random bytes forming a unicast, locally administered address."""
    addr = bytearray(os.urandom(6))
    addr[0] &= 0xFE  # clear multicast bit
    addr[0] |= 0x02  # set local assignment bit
    return bytes(addr)


def generate_random_mac(path: str = G_ETHER_CONF) -> Optional[str]:
    """Write a random host address to the modprobe config; return it, or None on failure."""
    log = get_log()
    log.debug("Getting random usb ethernet mac")
    mac = ":".join(f"{byte:02x}" for byte in random_ether_addr())
    try:
        with open(path, "w", encoding="ascii") as conf:
            conf.write(f"{_PREFIX}{mac}\n")
    except OSError:
        log.warning("Failed to write mac address to %s", path)
        return None
    return mac


def read_mac(path: str = G_ETHER_CONF) -> Optional[str]:
    """Read the host address stored in the modprobe config, or None if unavailable."""
    try:
        with open(path, "rb") as conf:
            conf.seek(len(_PREFIX))
            data = conf.read(_MAC_LENGTH)
    except OSError:
        get_log().warning("Failed to read mac address from %s", path)
        return None
    if len(data) != _MAC_LENGTH:
        return None
    return data.decode("latin-1")