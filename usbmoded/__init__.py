"""USB gadget mode helpers: logging, g_ether MAC addresses, sysfs value tracking, fstab and resolv.conf reading."""

__version__ = "0.1.0"