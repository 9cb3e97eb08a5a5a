# usbmoded

Building blocks for managing USB gadget modes on Linux devices. The
package is a library; it has no command line entry point.

## Modules

- `usbmoded.log` – a small leveled logger. `Log` writes one line per
  message to a stream (stderr by default) or to syslog, chosen with
  `LogTarget`. Each stream line carries either the logger name or
  `file:line: func():` (when `lineinfo` is on), the seconds elapsed since
  `reset_clock()`, and a level tag such as `W:` or `D:`. Messages are
  filtered by `LogLevel` and have their whitespace squeezed with
  `squeeze_whitespace()`. `get_log()` returns the shared instance.
- `usbmoded.mac` – `random_ether_addr()` returns six random bytes with the
  multicast bit cleared and the locally administered bit set.
  `generate_random_mac(path)` writes such an address as an
  `options g_ether host_addr=...` line (default
  `/etc/modprobe.d/g_ether.conf`) and returns it, or `None` on failure;
  `read_mac(path)` reads it back.
- `usbmoded.sysfsio` – `read_from_file(path, maxsize)` reads a small
  control file and returns its whitespace-squeezed text, or `None` when it
  cannot be read. `write_to_file(path, text)` writes to an existing file
  without creating or truncating it and raises `OSError` on failure.
- `usbmoded.tracker` – `ValueTracker` writes values with `write()`,
  remembers what was written to readable files, and `verify()` returns the
  files whose contents have since changed as `{path: (expected, current)}`,
  adopting the new values. Paths given in `clear_paths` treat `""` and
  `"none"` as clearing a function list.
- `usbmoded.fstab` – `parse_fstab(path)` returns `FstabEntry` records;
  `find_mount_device(mountpoint, fstab)` returns the device mounted at a
  mount point, or `None`.
- `usbmoded.resolv` – `read_resolv_conf(path)` returns an `IpForwardData`
  holding the first two name servers (the first one doubles as the second
  when only one is present) and raises `ConnectionDataError` if none are
  found.

## Installing

```
pip install .
```

Python 3.10 or later; no third-party dependencies.

## Example

```python
from usbmoded.log import get_log, LogLevel
from usbmoded.resolv import read_resolv_conf, ConnectionDataError
from usbmoded.tracker import ValueTracker

log = get_log()
log.level = LogLevel.DEBUG
log.reset_clock()

try:
    servers = read_resolv_conf()
    print(servers.dns1, servers.dns2)
except ConnectionDataError as exc:
    log.warning("no name servers: %s", exc)

tracker = ValueTracker()
tracker.write("/tmp/example-attribute", "1")   # the file must already exist
print(tracker.verify())                        # {} while the file still holds "1"
```

## What the package does not do

It does not load mode description files or mode directories, does not
turn a mount point list into storage records, does not pick or validate
network interfaces, and does not write a DHCP server configuration. It
mounts and unmounts nothing, runs no external tools, and brings no
network up or down. There is no daemon and no command to run.

## Running the tests

```
pip install .[test]
pytest
```