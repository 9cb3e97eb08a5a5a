[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "usbmoded"
version = "0.1.0"
description = "USB gadget mode helpers: logging, g_ether MAC addresses, sysfs value tracking, fstab lookup and resolv.conf name servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["usb", "gadget", "sysfs", "fstab", "resolv.conf", "g_ether", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Miscellaneous",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["usbmoded"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
