"""Components that describe the host, its user and its sensors."""

from __future__ import annotations

import os
import pwd
import socket
import sys
import time

from slstatus.util import read_uint, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_UPTIME_CLOCK = next(
    getattr(time, name)
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC")
    if hasattr(time, name)
)


def hostname(unused=None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc.strerror or exc}")
        return None


def kernel_release(unused=None) -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror or exc}")
        return None


def load_avg(unused=None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: int) -> str:
    """Format a number of seconds as hours and minutes."""
    seconds = int(seconds)
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def uptime(unused=None) -> str | None:
    """Return the system uptime."""
    try:
        seconds = time.clock_gettime(_UPTIME_CLOCK)
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    return format_uptime(int(seconds))


def entropy(unused=None, path: str = ENTROPY_AVAIL) -> str | None:
    """Return the available kernel entropy."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    value = read_uint(path)
    return None if value is None else str(value)


def gid(unused=None) -> str:
    """Return the real group id of the current user."""
    return str(os.getgid())


def uid(unused=None) -> str:
    """Return the effective user id of the current user."""
    return str(os.geteuid())


def username(unused=None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def temp(file: str) -> str | None:
    """Return the temperature in degrees Celsius read from a millidegree sensor file."""
    value = read_uint(file)
    return None if value is None else str(value // 1000)