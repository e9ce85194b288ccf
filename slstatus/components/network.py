"""Network components: addresses, link state and traffic rates."""

from __future__ import annotations

import os
import socket

import psutil

from slstatus.util import fmt_human, read_uint

NET_CLASS = "/sys/class/net"
DEFAULT_INTERVAL = 1000


def _address(interface: str, family: int) -> str | None:
    for addr in psutil.net_if_addrs().get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of ``interface``."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of ``interface``."""
    return _address(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """Return 'up' or 'down' for ``interface``, or None if it does not exist."""
    stats = psutil.net_if_stats().get(interface)
    if stats is None:
        return None
    return "up" if stats.isup else "down"


class NetSpeed:
    """Bytes per second through an interface since the previous call."""

    def __init__(self, direction: str, interval: int = DEFAULT_INTERVAL, root: str = NET_CLASS):
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        previous = self._bytes
        path = os.path.join(self.root, interface, "statistics", f"{self.direction}_bytes")
        current = read_uint(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        return fmt_human((current - previous) * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of ``interface``."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of ``interface``."""
    return _tx(interface)