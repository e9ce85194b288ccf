"""Component lookup by name and the default status layout."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

from slstatus.components import (
    battery,
    cpu,
    disk,
    memory,
    network,
    system,
    text,
    volume,
    wifi,
)

# Interval between updates, in milliseconds.
INTERVAL = 1000
# Text shown when a component cannot retrieve its value.
UNKNOWN_STR = "n/a"
# Maximum length of the status line, including the terminating byte.
MAXLEN = 2048

Component = Callable[[Optional[str]], Optional[str]]

_COMPONENTS: dict[str, Component] = {
    "battery_perc": battery.battery_perc,
    "battery_remaining": battery.battery_remaining,
    "battery_state": battery.battery_state,
    "cat": text.cat,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": text.datetime,
    "disk_free": disk.disk_free,
    "disk_perc": disk.disk_perc,
    "disk_total": disk.disk_total,
    "disk_used": disk.disk_used,
    "entropy": system.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": network.netspeed_rx,
    "netspeed_tx": network.netspeed_tx,
    "num_files": text.num_files,
    "ram_free": memory.ram_free,
    "ram_perc": memory.ram_perc,
    "ram_total": memory.ram_total,
    "ram_used": memory.ram_used,
    "run_command": text.run_command,
    "swap_free": memory.swap_free,
    "swap_perc": memory.swap_perc,
    "swap_total": memory.swap_total,
    "swap_used": memory.swap_used,
    "temp": system.temp,
    "uid": system.uid,
    "up": network.up,
    "uptime": system.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_essid": wifi.wifi_essid,
    "wifi_perc": wifi.wifi_perc,
}


@dataclass(frozen=True)
class Arg:
    """One status item: a component, its printf-style format and its argument."""

    func: Component
    fmt: str
    args: Optional[str] = None


def get_component(name: str) -> Component:
    """Return the component function registered under ``name``."""
    try:
        return _COMPONENTS[name]
    except KeyError:
        raise KeyError(f"unknown component {name!r}") from None


def default_args() -> list[Arg]:
    """Return the default list of status items."""
    mail_dir = os.path.expanduser("~/.local/share/mail/personal/INBOX/new")
    return [
        Arg(disk.disk_free, "^C2^ [DISK %s]", "/home"),
        Arg(text.run_command, "%s ", 'echo "^C8^  ~"'),
        Arg(cpu.cpu_perc, "^C2^[CPU %s%%]", None),
        Arg(text.run_command, "%s ", 'echo "^C8^  ~"'),
        Arg(memory.ram_perc, "^C2^[RAM %s%%] ^B0^ ", None),
        Arg(text.num_files, " ^B3^^C0^  ^B0^^C3^ %s ", mail_dir),
        Arg(text.run_command, " ^B6^^C0^  ^B0^^C6^ %2s ", "pamixer --get-volume"),
        Arg(text.datetime, " ^B4^^C0^  ^B0^^C4^ %s ", "%A, %b %d"),
        Arg(text.datetime, " ^B2^^C0^  ^B0^^C2^ %s ", "%I:%M %p"),
    ]