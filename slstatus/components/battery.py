"""Battery components reading the power_supply class in sysfs."""

from __future__ import annotations

import os
import re

from slstatus.util import read_uint, warn

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _read_state(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def _pick(bat: str, root: str, first: str, second: str) -> str | None:
    for name in (first, second):
        path = os.path.join(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Return the battery charge in percent."""
    capacity = read_uint(os.path.join(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    state = _read_state(os.path.join(root, bat, "status"))
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Return the remaining time while discharging, or an empty string otherwise."""
    state = _read_state(os.path.join(root, bat, "status"))
    if state is None:
        return None

    path = _pick(bat, root, "charge_now", "energy_now")
    if path is None:
        return None
    charge_now = read_uint(path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    path = _pick(bat, root, "current_now", "power_now")
    if path is None:
        return None
    current_now = read_uint(path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"