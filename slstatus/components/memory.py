"""RAM and swap components reading /proc/meminfo."""

from __future__ import annotations

import re

from slstatus.util import _read_text, fmt_human

MEMINFO = "/proc/meminfo"

_LINE = re.compile(r"^([^:\s]+):\s*(\d+)", re.MULTILINE)


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each ``Name: value kB`` line of meminfo text to its value in kB."""
    info: dict[str, int] = {}
    for match in _LINE.finditer(text):
        info.setdefault(match.group(1), int(match.group(2)))
    return info


def _fields(path: str, *names: str) -> tuple[int, ...] | None:
    text = _read_text(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _percent(part: int, whole: int) -> int:
    """Integer percentage truncated toward zero."""
    value = abs(100 * part) // abs(whole)
    return value if (part < 0) == (whole < 0) else -value


def ram_free(unused=None, path: str = MEMINFO) -> str | None:
    """Return the memory available for new allocations."""
    fields = _fields(path, "MemAvailable")
    if fields is None:
        return None
    (available,) = fields
    return fmt_human(available * 1024, 1024)


def ram_perc(unused=None, path: str = MEMINFO) -> str | None:
    """Return the used memory, without buffers and cache, in percent."""
    fields = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if fields is None:
        return None
    total, free, buffers, cached = fields
    if total == 0:
        return None
    return str(_percent((total - free) - (buffers + cached), total))


def ram_total(unused=None, path: str = MEMINFO) -> str | None:
    """Return the total memory size."""
    fields = _fields(path, "MemTotal")
    if fields is None:
        return None
    (total,) = fields
    return fmt_human(total * 1024, 1024)


def ram_used(unused=None, path: str = MEMINFO) -> str | None:
    """Return the used memory, without buffers and cache."""
    fields = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if fields is None:
        return None
    total, free, buffers, cached = fields
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused=None, path: str = MEMINFO) -> str | None:
    """Return the free swap space."""
    fields = _fields(path, "SwapFree")
    if fields is None:
        return None
    (free,) = fields
    return fmt_human(free * 1024, 1024)


def swap_perc(unused=None, path: str = MEMINFO) -> str | None:
    """Return the used swap, without the swap cache, in percent."""
    fields = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if fields is None:
        return None
    total, free, cached = fields
    if total == 0:
        return None
    return str(_percent(total - free - cached, total))


def swap_total(unused=None, path: str = MEMINFO) -> str | None:
    """Return the total swap size."""
    fields = _fields(path, "SwapTotal")
    if fields is None:
        return None
    (total,) = fields
    return fmt_human(total * 1024, 1024)


def swap_used(unused=None, path: str = MEMINFO) -> str | None:
    """Return the used swap, without the swap cache."""
    fields = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if fields is None:
        return None
    total, free, cached = fields
    return fmt_human((total - free - cached) * 1024, 1024)