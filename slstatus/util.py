"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*(\d+)")

# fgets() into a 1024-byte buffer with size - 1 reads at most this many chars.
_LINE_LIMIT = 1022


def warn(message: str) -> None:
    """Write a warning line to standard error."""
    print(message, file=sys.stderr)


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` (1000 or 1024) and append the SI/IEC prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None


def read_uint(path: str) -> int | None:
    """Read the leading unsigned integer of a file, or None if there is none."""
    text = _read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None


def read_first_line(path: str) -> str | None:
    """Return the first line of a file without its newline, or None if empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line or None