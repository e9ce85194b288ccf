"""Keyboard helpers: XKB layout selection and lock indicator formatting."""

from __future__ import annotations

import re

_INVALID = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:_]")
_FMT_LIMIT = 4


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether an XKB symbols token names a layout or variant."""
    return not sym.startswith(_INVALID)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout of keyboard group ``group`` from an XKB symbols name."""
    layout = None
    found = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        found += 1
    return layout


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock states as described by ``fmt``.

    A letter followed by '?' appears, with its case kept, only while its
    indicator is on; otherwise it always appears, upper case when on.
    """
    fmt = fmt[:_FMT_LIMIT]
    out = []
    for position, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        toggle_case = position + 1 >= len(fmt) or fmt[position + 1] != "?"
        is_set = bool(led_mask & (1 << (key == "n")))
        if toggle_case:
            out.append(key.upper() if is_set else key)
        elif is_set:
            out.append(char)
    return "".join(out)