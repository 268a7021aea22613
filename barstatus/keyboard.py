"""Keyboard layout names and lock indicator formatting."""

from __future__ import annotations

import re

# Symbols from the xkb rules configuration that are not layouts.
_INVALID = ("evdev", "inet", "pc", "base")


def valid_layout_or_variant(sym: str) -> bool:
    """True unless the symbol starts with a non-layout rules name."""
    return not sym.startswith(_INVALID)


def get_layout(symbols: str, group: int) -> str | None:
    """Layout for the given group from an xkb symbols string."""
    layout = None
    found = 0
    for token in filter(None, re.split(r"[+:]", symbols)):
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            # additional layout groups such as :2, :3
            continue
        layout = token
        found += 1
    return layout


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps/num lock state from a format such as ``c?n?``.

    Each 'c' or 'n' (any case) selects caps or num lock. Followed by '?', the
    letter appears as written only while the lock is on; otherwise it always
    appears, upper case when on and lower case when off. Only the first four
    characters of the format are used.
    """
    fmt = fmt[:4]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        toggle = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        is_set = bool(led_mask & (1 << (key == "n")))
        if toggle:
            out.append(key.upper() if is_set else key)
        elif is_set:
            out.append(char)
    return "".join(out)