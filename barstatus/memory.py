"""Memory and swap usage read from a meminfo file."""

from __future__ import annotations

import os
from pathlib import Path

from .util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each meminfo field name to its value in kB."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        words = rest.split()
        if not words:
            continue
        try:
            fields[name.strip()] = int(words[0])
        except ValueError:
            continue
    return fields


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _fields(path: str | os.PathLike[str], *names: str) -> tuple[int, ...] | None:
    try:
        text = Path(path).read_text()
    except OSError:
        warn(f"fopen '{os.fspath(path)}':")
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Available memory, human readable."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Memory in use as a whole percentage, excluding buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Total memory, human readable."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Used memory excluding buffers and cache, human readable."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human(max(total - free - buffers - cached, 0) * 1024, 1024)


def swap_free(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Free swap, human readable."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Swap in use as a whole percentage; None when there is no swap."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Total swap, human readable."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(path: str | os.PathLike[str] = MEMINFO) -> str | None:
    """Used swap excluding swap cache, human readable."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human(max(total - free - cached, 0) * 1024, 1024)