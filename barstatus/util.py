"""Shared helpers: human-readable sizes, diagnostics and small file readers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn

_PREFIXES = {
    1000: ("b", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("bi", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}


def _program_name() -> str | None:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return None


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` and append the matching unit prefix.

    Raises ValueError when ``base`` is neither 1000 nor 1024.
    """
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.0f}{prefixes[index]}"


def warn(message: str) -> None:
    """Print a diagnostic to standard error.

    The program name is prepended unless the message is a usage line. A
    message ending in ':' is followed by the exception being handled, if any.
    """
    parts = []
    prog = _program_name()
    if prog and not message.startswith("usage"):
        parts.append(f"{prog}: ")
    parts.append(message)
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        if exc is not None:
            detail = getattr(exc, "strerror", None) or str(exc)
            parts.append(f" {detail}")
    print("".join(parts), file=sys.stderr)


def die(message: str) -> NoReturn:
    """Print a diagnostic and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def read_token(path: str | os.PathLike[str]) -> str | None:
    """Return the first whitespace-separated word of a file, or None."""
    try:
        text = Path(path).read_text(errors="replace")
    except OSError:
        warn(f"fopen '{os.fspath(path)}':")
        return None
    words = text.split()
    return words[0] if words else None


def read_int(path: str | os.PathLike[str]) -> int | None:
    """Return the integer at the start of a file, or None."""
    token = read_token(path)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None