"""Output of a shell command as a status value."""

from __future__ import annotations

import subprocess

from .util import warn

_LINE_MAX = 1022
_VOLUME_COMMAND = "amixer sget Master | awk -F\"[][]\" '/%/ { print $2 }' | head -n1"
_VOLUME_HOOK = "exec bash ~/scripts/volnotify"

_last_volume = ""


def _volume_changed(cmd: str, line: str) -> None:
    global _last_volume
    if cmd != _VOLUME_COMMAND or line == _last_volume:
        return
    try:
        subprocess.run(_VOLUME_HOOK, shell=True, stdout=subprocess.DEVNULL, check=False)
    except OSError:
        warn(f"popen '{_VOLUME_HOOK}':")
    _last_volume = line


def run_command(cmd: str) -> str | None:
    """First line printed by a shell command, or None if it printed nothing."""
    try:
        proc = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, check=False)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    output = proc.stdout.decode(errors="replace")
    if not output:
        return None
    line = output[:_LINE_MAX].split("\n", 1)[0]
    _volume_changed(cmd, line)
    return line or None