"""Status bar layout: which readers run, in what order, with which format."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .battery import battery_perc, battery_state
from .command import run_command
from .cpu import cpu_perc
from .memory import ram_perc
from .netspeeds import netspeed_rx, netspeed_tx
from .system import datetime

# Interval between updates, in milliseconds.
INTERVAL = 1000

# Text shown when a reader cannot produce a value.
UNKNOWN_STR = "n/a"

# Maximum length of the status line, in bytes.
MAXLEN = 2048

_VOLUME_COMMAND = (
    "pactl get-sink-volume @DEFAULT_SINK@ | "
    "awk -F'/' '/Volume/ {gsub(/ /,\"\"); print $2; exit}'"
)


@dataclass(frozen=True)
class StatusItem:
    """One reader of the status line and the printf-style format around it."""

    func: Callable[..., str | None]
    fmt: str
    arg: str | None = None

    def render(self, unknown: str = UNKNOWN_STR) -> str:
        """Run the reader and format its value, or ``unknown`` if it has none."""
        value = self.func() if self.arg is None else self.func(self.arg)
        if value is None:
            value = unknown
        return self.fmt % value


def default_items() -> list[StatusItem]:
    """The status line shown by default."""
    return [
        StatusItem(run_command, " %3s|", _VOLUME_COMMAND),
        StatusItem(cpu_perc, "[ %s%%]|"),
        StatusItem(ram_perc, "[ %s%%]|"),
        StatusItem(battery_state, "[%s", "BAT0"),
        StatusItem(battery_perc, "%s%%]|", "BAT0"),
        StatusItem(datetime, "[%s]|", "%x|%I:%M"),
        StatusItem(netspeed_rx, "[%5s/", "wlp1s0"),
        StatusItem(netspeed_tx, "%5s] ", "wlp1s0"),
    ]