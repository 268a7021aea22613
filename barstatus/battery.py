"""Battery charge, state and remaining time, with desktop notifications."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from .util import read_int, read_token, warn

POWER_SUPPLY = "/sys/class/power_supply"

_PATH_MAX = 4096
_STATE_LEN = 12
_REPLACE_ID = "369987"
_ICONS = "~/Pictures/icons"

# Level glyphs indexed by charge / 11 while discharging, or cycled while charging.
_LEVEL_SYMBOLS = ("",) * 9
_LOW_SYMBOL = "ﴐ "
_FULL_SYMBOL = ""

Notifier = Callable[[Sequence[str]], object]


def notify(args: Sequence[str]) -> bool:
    """Run a notification command and wait for it; False if it cannot start."""
    argv = [os.path.expanduser(arg) if arg.startswith("~") else arg for arg in args]
    try:
        subprocess.run(
            argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        warn(f"popen '{' '.join(args)}':")
        return False
    return True


def _dunstify(*text: str, urgency: str, timeout: int, icon: str) -> list[str]:
    return [
        "dunstify",
        *text,
        "-u",
        urgency,
        "-t",
        str(timeout),
        "-r",
        _REPLACE_ID,
        "-i",
        f"{_ICONS}/{icon}",
    ]


class BatteryMonitor:
    """Reads a power-supply directory and notifies on notable changes."""

    def __init__(
        self,
        root: str | os.PathLike[str] = POWER_SUPPLY,
        notifier: Notifier = notify,
    ) -> None:
        self.root = Path(root)
        self.notifier = notifier
        self._low_sent = False
        self._full_sent = False
        self._error_sent = False
        self._charging = False
        self._last_level = 0
        self._tick = 0

    def _path(self, bat: str, name: str) -> Path | None:
        path = self.root / bat / name
        if len(os.fspath(path)) >= _PATH_MAX:
            warn("vsnprintf: Output truncated")
            return None
        return path

    def _pick(self, bat: str, first: str, second: str) -> Path | None:
        for name in (first, second):
            path = self._path(bat, name)
            if path is not None and os.access(path, os.R_OK):
                return path
        return None

    def _status(self, bat: str) -> str | None:
        path = self._path(bat, "status")
        if path is None:
            return None
        token = read_token(path)
        return None if token is None else token[:_STATE_LEN]

    def perc(self, bat: str) -> str | None:
        """Charge level in percent."""
        path = self._path(bat, "capacity")
        if path is None:
            return None
        value = read_int(path)
        return None if value is None else str(value)

    def state(self, bat: str) -> str:
        """Glyph for the charging state; notifies on low, full, charging, error."""
        perc = self.perc(bat)
        level = int(perc) if perc is not None else 0
        tick = self._tick
        if level > 20:
            discharging = _LEVEL_SYMBOLS[max(0, min(level // 11, len(_LEVEL_SYMBOLS) - 1))]
        else:
            discharging = _LOW_SYMBOL
        symbols = {
            "Charging": _LEVEL_SYMBOLS[tick % len(_LEVEL_SYMBOLS)],
            "Discharging": discharging,
            "Full": _FULL_SYMBOL,
        }

        if level < 20 and not self._low_sent:
            self.notifier(
                _dunstify("Low Battery", "Charge Now", urgency="critical",
                          timeout=1500, icon="low-battery.png")
            )
            self._low_sent = True
            self._last_level = level
        elif level < self._last_level:
            self._low_sent = False
            self._full_sent = False

        if level == 100 and not self._full_sent:
            self.notifier(
                _dunstify("Battery FULL", urgency="low", timeout=1500,
                          icon="full-battery.png")
            )
            self._full_sent = True
            self._last_level = level

        self._tick += 2

        if self._path(bat, "status") is None:
            return "@@@"
        status = self._status(bat)
        if status is None:
            return "--+--"

        if status == "Charging":
            if not self._charging:
                self.notifier(
                    _dunstify("Charging", urgency="low", timeout=1500,
                              icon="charging-battery.png")
                )
                self._charging = True
        else:
            self._charging = False

        symbol = symbols.get(status)
        if symbol is None:
            if not self._error_sent:
                self.notifier(
                    _dunstify("Battery Error", "Check Now", urgency="critical",
                              timeout=5500, icon="error-battery.png")
                )
                self._error_sent = True
            return ""
        return symbol

    def remaining(self, bat: str) -> str | None:
        """Time left while discharging as 'Hh Mm'; empty otherwise."""
        status = self._status(bat)
        if status is None:
            return None
        charge_path = self._pick(bat, "charge_now", "energy_now")
        if charge_path is None:
            return None
        charge = read_int(charge_path)
        if charge is None:
            return None
        if status != "Discharging":
            return ""
        current_path = self._pick(bat, "current_now", "power_now")
        if current_path is None:
            return None
        current = read_int(current_path)
        if not current:
            return None
        timeleft = charge / current
        hours = int(timeleft)
        minutes = int((timeleft - hours) * 60)
        return f"{hours}h {minutes}m"


_monitor = BatteryMonitor()


def battery_perc(bat: str) -> str | None:
    """Charge level in percent of the named battery."""
    return _monitor.perc(bat)


def battery_state(bat: str) -> str:
    """Charging-state glyph of the named battery."""
    return _monitor.state(bat)


def battery_remaining(bat: str) -> str | None:
    """Remaining discharge time of the named battery."""
    return _monitor.remaining(bat)