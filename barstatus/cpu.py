"""CPU usage and frequency."""

from __future__ import annotations

import os
from pathlib import Path

from .util import fmt_human, read_int, warn

CPUFREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"

# Busy fields among: user nice system idle iowait irq softirq
_BUSY = (0, 1, 2, 5, 6)


class CpuSampler:
    """Computes CPU usage between consecutive reads of a stat file."""

    def __init__(self, stat_path: str | os.PathLike[str] = "/proc/stat") -> None:
        self.stat_path = stat_path
        self._previous: tuple[float, ...] | None = None

    def _read(self) -> tuple[float, ...] | None:
        try:
            text = Path(self.stat_path).read_text()
        except OSError:
            warn(f"fopen '{os.fspath(self.stat_path)}':")
            return None
        words = text.split()
        try:
            return tuple(float(word) for word in words[1:8]) if len(words) >= 8 else None
        except ValueError:
            return None

    def sample(self) -> str | None:
        """Usage percentage since the last call; None on the first call."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous is None or previous[0] == 0:
            return None
        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_default_sampler = CpuSampler()


def cpu_perc() -> str | None:
    """CPU usage percentage since the previous call."""
    return _default_sampler.sample()


def cpu_freq(path: str | os.PathLike[str] = CPUFREQ) -> str | None:
    """Current frequency of the first CPU, human readable in Hz."""
    freq = read_int(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)