"""Network throughput computed from interface byte counters."""

from __future__ import annotations

import os
from pathlib import Path

from .util import fmt_human, read_int

NET_ROOT = "/sys/class/net"
DEFAULT_INTERVAL_MS = 1000


class NetSpeedMeter:
    """Bytes per second between consecutive reads of one counter direction."""

    def __init__(
        self,
        direction: str,
        interval: int = DEFAULT_INTERVAL_MS,
        root: str | os.PathLike[str] = NET_ROOT,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = Path(root)
        self._bytes = 0

    def read(self, interface: str) -> str | None:
        """Speed since the previous read; None until two readings exist."""
        path = self.root / interface / "statistics" / f"{self.direction}_bytes"
        old = self._bytes
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if old == 0:
            return None
        delta = max(current - old, 0)
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeedMeter("rx")
_tx = NetSpeedMeter("tx")


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of an interface."""
    return _rx.read(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of an interface."""
    return _tx.read(interface)