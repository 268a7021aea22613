"""Wireless link quality and connection state."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct
from pathlib import Path

from .battery import Notifier, notify
from .util import warn

NET_ROOT = "/sys/class/net"
WIRELESS = "/proc/net/wireless"

NO_WIFI = "❌"
CONNECTED = "🛜"

_MAX_QUALITY = 70
_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 32
_REPLACE_ID = "15987"

_LINK_RE = re.compile(r"\s*[-+]?\d+\s+([-+]?\d+)")

_DISCONNECTED_NOTICE = [
    "dunstify", "Wifi Disconnected", "Conenction Lost",
    "-u", "normal", "-t", "1500", "-r", _REPLACE_ID,
    "-i", "~/Pictures/icons/no-wifi.png",
]
_CONNECTED_NOTICE = [
    "sh", "-c",
    "nmcli connection show --active | grep -vi name | awk '{print$1}' | "
    "xargs -I{} dunstify 'Wifi Connected' 'Wifi Name:- {}' -u normal -t 1500 "
    f"-r {_REPLACE_ID} -i ~/Pictures/icons/wifi.png",
]


def parse_wireless(text: str, interface: str) -> int | None:
    """Link quality of an interface from the text of a wireless status file."""
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _LINK_RE.match(line[start + len(interface) + 2:])
    return int(match.group(1)) if match else None


class WifiMonitor:
    """Reports link quality and notifies when the connection comes or goes."""

    def __init__(
        self,
        notifier: Notifier = notify,
        net_root: str | os.PathLike[str] = NET_ROOT,
        wireless_path: str | os.PathLike[str] = WIRELESS,
    ) -> None:
        self.notifier = notifier
        self.net_root = Path(net_root)
        self.wireless_path = Path(wireless_path)
        self._down_sent = False
        self._up_sent = False

    def perc(self, interface: str) -> str | None:
        """Link quality in percent; empty while the interface is down."""
        operstate = self.net_root / interface / "operstate"
        try:
            with open(operstate, errors="replace") as handle:
                status = handle.readline(4)
        except OSError:
            warn(f"fopen '{operstate}':")
            return None

        if status != "up\n":
            if not self._down_sent:
                self.notifier(_DISCONNECTED_NOTICE)
                self._down_sent = True
                self._up_sent = False
            return ""
        if not self._up_sent:
            self.notifier(_CONNECTED_NOTICE)
            self._up_sent = True
            self._down_sent = False

        try:
            text = self.wireless_path.read_text(errors="replace")
        except OSError:
            warn(f"fopen '{self.wireless_path}':")
            return None
        quality = parse_wireless(text, interface)
        if quality is None:
            return None
        return str(int(quality / _MAX_QUALITY * 100))


_monitor = WifiMonitor()


def wifi_perc(interface: str) -> str | None:
    """Link quality in percent of a wireless interface."""
    return _monitor.perc(interface)


def wifi_essid(interface: str) -> str:
    """Connected glyph if the interface reports an ESSID, else the no-wifi glyph."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        return NO_WIFI
    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    request = struct.pack(
        "16sPHH", name, essid.buffer_info()[0], len(essid), 0
    ).ljust(_IWREQ_SIZE, b"\0")
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return NO_WIFI
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return NO_WIFI
    if not essid.tobytes().split(b"\0", 1)[0]:
        return NO_WIFI
    return CONNECTED