"""System information readers: clock, disks, network addresses, users."""

from __future__ import annotations

import os
import platform
import pwd
import socket
import time

import psutil

from .util import fmt_human, read_int, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
_BUFSIZE = 1024

_UPTIME_CLOCK = getattr(
    time,
    "CLOCK_BOOTTIME",
    getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC),
)


def datetime(fmt: str) -> str | None:
    """Current local time formatted with strftime."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str | os.PathLike[str]) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{os.fspath(path)}':")
        return None


def disk_free(path: str | os.PathLike[str]) -> str | None:
    """Space available to unprivileged users, human readable."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str | os.PathLike[str]) -> str | None:
    """Disk usage as a whole percentage."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1.0 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str | os.PathLike[str]) -> str | None:
    """Total size of the file system, human readable."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str | os.PathLike[str]) -> str | None:
    """Used space of the file system, human readable."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(path: str | os.PathLike[str] = ENTROPY_AVAIL) -> str | None:
    """Available kernel entropy."""
    value = read_int(path)
    return None if value is None else str(value)


def hostname() -> str | None:
    """Name of this host."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def _address(interface: str, family: int) -> str | None:
    try:
        table = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for addr in table.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """First IPv4 address of an interface."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """First IPv6 address of an interface."""
    return _address(interface, socket.AF_INET6)


def kernel_release() -> str | None:
    """Kernel release, as printed by ``uname -r``."""
    release = platform.release()
    if not release:
        warn("uname:")
        return None
    return release


def load_avg() -> str | None:
    """One, five and fifteen minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str | os.PathLike[str]) -> str | None:
    """Number of entries in a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError:
        warn(f"opendir '{os.fspath(path)}':")
        return None
    return str(count)


def temp(file: str | os.PathLike[str]) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = read_int(file)
    if value is None:
        return None
    whole = abs(value) // 1000
    return str(whole if value >= 0 else -whole)


def format_uptime(seconds: float) -> str:
    """Render a duration as hours and minutes."""
    total = int(seconds)
    return f"{total // 3600}h {total % 3600 // 60}m"


def uptime() -> str | None:
    """Time since boot."""
    try:
        seconds = time.clock_gettime(_UPTIME_CLOCK)
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    return format_uptime(seconds)


def gid() -> str:
    """Group id of the current process."""
    return str(os.getgid())


def uid() -> str:
    """Effective user id of the current process."""
    return str(os.geteuid())


def username() -> str | None:
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None