"""Master volume read from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn

_SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_IOC_READ = 2


def _ior(kind: str, number: int, size: int = 4) -> int:
    return (_IOC_READ << 30) | (size << 16) | (ord(kind) << 8) | number


_SOUND_MIXER_READ_DEVMASK = _ior("M", 0xFE)


def _read_int(fd: int, request: int) -> int:
    return struct.unpack("i", fcntl.ioctl(fd, request, bytes(4)))[0]


def vol_perc(card: str | os.PathLike[str]) -> str | None:
    """Volume of the master control of a mixer device, 0 to 100."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{os.fspath(card)}':")
        return None
    level = None
    try:
        try:
            devmask = _read_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        for index, name in enumerate(_SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    level = _read_int(fd, _ior("M", index))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({index})':")
                    return None
    finally:
        os.close(fd)
    if level is None:
        return None
    return str(level & 0xFF)