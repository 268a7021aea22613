"""Command line entry point: build the status line and publish it."""

from __future__ import annotations

import os
import signal
import socket
import struct
import sys
import threading
import time
from collections.abc import Iterable

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, StatusItem, default_items
from .util import die, warn

_WM_NAME = 39
_STRING = 31
_CHANGE_PROPERTY = 18
_COOKIE_NAME = b"MIT-MAGIC-COOKIE-1"


def _usage() -> None:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "barstatus"
    die(f"usage: {prog} [-s]")


def parse_args(argv: list[str] | None = None) -> bool:
    """Return True when ``-s`` asks for output on standard output.

    Any other option or any operand exits with a usage message.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    use_stdout = False
    index = 0
    while index < len(args) and args[index].startswith("-") and len(args[index]) > 1:
        arg = args[index]
        index += 1
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "s":
                use_stdout = True
            else:
                _usage()
    if index < len(args):
        _usage()
    return use_stdout


def build_status(
    items: Iterable[StatusItem],
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Concatenate rendered items, truncating to fewer than ``maxlen`` bytes."""
    parts: list[bytes] = []
    used = 0
    for item in items:
        piece = item.render(unknown).encode()
        room = maxlen - used
        if len(piece) >= room:
            parts.append(piece[: max(room - 1, 0)])
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        used += len(piece)
    return b"".join(parts).decode(errors="ignore")


def _pad(data: bytes) -> bytes:
    return data + b"\0" * (-len(data) % 4)


def _parse_display(display: str) -> tuple[str, int]:
    host, sep, rest = display.rpartition(":")
    if not sep:
        raise OSError(f"invalid display {display!r}")
    try:
        return host, int(rest.split(".", 1)[0])
    except ValueError:
        raise OSError(f"invalid display {display!r}") from None


def _counted(data: bytes, pos: int) -> tuple[bytes, int]:
    (size,) = struct.unpack_from(">H", data, pos)
    start = pos + 2
    if start + size > len(data):
        raise struct.error("truncated entry")
    return data[start:start + size], start + size


def _auth(number: int) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.expanduser("~/.Xauthority")
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return b"", b""
    wanted = str(number).encode()
    pos = 0
    try:
        while pos + 2 <= len(data):
            pos += 2  # family
            _address, pos = _counted(data, pos)
            display, pos = _counted(data, pos)
            name, pos = _counted(data, pos)
            cookie, pos = _counted(data, pos)
            if name == _COOKIE_NAME and display in (wanted, b""):
                return name, cookie
    except struct.error:
        pass
    return b"", b""


class _RootWindow:
    """Minimal X11 connection that sets the name of the first root window."""

    def __init__(self, display: str | None = None) -> None:
        display = os.environ.get("DISPLAY") if display is None else display
        if not display:
            raise OSError("no display")
        host, number = _parse_display(display)
        if host in ("", "unix"):
            self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            address: object = f"/tmp/.X11-unix/X{number}"
        else:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            address = (host, 6000 + number)
        try:
            self._sock.connect(address)
            self._root = self._handshake(number)
        except (OSError, struct.error, IndexError) as exc:
            self._sock.close()
            raise OSError(str(exc)) from exc

    def _recv_exact(self, size: int) -> bytes:
        chunks = []
        while size:
            chunk = self._sock.recv(size)
            if not chunk:
                raise OSError("connection closed by X server")
            chunks.append(chunk)
            size -= len(chunk)
        return b"".join(chunks)

    def _handshake(self, number: int) -> int:
        name, cookie = _auth(number)
        request = struct.pack("<BxHHHH2x", ord("l"), 11, 0, len(name), len(cookie))
        self._sock.sendall(request + _pad(name) + _pad(cookie))
        header = self._recv_exact(8)
        (extra,) = struct.unpack_from("<H", header, 6)
        body = self._recv_exact(extra * 4)
        if header[0] != 1:
            raise OSError("X server refused the connection")
        (vendor_len,) = struct.unpack_from("<H", body, 16)
        num_formats = body[21]
        offset = 32 + vendor_len + (-vendor_len % 4) + 8 * num_formats
        (root,) = struct.unpack_from("<I", body, offset)
        return root

    def set_name(self, name: str | None) -> None:
        data = name.encode() if name else b""
        padded = _pad(data)
        request = struct.pack(
            "<BBHIIIB3xI",
            _CHANGE_PROPERTY,
            0,
            6 + len(padded) // 4,
            self._root,
            _WM_NAME,
            _STRING,
            8,
            len(data),
        )
        self._sock.sendall(request + padded)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> _RootWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Update the status line every interval until interrupted."""
    use_stdout = parse_args(argv)
    stop = threading.Event()

    def _terminate(signo: int, frame: object) -> None:
        stop.set()

    previous = {
        signo: signal.signal(signo, _terminate)
        for signo in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        root = None
        if not use_stdout:
            try:
                root = _RootWindow()
            except OSError:
                die("XOpenDisplay: Failed to open display")

        items = default_items()
        while not stop.is_set():
            start = time.monotonic()
            status = build_status(items, UNKNOWN_STR, MAXLEN)
            if root is None:
                try:
                    print(status, flush=True)
                except OSError:
                    die("puts:")
            else:
                try:
                    root.set_name(status)
                except OSError:
                    die("XStoreName: Allocation failed")

            if not stop.is_set():
                wait = INTERVAL / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    stop.wait(wait)

        if root is not None:
            try:
                root.set_name(None)
            finally:
                root.close()
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)
    return 0