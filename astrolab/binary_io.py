"""Reading fixed-size values from binary streams, optionally byte swapped."""

from __future__ import annotations

import struct
import sys
from typing import BinaryIO

_NATIVE = "<" if sys.byteorder == "little" else ">"
_SWAPPED = ">" if sys.byteorder == "little" else "<"
_LONG_CODE = "q" if struct.calcsize("@l") == 8 else "i"


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _read_value(stream: BinaryIO, code: str, swap: bool):
    fmt = (_SWAPPED if swap else _NATIVE) + code
    return struct.unpack(fmt, _read_exact(stream, struct.calcsize(fmt)))[0]


def read_string(stream: BinaryIO, n: int) -> str:
    """Read ``n`` bytes and return them as text, one character per byte."""
    return _read_exact(stream, n).decode("latin-1")


def read_chars(stream: BinaryIO, n: int) -> bytes:
    """Read exactly ``n`` raw bytes."""
    return _read_exact(stream, n)


def read_int(stream: BinaryIO, swap: bool) -> int:
    """Read a signed 32-bit integer."""
    return _read_value(stream, "i", swap)


def read_uint(stream: BinaryIO, swap: bool) -> int:
    """Read an unsigned 32-bit integer."""
    return _read_value(stream, "I", swap)


def read_long(stream: BinaryIO, swap: bool) -> int:
    """Read a signed integer of the platform's long width."""
    return _read_value(stream, _LONG_CODE, swap)


def read_long_long(stream: BinaryIO, swap: bool) -> int:
    """Read a signed 64-bit integer."""
    return _read_value(stream, "q", swap)


def read_double(stream: BinaryIO, swap: bool) -> float:
    """Read an IEEE double."""
    return _read_value(stream, "d", swap)


def read_float(stream: BinaryIO, swap: bool) -> float:
    """Read an IEEE single-precision float."""
    return _read_value(stream, "f", swap)