"""Little-endian binary encoder and decoder working over byte streams."""

from __future__ import annotations

import struct
from typing import BinaryIO

__all__ = ["BinEnc", "BinDec"]

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class BinEnc:
    """Writes fixed-size integers, floats, strings and raw blocks to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _raw_write(self, data: bytes) -> None:
        self._stream.write(data)

    def _write_uint(self, val: int, size: int) -> None:
        mask = (1 << (8 * size)) - 1
        self._raw_write((int(val) & mask).to_bytes(size, "little"))

    def write_bool(self, val: bool) -> None:
        """Write a Boolean as one byte (0 or 1)."""
        self.write_8(1 if val else 0)

    def write_8(self, val: int) -> None:
        """Write the low 8 bits of ``val``."""
        self._write_uint(val, 1)

    def write_16(self, val: int) -> None:
        """Write the low 16 bits of ``val``."""
        self._write_uint(val, 2)

    def write_32(self, val: int) -> None:
        """Write the low 32 bits of ``val``."""
        self._write_uint(val, 4)

    def write_64(self, val: int) -> None:
        """Write the low 64 bits of ``val``."""
        self._write_uint(val, 8)

    def write_float(self, val: float) -> None:
        """Write a single precision float."""
        self._raw_write(struct.pack("<f", val))

    def write_double(self, val: float) -> None:
        """Write a double precision float."""
        self._raw_write(struct.pack("<d", val))

    def write_string(self, val: str) -> None:
        """Write a string as a 64-bit byte count followed by its bytes."""
        data = val.encode(_ENCODING, _ERRORS)
        self.write_64(len(data))
        self._raw_write(data)

    def write_block(self, block: bytes) -> None:
        """Write raw bytes."""
        self._raw_write(bytes(block))

    def write_signature(self, signature: str) -> None:
        """Write a signature string without a length prefix."""
        self._raw_write(signature.encode(_ENCODING, _ERRORS))


class BinDec:
    """Reads values written by :class:`BinEnc` from a binary stream.

    A short read raises :class:`EOFError`.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _raw_read(self, n: int) -> bytes:
        data = self._stream.read(n) if n else b""
        if data is None or len(data) < n:
            raise EOFError(f"expected {n} bytes, got {0 if data is None else len(data)}")
        return data

    def _read_uint(self, size: int) -> int:
        return int.from_bytes(self._raw_read(size), "little")

    def read_bool(self) -> bool:
        """Read a one-byte Boolean."""
        return bool(self.read_8())

    def read_8(self) -> int:
        """Read an unsigned 8-bit integer."""
        return self._read_uint(1)

    def read_16(self) -> int:
        """Read an unsigned 16-bit integer."""
        return self._read_uint(2)

    def read_32(self) -> int:
        """Read an unsigned 32-bit integer."""
        return self._read_uint(4)

    def read_64(self) -> int:
        """Read an unsigned 64-bit integer."""
        return self._read_uint(8)

    def read_float(self) -> float:
        """Read a single precision float."""
        return struct.unpack("<f", self._raw_read(4))[0]

    def read_double(self) -> float:
        """Read a double precision float."""
        return struct.unpack("<d", self._raw_read(8))[0]

    def read_string(self) -> str:
        """Read a length-prefixed string; the text ends at the first NUL byte."""
        length = self.read_64()
        if length == 0:
            return ""
        data = self._raw_read(length)
        return data.split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)

    def read_block(self, n: int) -> bytes:
        """Read ``n`` raw bytes."""
        return self._raw_read(n)

    def read_signature(self, signature: str) -> bool:
        """Read as many bytes as ``signature`` holds and report whether they match."""
        expected = signature.encode(_ENCODING, _ERRORS)
        data = self._raw_read(len(expected))
        return data.split(b"\0", 1)[0] == expected