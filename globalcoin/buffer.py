"""Sequential little-endian binary reading and writing with variable-length integers."""

from __future__ import annotations

from .hashing import HASH_SIZE, Hash

_VAR_U16 = 253
_VAR_U32 = 254
_VAR_U64 = 255
_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


class BufferReaderError(Exception):
    """Base class for errors raised while reading a buffer."""


class EndOfBufferError(BufferReaderError):
    """Raised when a read goes past the end of the buffer."""

    def __init__(self, message: str = "End of buffer reached") -> None:
        super().__init__(message)


class ValueExceedsU32Error(BufferReaderError):
    """Raised when a variable-length u32 carries a 64-bit marker."""

    def __init__(self, message: str = "Value found exceeds u32") -> None:
        super().__init__(message)


class BufferReader:
    """Reads values sequentially from a byte string."""

    def __init__(self, content: bytes) -> None:
        self._content = bytes(content)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of bytes left to read."""
        return len(self._content) - self._position

    def _take(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must not be negative")
        end = self._position + length
        if end > len(self._content):
            raise EndOfBufferError()
        chunk = self._content[self._position:end]
        self._position = end
        return chunk

    def _read_int(self, size: int) -> int:
        return int.from_bytes(self._take(size), "little")

    def read_u8(self) -> int:
        return self._read_int(1)

    def read_u16(self) -> int:
        return self._read_int(2)

    def read_u32(self) -> int:
        return self._read_int(4)

    def read_u64(self) -> int:
        return self._read_int(8)

    def read_var_u64(self) -> int:
        marker = self.read_u8()
        if marker < _VAR_U16:
            return marker
        if marker == _VAR_U16:
            return self.read_u16()
        if marker == _VAR_U32:
            return self.read_u32()
        return self.read_u64()

    def read_var_u32(self) -> int:
        marker = self.read_u8()
        if marker < _VAR_U16:
            return marker
        if marker == _VAR_U16:
            return self.read_u16()
        if marker == _VAR_U32:
            return self.read_u32()
        raise ValueExceedsU32Error()

    def read_bytes(self, length: int) -> bytes:
        return self._take(length)

    def read_var_bytes(self) -> bytes:
        """Read bytes preceded by a variable-length u32 size."""
        return self._take(self.read_var_u32())

    def read_hash(self) -> Hash:
        return Hash(self._take(HASH_SIZE))

    def __repr__(self) -> str:
        return (
            f"BufferReader(counter={self._position}, "
            f"content_length={len(self._content)})"
        )


class BufferWriter:
    """Accumulates little-endian encoded values."""

    def __init__(self) -> None:
        self._content = bytearray()

    def _write_int(self, value: int, size: int) -> None:
        if not 0 <= value < 1 << (8 * size):
            raise ValueError(f"{value} does not fit in u{8 * size}")
        self._content += value.to_bytes(size, "little")

    def write_u8(self, value: int) -> None:
        self._write_int(value, 1)

    def write_u16(self, value: int) -> None:
        self._write_int(value, 2)

    def write_u32(self, value: int) -> None:
        self._write_int(value, 4)

    def write_u64(self, value: int) -> None:
        self._write_int(value, 8)

    def write_var_u64(self, value: int) -> None:
        if not 0 <= value <= _U64_MAX:
            raise ValueError(f"{value} does not fit in u64")
        if value < _VAR_U16:
            self.write_u8(value)
        elif value <= _U16_MAX:
            self.write_u8(_VAR_U16)
            self.write_u16(value)
        elif value <= _U32_MAX:
            self.write_u8(_VAR_U32)
            self.write_u32(value)
        else:
            self.write_u8(_VAR_U64)
            self.write_u64(value)

    def write_var_u32(self, value: int) -> None:
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"{value} does not fit in u32")
        self.write_var_u64(value)

    def write_bytes(self, data: bytes) -> None:
        self._content += data

    def write_var_bytes(self, data: bytes) -> None:
        """Write bytes preceded by their length as a variable-length u64."""
        self.write_var_u64(len(data))
        self._content += data

    def write_hash(self, h: Hash) -> None:
        self._content += h.data

    def getvalue(self) -> bytes:
        """Return a copy of everything written so far."""
        return bytes(self._content)

    def __len__(self) -> int:
        return len(self._content)