"""
Byte sources and sinks for the executor.

The executor only knows the two small interfaces below; the console-backed
implementations are for the command-line host, the in-memory ones for tests
and for running programs as plain functions.
"""

import sys
from typing import BinaryIO, List, Optional, Protocol


class ByteSource(Protocol):
    def read_byte(self) -> int:
        ...


class ByteSink(Protocol):
    def write_byte(self, value: int) -> None:
        ...


class BytesSource:
    """Serves bytes from a buffer, then eof_value forever."""

    def __init__(self, data: bytes = b"", eof_value: int = 0):
        self.data = bytes(data)
        self.eof_value = eof_value
        self.index = 0

    def read_byte(self) -> int:
        if self.index >= len(self.data):
            return self.eof_value
        value = self.data[self.index]
        self.index += 1
        return value


class BufferSink:
    """Collects written bytes in memory."""

    def __init__(self):
        self.output: List[int] = []

    def write_byte(self, value: int) -> None:
        self.output.append(value & 0xFF)

    def getvalue(self) -> bytes:
        return bytes(self.output)

    def text(self) -> str:
        return self.getvalue().decode('latin-1')


class ConsoleSource:
    """Blocking one-byte reads from stdin (or any binary stream)."""

    def __init__(self, stream: Optional[BinaryIO] = None, eof_value: int = 0):
        self.stream = stream if stream is not None else sys.stdin.buffer
        self.eof_value = eof_value

    def read_byte(self) -> int:
        chunk = self.stream.read(1)
        if not chunk:
            return self.eof_value
        return chunk[0]


class ConsoleSink:
    """Writes each byte to stdout (or any binary stream) and flushes it."""

    def __init__(self, stream: Optional[BinaryIO] = None):
        self.stream = stream if stream is not None else sys.stdout.buffer

    def write_byte(self, value: int) -> None:
        self.stream.write(bytes([value & 0xFF]))
        self.stream.flush()
