"""
Cursor and line/column bookkeeping for the scanner.

line_at and column_at define positions from scratch; PositionTracker
maintains the same values incrementally, touching only the bytes consumed
by each advance.

Author: xwest
"""

from typing import Union

from .tokens import SourceLocation

Buffer = Union[bytes, bytearray, memoryview]

NEWLINE = 0x0A


def line_at(buffer: Buffer, offset: int) -> int:
    """1 + number of newlines in buffer[0:offset]."""
    return bytes(buffer[:offset]).count(b"\n") + 1


def column_at(buffer: Buffer, offset: int) -> int:
    """Distance from offset back to the last newline before it (1-based)."""
    last_newline = bytes(buffer[:offset]).rfind(b"\n")
    if last_newline < 0:
        return offset + 1
    return offset - last_newline


class PositionTracker:
    """
    Forward-only cursor over a byte buffer.

    Invariant: line and column always equal line_at(buffer, offset) and
    column_at(buffer, offset).
    """

    def __init__(self, buffer: Buffer):
        self.buffer = buffer
        self.offset = 0
        self.line = 1
        self.column = 1

    def reset(self):
        """Rewind to the start of the buffer."""
        self.offset = 0
        self.line = 1
        self.column = 1

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.buffer)

    @property
    def remaining(self) -> int:
        return len(self.buffer) - self.offset

    def advance(self, count: int):
        """Consume count bytes and update line/column from the consumed slice."""
        if count < 0:
            raise ValueError(f"cursor cannot move backwards (count={count})")
        if count > self.remaining:
            raise ValueError(
                f"cannot advance {count} bytes with {self.remaining} remaining"
            )

        start = self.offset
        end = start + count
        consumed = bytes(self.buffer[start:end])

        newlines = consumed.count(b"\n")
        if newlines:
            self.line += newlines
            # Column restarts after the last newline in the consumed slice
            self.column = end - (start + consumed.rfind(b"\n"))
        else:
            self.column += count
        self.offset = end

    def location(self, filename: str) -> SourceLocation:
        return SourceLocation(filename, self.line, self.column, self.offset)

    def __repr__(self) -> str:
        return f"PositionTracker(offset={self.offset}, line={self.line}, column={self.column})"
