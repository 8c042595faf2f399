"""A FIFO byte buffer that stores written data as separate chunks."""

from __future__ import annotations

from collections import deque


class ChunkBuffer:
    """Byte buffer that keeps each write as its own chunk.

    Writing never copies data already held; reading takes bytes from the
    oldest chunk first and discards chunks once they are used up.
    """

    def __init__(self) -> None:
        self._chunks: deque[bytes] = deque()
        self._offset = 0
        self._length = 0

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Append a copy of ``data`` and return the number of bytes written."""
        chunk = bytes(data)
        if chunk:
            self._chunks.append(chunk)
            self._length += len(chunk)
        return len(chunk)

    def read(self, size: int = -1) -> bytes:
        """Remove and return up to ``size`` bytes; all of them if ``size`` is negative.

        An empty result means the buffer holds nothing.
        """
        wanted = self._length if size < 0 else min(size, self._length)
        parts = []
        while wanted:
            head = self._chunks[0]
            piece = head[self._offset : self._offset + wanted]
            parts.append(piece)
            wanted -= len(piece)
            self._offset += len(piece)
            if self._offset == len(head):
                self._chunks.popleft()
                self._offset = 0
        data = b"".join(parts)
        self._length -= len(data)
        return data

    def __len__(self) -> int:
        return self._length