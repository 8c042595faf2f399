"""Small patterns: a hold-and-release work latch, a chunked byte buffer and sorted-sequence helpers."""

__version__ = "0.1.0"
__all__ = ["channellatch", "chunkbuffer", "sequences"]