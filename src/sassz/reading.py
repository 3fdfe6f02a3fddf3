from logging import getLogger
from typing import BinaryIO

from .exceptions import InputMemoryError, InputReadError

_logger = getLogger(__name__)

default_chunk_size = 512


def accumulate(stream: BinaryIO, chunk_size: int = default_chunk_size) -> bytes:
    """Read `stream` until its end, whatever its length.

    Args:
        stream: Binary stream to consume, typically `sys.stdin.buffer`.
        chunk_size: Number of bytes requested from the stream at each read.

    Raises:
        InputReadError: Raised if the stream reports a read error.
        InputMemoryError: Raised if the buffer cannot grow any further.

    Returns:
        Every byte read from the stream, possibly none.
    """
    buffer = bytearray()
    try:
        while chunk := stream.read(chunk_size):
            buffer += chunk
    except MemoryError:
        msg = "ran out of memory while reading standard input"
        raise InputMemoryError(msg) from None
    except OSError as e:
        msg = f"error reading standard input: {e}"
        raise InputReadError(msg) from e
    _logger.debug("Read %d bytes from standard input", len(buffer))
    return bytes(buffer)
