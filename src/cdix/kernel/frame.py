from struct import Struct
from typing import NamedTuple

from .buffer import BufferLike, remaining
from .errors import BadHeader, CorruptId
from .fourcc import FOURCC_SIZE, ChunkId, resolve
from .structured import StructuredTuple


class ChunkHeader(NamedTuple):
    etag: bytes
    size: int


class Frame(NamedTuple):
    """Chunk header resolved against the 4CC registry

    id: resolved chunk tag

    size: declared payload size, excluding header and padding

    payload: view of all bytes following the header (not truncated to size)

    offset: absolute offset of the chunk header
    """

    id: ChunkId
    size: int
    payload: memoryview
    offset: int


CHUNK_HEADER = StructuredTuple(('etag', 'size'), Struct('<4sI'), ChunkHeader)


def read_header(buffer: BufferLike, offset: int = 0, base: int = 0) -> ChunkHeader:
    """Read raw 4CC and little-endian size at given offset.

    base: absolute offset of `buffer`, used for error reporting only.
    """
    left = remaining(buffer, offset)
    if left < FOURCC_SIZE:
        raise CorruptId(base + offset, left)
    if left < CHUNK_HEADER.size:
        raise BadHeader(base + offset + FOURCC_SIZE, left - FOURCC_SIZE)
    return CHUNK_HEADER.unpack_from(buffer, offset)


def frame(buffer: BufferLike, offset: int = 0, base: int = 0) -> Frame:
    """Read chunk header at given offset without consuming it."""
    header = read_header(buffer, offset, base=base)
    cid = resolve(header.etag, offset=base + offset)
    payload = memoryview(buffer)[offset + CHUNK_HEADER.size :]
    return Frame(cid, header.size, payload, base + offset)
