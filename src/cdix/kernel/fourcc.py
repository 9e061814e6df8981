from enum import Enum

from .buffer import BufferLike
from .errors import CorruptId, UnknownTag

FOURCC_SIZE = 4


class ChunkId(Enum):
    """4CC chunk tags known to CdIx files"""

    NO_ID = b''

    META = b'meta'
    STRI = b'stri'
    SYMB = b'symb'
    REFS = b'refs'
    RELA = b'rela'
    SRCS = b'srcs'
    CMDL = b'cmdl'
    RIFF = b'RIFF'
    CDIX = b'CdIx'

    @property
    def tag(self) -> str:
        return self.value.decode('ascii')


_REGISTRY = {cid.value: cid for cid in ChunkId if cid is not ChunkId.NO_ID}


def resolve(etag: BufferLike, offset: int = 0) -> ChunkId:
    """Resolve raw 4CC bytes to a known chunk id."""
    etag = bytes(etag)
    if len(etag) != FOURCC_SIZE:
        raise CorruptId(offset, len(etag))
    try:
        return _REGISTRY[etag]
    except KeyError:
        raise UnknownTag(offset, etag) from None
