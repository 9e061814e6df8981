import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from .fourcc import ChunkId
from .frame import Frame
from .types import ChunkData

Decoder = Callable[['_DecodeSetting', Frame, int], ChunkData]


@dataclass(frozen=True)
class _ChunkSetting(object):
    """Setting for reading chunk sequences

    align: int (default 2) -
        payload alignment, a pad byte follows odd sized payloads.

    strict: if set to True, unknown chunk tags raise error,
        otherwise log warning and skip the chunk
    """

    align: int = 2
    strict: bool = True
    logger: logging.Logger = logging.getLogger('cdix')


@dataclass(frozen=True)
class _DecodeSetting(_ChunkSetting):
    """Setting for decoding chunk trees

    contains all fields from _ChunkSetting, and the following:

    signature: required container file type, None to accept any

    decoders: mapping of chunk tags to payload decoders,
        tags missing from mapping are decoded as raw bytes

    max_depth: limit levels of container chunks to decode, None for unlimited
    """

    signature: Optional[bytes] = None
    decoders: Mapping[ChunkId, Decoder] = field(default_factory=dict)
    max_depth: Optional[int] = None
