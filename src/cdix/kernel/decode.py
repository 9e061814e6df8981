from typing import Iterator, Tuple

from .align import padded_size
from .buffer import BufferLike, remaining, splice
from .errors import (
    IncompatibleFile,
    NotRiffFile,
    TrailingData,
    TruncatedPayload,
    UnknownTag,
)
from .fourcc import FOURCC_SIZE, ChunkId
from .frame import CHUNK_HEADER, Frame, frame, read_header
from .settings import Decoder, _DecodeSetting
from .types import Chunk, ChunkMeta, ChunkRiff, ChunkStream, Riff


def payload_offset(frm: Frame) -> int:
    return frm.offset + CHUNK_HEADER.size


def read_payload(frm: Frame) -> memoryview:
    """Exact payload of framed chunk, padding excluded."""
    return splice(frm.payload, 0, frm.size, base=payload_offset(frm), tag=frm.id.tag)


def decode_generic(cfg: _DecodeSetting, frm: Frame, level: int = 0) -> ChunkStream:
    return ChunkStream(bytes(read_payload(frm)))


def decode_meta(cfg: _DecodeSetting, frm: Frame, level: int = 0) -> ChunkMeta:
    version = splice(
        read_payload(frm), 0, FOURCC_SIZE, base=payload_offset(frm), tag=frm.id.tag,
    )
    return ChunkMeta(bytes(version))


def decode_container(cfg: _DecodeSetting, frm: Frame, level: int = 0) -> ChunkRiff:
    """Decode container payload: 4CC file type followed by child chunks.

    File type is verified before the declared size,
    so a wrong file type is reported even if the buffer is cut short.
    """
    base = payload_offset(frm)
    file_type = bytes(frm.payload[:FOURCC_SIZE])
    if cfg.signature is not None and file_type != cfg.signature:
        raise IncompatibleFile(base, file_type, cfg.signature)
    if frm.size < FOURCC_SIZE:
        raise TruncatedPayload(base, FOURCC_SIZE, frm.size, tag=frm.id.tag)
    body = read_payload(frm)
    children = read_children(cfg, body, offset=FOURCC_SIZE, base=base, level=level + 1)
    return ChunkRiff(file_type, tuple(chunk for _, chunk in children))


def read_children(
    cfg: _DecodeSetting,
    buffer: BufferLike,
    offset: int = 0,
    base: int = 0,
    level: int = 1,
) -> Iterator[Tuple[int, Chunk]]:
    """Read all chunks from given container body.

    Yields (offset, chunk) pairs, offsets are relative to buffer.
    Padding byte missing after last chunk is tolerated.
    """
    while offset < len(buffer):
        left = remaining(buffer, offset)
        if left < CHUNK_HEADER.size:
            raise TrailingData(base + offset, left)
        try:
            frm = frame(buffer, offset, base=base)
        except UnknownTag as exc:
            if cfg.strict:
                raise
            size = read_header(buffer, offset, base=base).size
            splice(buffer, offset + CHUNK_HEADER.size, size, base=base)
            cfg.logger.warning('skipping unknown chunk: %s', exc)
        else:
            size = frm.size
            yield offset, decode_frame(cfg, frm, level)
        offset += CHUNK_HEADER.size + padded_size(size, cfg.align)


def select_decoder(cfg: _DecodeSetting, cid: ChunkId, level: int) -> Decoder:
    decoder = cfg.decoders.get(cid, decode_generic)
    if decoder is decode_container and cfg.max_depth is not None:
        if level >= cfg.max_depth:
            return decode_generic
    return decoder


def decode_frame(cfg: _DecodeSetting, frm: Frame, level: int = 1) -> Chunk:
    data = select_decoder(cfg, frm.id, level)(cfg, frm, level)
    cfg.logger.debug(
        '%s%s at offset %d, size %d', '    ' * level, frm.id.tag, frm.offset, frm.size,
    )
    return Chunk(frm.id, data, frm.offset, frm.size)


def decode_chunk(
    cfg: _DecodeSetting, buffer: BufferLike, offset: int = 0, level: int = 0,
) -> Chunk:
    """Decode single chunk at given offset.

    Outermost chunk (level 0) must be a RIFF container.
    """
    frm = frame(buffer, offset)
    if level > 0:
        return decode_frame(cfg, frm, level)
    if frm.id is not ChunkId.RIFF:
        raise NotRiffFile(frm.offset, frm.id.tag)
    cfg.logger.debug('RIFF at offset %d, size %d', frm.offset, frm.size)
    return Chunk(frm.id, decode_container(cfg, frm, level), frm.offset, frm.size)


def parse(cfg: _DecodeSetting, buffer: BufferLike) -> Riff:
    """Decode chunk tree from given bytes."""
    root = decode_chunk(cfg, buffer)
    end = root.offset + CHUNK_HEADER.size + padded_size(root.size, cfg.align)
    if end < len(buffer):
        cfg.logger.warning(
            'ignoring %d bytes following root chunk', len(buffer) - end,
        )
    return Riff(root)
