from typing import Optional, Union

import deal

from .errors import TruncatedPayload

BufferLike = Union[bytes, bytearray, memoryview]


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.pre(lambda _: _.offset >= 0),
    deal.raises(TruncatedPayload),
    deal.reason(TruncatedPayload, lambda _: _.offset + _.size > len(_.buffer)),
    deal.has(),
)
def splice(
    buffer: BufferLike,
    offset: int,
    size: int,
    base: int = 0,
    tag: Optional[str] = None,
) -> memoryview:
    """Zero-copy view of exactly `size` bytes at `offset`.

    base: absolute offset of `buffer`, used for error reporting only.
    """
    view = memoryview(buffer)[offset : offset + size]
    if len(view) != size:
        raise TruncatedPayload(base + offset, size, len(view), tag=tag)
    return view


def remaining(buffer: BufferLike, offset: int) -> int:
    return max(len(buffer) - offset, 0)
