from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from .fourcc import ChunkId


@dataclass(frozen=True)
class ChunkStream(object):
    """Raw chunk payload, padding excluded"""

    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f'ChunkStream[{len(self)}]'


@dataclass(frozen=True)
class ChunkMeta(object):
    version: bytes


@dataclass(frozen=True)
class ChunkRiff(object):
    """Container payload

    file_type: 4CC form signature following the container header

    data: child chunks in file order
    """

    file_type: bytes
    data: Tuple['Chunk', ...]

    def __iter__(self) -> Iterator['Chunk']:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


ChunkData = Optional[Union[ChunkRiff, ChunkStream, ChunkMeta]]


@dataclass(frozen=True)
class Chunk(object):
    id: ChunkId = ChunkId.NO_ID
    data: ChunkData = None
    offset: int = 0
    size: int = 0

    @property
    def tag(self) -> str:
        return self.id.tag

    @property
    def children(self) -> Tuple['Chunk', ...]:
        if isinstance(self.data, ChunkRiff):
            return self.data.data
        return ()

    @property
    def attribs(self) -> Dict[str, Any]:
        attribs: Dict[str, Any] = {'offset': self.offset, 'size': self.size}
        if isinstance(self.data, ChunkRiff):
            attribs['type'] = self.data.file_type.decode('ascii', errors='replace')
        return attribs

    def __iter__(self) -> Iterator['Chunk']:
        return iter(self.children)

    def __repr__(self) -> str:
        attribs = ' '.join(f'{key}={val}' for key, val in self.attribs.items())
        if not isinstance(self.data, ChunkRiff):
            return f'Chunk<{self.tag}>[{attribs}]'
        children = ','.join(_format_children(self, max_show=4))
        return f'Chunk<{self.tag}>[{attribs}, children={{{children}}}]'


@dataclass(frozen=True)
class Riff(object):
    """Decoded file, holding a single root chunk"""

    chunk: Optional[Chunk] = None


def _format_children(
    root: Iterable[Chunk],
    max_show: Optional[int] = None,
) -> Iterator[str]:
    counts = Counter(child.tag for child in root)
    for idx, (tag, count) in enumerate(counts.items()):
        if not (max_show is None or idx < max_show):
            yield '...'
            return
        yield f'{tag}*{count}' if count > 1 else tag
