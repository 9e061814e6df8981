import io
import posixpath
import sys
from typing import IO, Iterable, Iterator, Optional

from parse import parse

from .types import Chunk

ChunkTree = Optional[Iterable[Chunk]]


def findall(tag: str, root: ChunkTree) -> Iterator[Chunk]:
    """Find child chunks with tag matching given format pattern (e.g. 's{}')."""
    if not root:
        return
    for c in root:
        if parse(tag, c.tag, evaluate_result=False):
            yield c


def find(tag: str, root: ChunkTree) -> Optional[Chunk]:
    return next(findall(tag, root), None)


def findpath(path: str, root: Optional[Chunk]) -> Optional[Chunk]:
    path = posixpath.normpath(path)
    if not path or path == '.':
        return root
    dirname, basename = posixpath.split(path)
    return find(basename, findpath(dirname, root))


def render(
    chunk: Optional[Chunk], level: int = 0, stream: Optional[IO[str]] = None
) -> None:
    if not chunk:
        return
    stream = stream or sys.stdout
    attribs = ''.join(
        f' {key}="{value}"'
        for key, value in chunk.attribs.items()
        if value is not None
    )
    indent = '    ' * level
    closing = '' if chunk.children else ' /'
    print(f'{indent}<{chunk.tag}{attribs}{closing}>', file=stream)
    if chunk.children:
        for c in chunk.children:
            render(c, level=level + 1, stream=stream)
        print(f'{indent}</{chunk.tag}>', file=stream)


def renders(chunk: Optional[Chunk]) -> str:
    with io.StringIO() as stream:
        render(chunk, stream=stream)
        return stream.getvalue()
