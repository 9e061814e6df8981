from typing import Dict, Optional, Set

from cdix.kernel.buffer import BufferLike
from cdix.kernel.preset import _ShellPreset
from cdix.kernel.types import Chunk, Riff
from cdix.preset import cdix
from cdix.utils.fileio import read_file


def parse(buffer: BufferLike, preset: _ShellPreset = cdix) -> Riff:
    """Decode CdIx file contents to chunk tree."""
    return preset.parse(buffer)


def from_path(path: str, preset: _ShellPreset = cdix) -> Riff:
    return parse(read_file(path), preset=preset)


def generate_schema(root: Optional[Chunk]) -> Dict[str, Set[str]]:
    """Collect child tags found under each container tag."""
    schema: Dict[str, Set[str]] = {}
    if not root or not root.children:
        return schema
    schema[root.tag] = {child.tag for child in root.children}
    for child in root.children:
        for ptag, tags in generate_schema(child).items():
            schema.setdefault(ptag, set()).update(tags)
    return schema
