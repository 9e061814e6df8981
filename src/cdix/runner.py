import glob
import logging
import os
from pprint import pprint
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import typer
import yaml

from cdix import riff
from cdix.kernel.errors import ChunkError
from cdix.kernel.types import Chunk, ChunkMeta, ChunkStream, Riff
from cdix.preset import cdix
from cdix.utils.fileio import write_file
from cdix.utils.funcutils import flatten

app = typer.Typer()


def get_files(globs: Iterable[str]) -> Set[str]:
    return set(flatten(glob.iglob(fname) for fname in globs))


def load_trees(files: Iterable[str], lenient: bool) -> Iterator[Tuple[str, Riff]]:
    preset = cdix(strict=not lenient)
    failed = False
    for filename in sorted(get_files(files)):
        try:
            yield filename, riff.from_path(filename, preset=preset)
        except ChunkError as exc:
            typer.echo(f'{os.path.basename(filename)}: {exc}', err=True)
            failed = True
    if failed:
        raise typer.Exit(code=1)


def to_dict(chunk: Chunk) -> Dict[str, Any]:
    node: Dict[str, Any] = {'tag': chunk.tag, **chunk.attribs}
    if isinstance(chunk.data, ChunkMeta):
        node['version'] = chunk.data.version.hex()
    if chunk.children:
        node['children'] = [to_dict(child) for child in chunk.children]
    return node


def iter_payloads(chunk: Chunk, prefix: str = '') -> Iterator[Tuple[str, bytes]]:
    for idx, child in enumerate(chunk.children):
        name = f'{prefix}{idx:04d}_{child.tag}'
        if isinstance(child.data, ChunkStream):
            yield f'{name}.bin', child.data.data
        yield from iter_payloads(child, prefix=f'{name}_')


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Log decoded chunks'),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


@app.command('map')
def map_chunks(
    files: List[str] = typer.Argument(..., help='Files to read from'),
    lenient: bool = typer.Option(False, '--lenient', help='Skip unknown chunks'),
) -> None:
    for filename, tree in load_trees(files, lenient):
        print(f'Mapping file: {os.path.basename(filename)}')
        cdix.render(tree.chunk)


@app.command('dump')
def dump(
    files: List[str] = typer.Argument(..., help='Files to read from'),
    target_dir: str = typer.Option('out', '--target', '-t', help='Target directory'),
    lenient: bool = typer.Option(False, '--lenient', help='Skip unknown chunks'),
) -> None:
    for filename, tree in load_trees(files, lenient):
        basename = os.path.basename(filename)
        print(f'Dumping file: {basename}')
        output_dir = os.path.join(target_dir, basename)
        os.makedirs(output_dir, exist_ok=True)
        for name, data in iter_payloads(tree.chunk):
            write_file(os.path.join(output_dir, name), data)
        with open(os.path.join(output_dir, 'tree.yaml'), 'w') as tree_out:
            yaml.safe_dump(to_dict(tree.chunk), tree_out, sort_keys=False)


@app.command('schema')
def schema(
    filename: str = typer.Argument(..., help='File to read from'),
    schema_dump: Optional[str] = typer.Option(
        None, '--schema-dump', help='save schema to file'
    ),
) -> None:
    for _, tree in load_trees([filename], lenient=True):
        found = riff.generate_schema(tree.chunk)
        pprint(found)
        if schema_dump:
            with open(schema_dump, 'w') as schema_out:
                yaml.safe_dump(
                    {ptag: sorted(tags) for ptag, tags in found.items()}, schema_out,
                )


if __name__ == '__main__':
    app()
