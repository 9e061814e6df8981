"""Tests for the top level driver."""

import logging

import pytest

from cdix import riff
from cdix.kernel.errors import IncompatibleFile
from cdix.kernel.fourcc import ChunkId
from cdix.kernel.types import Riff
from cdix.preset import cdix


def test_parse_wraps_root(sample_riff):
    tree = riff.parse(sample_riff)

    assert isinstance(tree, Riff)
    assert tree.chunk.id is ChunkId.RIFF
    assert len(tree.chunk.children) == 7


def test_parse_accepts_memoryview(sample_riff):
    assert riff.parse(memoryview(sample_riff)) == riff.parse(sample_riff)


def test_parse_with_preset(mkriff, mktag):
    buffer = mkriff(mktag(b'junk', b''), mktag(b'stri', b'a'))
    tree = riff.parse(buffer, preset=cdix(strict=False))

    assert [child.tag for child in tree.chunk.children] == ['stri']


def test_parse_propagates_errors(mkriff):
    with pytest.raises(IncompatibleFile):
        riff.parse(mkriff(signature=b'WAVE'))


def test_bytes_after_root_are_ignored(mkriff, mktag, caplog):
    buffer = mkriff(mktag(b'stri', b'a')) + b'\x00\x00\x00'

    with caplog.at_level(logging.WARNING, logger='cdix'):
        tree = riff.parse(buffer)

    assert len(tree.chunk.children) == 1
    assert 'ignoring 3 bytes following root chunk' in caplog.text


def test_from_path(sample_file, sample_riff):
    assert riff.from_path(str(sample_file)) == riff.parse(sample_riff)


def test_generate_schema(sample_riff):
    schema = riff.generate_schema(riff.parse(sample_riff).chunk)

    assert schema == {
        'RIFF': {'meta', 'stri', 'symb', 'refs', 'rela', 'srcs', 'cmdl'},
    }


def test_generate_schema_empty():
    assert riff.generate_schema(None) == {}
