"""Tests for chunk tree queries and rendering."""

import io
from contextlib import redirect_stdout

import pytest

from cdix.kernel.tree import find, findall, findpath, renders
from cdix.preset import cdix


@pytest.fixture
def root(sample_riff):
    return cdix.parse(sample_riff).chunk


def test_find(root):
    stri = find('stri', root)

    assert stri.offset == 24
    assert stri.data.data == b'main\x00'


def test_find_missing(root):
    assert find('WAVE', root) is None
    assert find('stri', None) is None


def test_findall_pattern(root):
    assert [chunk.tag for chunk in findall('s{}', root)] == ['stri', 'symb', 'srcs']


def test_findpath(root):
    assert findpath('.', root) is root
    assert findpath('cmdl', root).data.data == b'cc -g main.c'
    assert findpath('cmdl/nope', root) is None


def test_preset_pass_through(root):
    assert cdix.find('srcs', root) is find('srcs', root)


def test_renders(mkriff, mktag):
    root = cdix.parse(mkriff(mktag(b'stri', b'ABCDE'), mktag(b'symb', b''))).chunk

    assert renders(root) == (
        '<RIFF offset="0" size="26" type="CdIx">\n'
        '    <stri offset="12" size="5" />\n'
        '    <symb offset="26" size="0" />\n'
        '</RIFF>\n'
    )


def test_repr(root):
    assert repr(root).startswith('Chunk<RIFF>[offset=0 size=96 type=CdIx, children={')
    assert repr(find('stri', root)) == 'Chunk<stri>[offset=24 size=5]'


def test_render_follows_redirected_stdout(root):
    with redirect_stdout(io.StringIO()) as out:
        cdix.render(root)

    assert out.getvalue() == renders(root)
    assert out.getvalue().startswith('<RIFF offset="0" size="96" type="CdIx">\n')
