"""Shared pytest fixtures for all tests."""

import struct

import pytest


def _mktag(tag: bytes, data: bytes, pad: bool = True) -> bytes:
    header = struct.pack('<4sI', tag, len(data))
    padding = b'\x00' if pad and len(data) % 2 else b''
    return header + data + padding


def _mkriff(*children: bytes, signature: bytes = b'CdIx') -> bytes:
    return _mktag(b'RIFF', signature + b''.join(children))


@pytest.fixture
def mktag():
    """
    Chunk builder: 4CC tag, little-endian size, payload and pad byte.

    Returns:
        Callable (tag, data, pad=True) -> bytes
    """
    return _mktag


@pytest.fixture
def mkriff():
    """
    Container builder wrapping given child chunks.

    Returns:
        Callable (*children, signature=b'CdIx') -> bytes
    """
    return _mkriff


@pytest.fixture
def sample_riff():
    """
    CdIx file holding one chunk of each leaf kind.

    Returns:
        File bytes
    """
    return _mkriff(
        _mktag(b'meta', b'\x01\x00\x00\x00'),
        _mktag(b'stri', b'main\x00'),
        _mktag(b'symb', b'\x00\x01\x02'),
        _mktag(b'refs', b''),
        _mktag(b'rela', b'\xff\xfe'),
        _mktag(b'srcs', b'main.c\x00'),
        _mktag(b'cmdl', b'cc -g main.c'),
    )


@pytest.fixture
def sample_file(tmp_path, sample_riff):
    """
    Write sample CdIx file.

    Args:
        tmp_path: pytest tmp_path fixture
        sample_riff: sample file bytes

    Returns:
        Path to sample file
    """
    file_path = tmp_path / 'sample.cdix'
    file_path.write_bytes(sample_riff)
    return file_path
