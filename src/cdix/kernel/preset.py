from dataclasses import dataclass, replace
from typing import Any, TypeVar

from . import fourcc, settings, tree
from . import frame as framer

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _ChunkPreset(settings._DecodeSetting, _DefaultOverride):

    # static pass through
    resolve = staticmethod(fourcc.resolve)
    frame = staticmethod(framer.frame)
    read_header = staticmethod(framer.read_header)

    # isort: off
    from .decode import (
        decode_chunk,
        read_children,
        parse,
    )
    # isort: on


@dataclass(frozen=True)
class _ShellPreset(_ChunkPreset):

    # static pass through
    find = staticmethod(tree.find)
    findall = staticmethod(tree.findall)
    findpath = staticmethod(tree.findpath)
    render = staticmethod(tree.render)
    renders = staticmethod(tree.renders)


shell = _ShellPreset()
