# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/13 14:02:47
# @Author : Kariko Lin

"""INI document import/export as JSON and YAML.

Both forms are just `{section: {key: value}}`,
and sections and keys keep their order.
The default section (text before any header) is kept under `""`.
"""

import json
from typing import Any

import yaml

from ..abstract import FileHandler
from .errors import IniParseError
from .model import IniDocument

__all__ = ['IniJsonExporter', 'IniYamlExporter']


def _from_mapping(src: Any) -> IniDocument:
    ret = IniDocument()
    if src is None:  # empty yaml file.
        return ret
    if not isinstance(src, dict):
        raise IniParseError(
            f'expected {{section: {{key: value}}}}, got {type(src).__name__}')
    for section, pairs in src.items():
        if pairs is None:
            continue
        if not isinstance(pairs, dict):
            raise IniParseError(
                f'section "{section}" should map keys to values, '
                f'got {type(pairs).__name__}')
        for k, v in pairs.items():
            # may there be some pure digits considered as int
            ret.set(str(section), str(k), '' if v is None else str(v))
    return ret


class IniJsonExporter(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _from_mapping(json.load(fp))

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False,
                      indent=indent)


class IniYamlExporter(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _from_mapping(yaml.safe_load(fp))

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(instance.to_dict(), fp, allow_unicode=True,
                           sort_keys=False, indent=indent)
