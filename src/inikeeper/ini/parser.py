# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Note: the grammar here is *strict* and line based.

    ```ini
    key = val     ; belongs to the default (empty named) section.
    [section]     # both `;` and `#` start a comment, anywhere.
    key233 = a=b  ; only the first `=` splits, so the value is `a=b`.
    ```

No nested sections, no multi-line values, no quoting.
Anything else that is not blank, not a comment and has no `=`
is rejected rather than silently skipped, and so is a repeated key
within one section.
"""

import logging
from io import TextIOBase
from typing import NamedTuple, Sequence

from .consts import COMMENT_MARKS, DEFAULT_SECTION, IniErrorKind, IniMark
from .errors import IniEmptySource, IniParseError
from .model import IniDocument

__all__ = [
    'ParseResult', 'IniParser', 'IniSerializer',
    'parse', 'try_parse', 'serialize'
]


class ParseResult(NamedTuple):
    document: IniDocument | None
    error: IniParseError | None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_lines(text: str) -> list[str]:
    r"""Split on `\n`, `\r\n` and `\r` only; a trailing terminator
    does not make an extra empty line."""
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def strip_comment(line: str) -> str:
    """Cut the line at the first comment mark, the mark included."""
    pos = min(
        (p for p in (line.find(m) for m in COMMENT_MARKS) if p >= 0),
        default=-1)
    return line if pos < 0 else line[:pos]


class IniParser:
    @staticmethod
    def parse(lines: Sequence[str]) -> IniDocument:
        """Enumerate `lines` into a brand new `IniDocument`.

        The document is only handed out on success,
        so a failed parse never leaves anything half filled behind.
        """
        if len(lines) == 0:
            raise IniEmptySource('nothing to parse: source is empty')

        ret = IniDocument()
        this_sect = DEFAULT_SECTION
        for lineno, raw in enumerate(lines, 1):
            i = strip_comment(raw).strip()
            if not i:
                continue
            if (i.startswith(IniMark.SECTION_OPEN)
                    and i.endswith(IniMark.SECTION_CLOSE)):
                this_sect = i[1:-1]
                continue
            if IniMark.PAIRING not in i:
                raise IniParseError(
                    'key/value pair enumeration failed',
                    IniErrorKind.MALFORMED_LINE, lineno=lineno, line=raw)
            key, val = i.split(IniMark.PAIRING, 1)
            if not ret.add(this_sect, key, val):
                raise IniParseError(
                    f'duplicate key "{key.strip()}" in [{this_sect}]',
                    IniErrorKind.DUPLICATE_KEY, lineno=lineno, line=raw)
        logging.debug(
            f'parsed {len(lines)} lines into {ret!r}')
        return ret

    @staticmethod
    def readstream(buf: TextIOBase) -> IniDocument:
        """读取解码好的字符串流。"""
        return IniParser.parse(split_lines(buf.read()))


class IniSerializer:
    def __init__(self, delimiter: str = IniMark.PAIRING.value) -> None:
        """Only the default `=` delimiter keeps the text parsable
        by `IniParser` again."""
        self._delimiter = delimiter

    def __output_section(self, section: str, pairs: dict[str, str]) -> str:
        ret = f'[{section}]\n'
        for k, v in pairs.items():
            ret += f'{k}{self._delimiter}{v}\n'
        return ret

    def dumps(self, doc: IniDocument) -> str:
        """An empty document still gives one blank line,
        since zero lines would not parse back."""
        if not doc.sections():
            return '\n'
        return ''.join(
            self.__output_section(i, doc.section_entries(i))
            for i in doc.sections())


def parse(lines: Sequence[str]) -> IniDocument:
    return IniParser.parse(lines)


def try_parse(lines: Sequence[str]) -> ParseResult:
    """Same as `parse()`, but hands the error back instead of raising."""
    try:
        return ParseResult(IniParser.parse(lines), None)
    except IniParseError as e:
        return ParseResult(None, e)


def serialize(doc: IniDocument) -> str:
    return IniSerializer().dumps(doc)
