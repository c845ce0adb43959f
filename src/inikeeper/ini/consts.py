# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

from enum import Enum


class IniErrorKind(str, Enum):
    NOT_FOUND = 'not_found'
    EMPTY_SOURCE = 'empty_source'
    MALFORMED_LINE = 'malformed_line'
    DUPLICATE_KEY = 'duplicate_key'
    IO_ERROR = 'io_error'


class IniMark(str, Enum):
    COMMENT = ';'
    COMMENT_ALT = '#'
    SECTION_OPEN = '['
    SECTION_CLOSE = ']'
    PAIRING = '='


COMMENT_MARKS = (IniMark.COMMENT.value, IniMark.COMMENT_ALT.value)

# text before the first `[section]` belongs here.
DEFAULT_SECTION = ''
