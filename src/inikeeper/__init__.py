# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : Chloride

import logging

from .ini import (
    DEFAULT_SECTION,
    IniErrorKind,
    IniError, IniNotFound, IniParseError, IniEmptySource, IniStorageError,
    SectionKey, IniDocument,
    ParseResult, IniParser, IniSerializer, parse, try_parse, serialize,
    IniJsonExporter, IniYamlExporter
)
from .abstract import FileHandler, IniSessionBase, IniStorage
from .storage import FileStorage, MemoryStorage
from .session import IniSession, should_autosave

__all__ = [
    'DEFAULT_SECTION', 'IniErrorKind',
    'IniError', 'IniNotFound', 'IniParseError', 'IniEmptySource',
    'IniStorageError',
    'SectionKey', 'IniDocument',
    'ParseResult', 'IniParser', 'IniSerializer',
    'parse', 'try_parse', 'serialize',
    'IniJsonExporter', 'IniYamlExporter',
    'FileHandler', 'IniSessionBase', 'IniStorage',
    'FileStorage', 'MemoryStorage',
    'IniSession', 'should_autosave'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
