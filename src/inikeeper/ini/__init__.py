# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .consts import IniErrorKind, DEFAULT_SECTION
from .errors import (
    IniError,
    IniNotFound,
    IniParseError,
    IniEmptySource,
    IniStorageError
)
from .model import SectionKey, IniDocument
from .parser import (
    ParseResult,
    IniParser,
    IniSerializer,
    parse,
    try_parse,
    serialize
)
from .export import IniJsonExporter, IniYamlExporter
