# -*- encoding: utf-8 -*-
# @File   : storage.py
# @Time   : 2024/10/12 21:40:06
# @Author : Kariko Lin

"""Whole-file storages for `IniSession`.

`FileStorage` is what you want most of the time.
`MemoryStorage` keeps the text in memory, handy for embedding and tests.
"""

import logging
from os.path import exists, isfile

import chardet

from .abstract import IniStorage
from .ini.errors import IniStorageError
from .ini.parser import split_lines

__all__ = ['FileStorage', 'MemoryStorage']


class FileStorage(IniStorage):
    DEFAULT_READ_CODEC = 'utf-8-sig'  # tolerate a leading BOM when reading.
    DEFAULT_WRITE_CODEC = 'utf-8'     # but never write one.

    def __init__(self, path: str, encoding: str | None = None) -> None:
        self._fn = path
        self._codec = encoding

    @property
    def location(self) -> str:
        return self._fn

    def exists(self) -> bool:
        return exists(self._fn) and isfile(self._fn)

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logging.warning(
            f'"{filename}" is not {FileStorage.DEFAULT_READ_CODEC}, '
            f'retrying as {codec["encoding"]} '
            f'(confidence {codec["confidence"]:.2f}).')
        return raw.decode(codec['encoding'])

    def readlines(self) -> list[str]:
        try:
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            try:
                with open(self._fn, 'r',
                          encoding=self._codec or self.DEFAULT_READ_CODEC,
                          newline='') as fp:
                    text = fp.read()
            except UnicodeDecodeError:
                if self._codec is not None:
                    raise
                text = self._decode_file(self._fn)
        except (OSError, UnicodeDecodeError) as e:
            logging.warning(f'failed to read "{self._fn}": {e}')
            raise IniStorageError(f'failed to read "{self._fn}"') from e
        return split_lines(text)

    def write(self, text: str) -> None:
        # text mode: each `\n` goes out as the platform line separator.
        try:
            with open(self._fn, 'w',
                      encoding=self._codec or self.DEFAULT_WRITE_CODEC) as fp:
                fp.write(text)
        except (OSError, UnicodeEncodeError) as e:
            logging.warning(f'failed to write "{self._fn}": {e}')
            raise IniStorageError(f'failed to write "{self._fn}"') from e

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec or self.DEFAULT_READ_CODEC})'


class MemoryStorage(IniStorage):
    def __init__(
        self, text: str | None = '', location: str = ':memory:'
    ) -> None:
        """`text=None` stands for a location that does not exist (yet)."""
        self._text = text
        self._name = location

    @property
    def location(self) -> str:
        return self._name

    @property
    def text(self) -> str | None:
        return self._text

    def exists(self) -> bool:
        return self._text is not None

    def readlines(self) -> list[str]:
        if self._text is None:
            raise IniStorageError(f'"{self._name}" does not exist')
        return split_lines(self._text)

    def write(self, text: str) -> None:
        self._text = text
