# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/10 01:15:59
# @Author : Kariko Lin

"""Every error raised by this package is an `IniError` carrying a `kind`,
so callers may simply `match err.kind:` instead of catching subclasses.
"""

from .consts import IniErrorKind


class IniError(Exception):
    kind: IniErrorKind = IniErrorKind.IO_ERROR

    def __init__(self, message: str, kind: IniErrorKind | None = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class IniNotFound(IniError):
    """The storage location does not exist."""
    kind = IniErrorKind.NOT_FOUND


class IniParseError(IniError):
    """To record errors when enumerating INI lines."""
    kind = IniErrorKind.MALFORMED_LINE

    def __init__(
        self, message: str, kind: IniErrorKind | None = None, *,
        lineno: int | None = None, line: str | None = None
    ) -> None:
        super().__init__(message, kind)
        self.lineno = lineno
        self.line = line

    def __str__(self) -> str:
        msg = super().__str__()
        if self.lineno is None:
            return msg
        return f'{msg} (line {self.lineno}: {self.line!r})'


class IniEmptySource(IniParseError):
    """Nothing to parse at all, not even a blank line."""
    kind = IniErrorKind.EMPTY_SOURCE


class IniStorageError(IniError):
    """Reading or writing the storage location failed."""
    kind = IniErrorKind.IO_ERROR
