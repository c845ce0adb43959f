# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn


class IniStorage(metaclass=ABCMeta):
    """Where an INI session reads its lines from and writes its text to.

    Implementations are expected to read and write the *whole* location
    at once; there is no partial or streamed access.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def exists(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def readlines(self) -> list[str]:
        """All lines of the location, without line terminators."""
        raise NotImplementedError

    @abstractmethod
    def write(self, text: str) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.location


class IniSessionBase(metaclass=ABCMeta):
    """What an INI session offers, whatever keeps the document."""

    @property
    @abstractmethod
    def location(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def changes_pending(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def autosave_enabled(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_value(self, section: str, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set_value(self, section: str, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_key(self, section: str, key: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def section_entries(self, section: str) -> dict[str, str]:
        raise NotImplementedError

    @abstractmethod
    def save(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def reload(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def enable_autosave(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def disable_autosave(self) -> None:
        raise NotImplementedError
