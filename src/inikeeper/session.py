# -*- encoding: utf-8 -*-
# @File   : session.py
# @Time   : 2024/10/12 22:15:31
# @Author : Kariko Lin

"""One INI document bound to one storage location.

A session assumes it is the *only* user of that location while alive.
Nothing here is locked; two sessions on the same file simply mean the
last `save()` wins.
"""

import logging

from .abstract import IniSessionBase, IniStorage
from .ini.errors import IniNotFound
from .ini.model import IniDocument
from .ini.parser import IniParser, IniSerializer
from .storage import FileStorage

__all__ = ['IniSession', 'should_autosave']


def should_autosave(enabled: bool, pending: bool) -> bool:
    return enabled and pending


class IniSession(IniSessionBase):
    def __init__(
        self, location: str | None = None, *,
        encoding: str | None = None,
        storage: IniStorage | None = None
    ) -> None:
        """Load `location` (or whatever `storage` points to).

        Raises:
            IniNotFound: the location does not exist.
            IniEmptySource: the location holds no line at all.
            IniParseError: a malformed line or a duplicate key.
            IniStorageError: reading failed.
        """
        if storage is None:
            if location is None:
                raise TypeError('either `location` or `storage` is required')
            storage = FileStorage(location, encoding)
        self._storage = storage
        self._serializer = IniSerializer()
        self._changes_pending = False
        self._autosave_enabled = False

        if not self._storage.exists():
            raise IniNotFound(f'"{self._storage.location}" does not exist')
        self._doc = self.__load()
        logging.info(f'loaded {self._doc!r} from "{self._storage}"')

    @property
    def location(self) -> str:
        return self._storage.location

    @property
    def changes_pending(self) -> bool:
        return self._changes_pending

    @property
    def autosave_enabled(self) -> bool:
        return self._autosave_enabled

    @property
    def document(self) -> IniDocument:
        """A snapshot; mutating it does not touch the session."""
        return self._doc.copy()

    def __load(self) -> IniDocument:
        return IniParser.parse(self._storage.readlines())

    def __check_autosave(self) -> None:
        if should_autosave(self._autosave_enabled, self._changes_pending):
            logging.debug(f'autosaving "{self.location}"')
            self.save()

    def get_value(self, section: str, key: str) -> str | None:
        return self._doc.get(section, key)

    def set_value(self, section: str, key: str, value: str) -> None:
        self._doc.set(section, key, value)
        self._changes_pending = True
        self.__check_autosave()

    def delete_key(self, section: str, key: str) -> bool:
        deleted = self._doc.delete(section, key)
        if deleted:
            self._changes_pending = True
        self.__check_autosave()
        return deleted

    def section_entries(self, section: str) -> dict[str, str]:
        return self._doc.section_entries(section)

    def save(self) -> None:
        """Write the whole document out, pending changes or not."""
        self._storage.write(self._serializer.dumps(self._doc))
        self._changes_pending = False
        logging.info(f'saved {self._doc!r} to "{self._storage}"')

    def reload(self) -> None:
        """Throw away unsaved changes and read the location again.

        If the location no longer parses, the error propagates and
        the previous document is kept as is.
        """
        self._changes_pending = False
        self._doc = self.__load()
        logging.info(f'reloaded {self._doc!r} from "{self._storage}"')

    def enable_autosave(self) -> None:
        self._autosave_enabled = True
        self.__check_autosave()

    def disable_autosave(self) -> None:
        self._autosave_enabled = False

    def __repr__(self) -> str:
        return '<IniSession "%s" { .pending = %s, .autosave = %s }>' % (
            self.location, self._changes_pending, self._autosave_enabled)
