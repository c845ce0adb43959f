# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically a flat INI structure: `(section, key) -> value`.

Ordering matters here since we write the document back:
sections keep the order they were first seen (or created),
and keys inside a section do so as well.
"""

from typing import Iterator, NamedTuple

from .consts import DEFAULT_SECTION


class SectionKey(NamedTuple):
    section: str
    key: str

    @classmethod
    def of(cls, section: str, key: str) -> 'SectionKey':
        """Build a key with both parts trimmed, which is the only way
        a `SectionKey` should be made from user input."""
        return cls(section.strip(), key.strip())

    def __str__(self) -> str:
        return f'[{self.section}] {self.key}'


class IniDocument:
    """INI 文档。维护`(section, key) -> value`的有序映射。

    Two level dicts are used on purpose:
    `{section: {key: value}}`. A section only lives here while it
    still holds at least one pair, so deleting the last key of a
    section drops the section itself, and a later `set()` appends
    it at the end again.
    """

    def __init__(self) -> None:
        self.__raw: dict[str, dict[str, str]] = {}

    def get(self, section: str, key: str) -> str | None:
        skp = SectionKey.of(section, key)
        return self.__raw.get(skp.section, {}).get(skp.key)

    def set(self, section: str, key: str, value: str) -> None:
        """Insert or replace. Replacing keeps the original position."""
        skp = SectionKey.of(section, key)
        self.__raw.setdefault(skp.section, {})[skp.key] = value.strip()

    def add(self, section: str, key: str, value: str) -> bool:
        """Insert only. Returns `False` (and keeps the old value)
        if the pair already exists."""
        skp = SectionKey.of(section, key)
        pairs = self.__raw.setdefault(skp.section, {})
        if skp.key in pairs:
            return False
        pairs[skp.key] = value.strip()
        return True

    def delete(self, section: str, key: str) -> bool:
        skp = SectionKey.of(section, key)
        pairs = self.__raw.get(skp.section)
        if pairs is None or skp.key not in pairs:
            return False
        del pairs[skp.key]
        if not pairs:
            del self.__raw[skp.section]
        return True

    def section_entries(self, section: str) -> dict[str, str]:
        """Pairs of `section` in stored order, as a copy.
        Unknown (or emptied) sections just give `{}`."""
        return self.__raw.get(section.strip(), {}).copy()

    def sections(self) -> list[str]:
        return list(self.__raw)

    def entries(self) -> Iterator[tuple[SectionKey, str]]:
        for section, pairs in self.__raw.items():
            for key, value in pairs.items():
                yield SectionKey(section, key), value

    def copy(self) -> 'IniDocument':
        ret = IniDocument()
        for skp, value in self.entries():
            ret.set(skp.section, skp.key, value)
        return ret

    def clear(self) -> None:
        self.__raw.clear()

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Nested copy, mainly for exporters."""
        return {k: v.copy() for k, v in self.__raw.items()}

    @classmethod
    def from_dict(cls, data: dict[str, dict[str, str]]) -> 'IniDocument':
        ret = cls()
        for section, pairs in data.items():
            for key, value in pairs.items():
                ret.set(section, key, value)
        return ret

    def __contains__(self, skp: object) -> bool:
        if not isinstance(skp, tuple) or len(skp) != 2:
            return False
        section, key = skp
        return key in self.__raw.get(section, {})

    def __iter__(self) -> Iterator[SectionKey]:
        return (skp for skp, _ in self.entries())

    def __len__(self) -> int:
        return sum(len(i) for i in self.__raw.values())

    # order counts, so compare pair lists rather than dicts.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return list(self.entries()) == list(other.entries())

    def __repr__(self) -> str:
        return 'IniDocument { .sections = %d, .cnt = %d }' % (
            len(self.__raw), len(self))

    @property
    def header(self) -> dict[str, str]:
        """Pairs before any `[section]`, as a copy."""
        return self.section_entries(DEFAULT_SECTION)
