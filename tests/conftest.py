from pathlib import Path

import pytest

from inikeeper import MemoryStorage

SAMPLE_INI = """\
; sample settings
[Numbers]
Binary=11001010
Octal=312 ; inline comment
Decimal = 202
Hex=CA   # hex, uppercase
[Strings]
Text = Hello
Base64=SGVsbG8=

[SectionWithNoKeys]
[SectionWithEmptyKey]
EmptyKey=
"""


class CountingStorage(MemoryStorage):
    def __init__(self, text: str | None = SAMPLE_INI) -> None:
        super().__init__(text, location='counting')
        self.writes = 0

    def write(self, text: str) -> None:
        self.writes += 1
        super().write(text)


@pytest.fixture
def sample_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE_INI, encoding="utf-8")
    return path


@pytest.fixture
def counting_storage() -> CountingStorage:
    return CountingStorage()
