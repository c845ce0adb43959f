from inikeeper import IniDocument, SectionKey


def test_section_key_of_trims_both_parts() -> None:
    assert SectionKey.of("  A ", " k ") == SectionKey("A", "k")
    assert SectionKey.of("A", "k") != SectionKey.of("a", "k")


def test_set_then_get_returns_trimmed_value() -> None:
    doc = IniDocument()
    doc.set("S", "k", "  a = b  ")
    assert doc.get("S", "k") == "a = b"
    assert doc.get(" S ", " k ") == "a = b"


def test_get_missing_is_none() -> None:
    doc = IniDocument()
    assert doc.get("S", "k") is None
    doc.set("S", "k", "v")
    assert doc.get("S", "other") is None
    assert doc.get("s", "k") is None


def test_set_replace_keeps_position() -> None:
    doc = IniDocument()
    doc.set("A", "x", "1")
    doc.set("A", "y", "2")
    doc.set("B", "z", "3")
    doc.set("A", "x", "changed")
    assert [str(skp) for skp in doc] == ["[A] x", "[A] y", "[B] z"]
    assert doc.get("A", "x") == "changed"


def test_set_appends_new_keys_and_sections() -> None:
    doc = IniDocument()
    doc.set("B", "z", "3")
    doc.set("A", "x", "1")
    doc.set("B", "w", "4")
    assert doc.sections() == ["B", "A"]
    assert list(doc.section_entries("B")) == ["z", "w"]


def test_add_refuses_existing() -> None:
    doc = IniDocument()
    assert doc.add("A", "k", "1")
    assert not doc.add("A", " k", "2")
    assert doc.get("A", "k") == "1"


def test_delete() -> None:
    doc = IniDocument()
    doc.set("A", "k", "v")
    doc.set("A", "j", "w")
    before = doc.copy()

    assert not doc.delete("A", "missing")
    assert not doc.delete("Nope", "k")
    assert doc == before

    assert doc.delete("A", "k")
    assert doc.get("A", "k") is None
    assert len(doc) == 1


def test_deleting_last_key_drops_section() -> None:
    doc = IniDocument()
    doc.set("A", "k", "v")
    doc.set("B", "k", "v")
    doc.delete("A", "k")
    assert doc.sections() == ["B"]
    assert doc.section_entries("A") == {}
    doc.set("A", "k", "again")
    assert doc.sections() == ["B", "A"]


def test_section_entries_unknown_section_is_empty() -> None:
    assert IniDocument().section_entries("Nope") == {}


def test_section_entries_is_a_copy() -> None:
    doc = IniDocument()
    doc.set("A", "k", "v")
    entries = doc.section_entries("A")
    entries["k"] = "changed"
    assert doc.get("A", "k") == "v"


def test_contains_and_len() -> None:
    doc = IniDocument()
    doc.set("A", "k", "v")
    doc.set("", "top", "1")
    assert SectionKey("A", "k") in doc
    assert ("", "top") in doc
    assert ("A", "missing") not in doc
    assert "A" not in doc
    assert len(doc) == 2


def test_equality_is_order_sensitive() -> None:
    a, b = IniDocument(), IniDocument()
    a.set("S", "x", "1")
    a.set("S", "y", "2")
    b.set("S", "y", "2")
    b.set("S", "x", "1")
    assert a != b
    assert a == a.copy()


def test_dict_round_trip_and_clear() -> None:
    doc = IniDocument.from_dict({"A": {"k": " v "}, "B": {"x": "1"}})
    assert doc.to_dict() == {"A": {"k": "v"}, "B": {"x": "1"}}
    doc.clear()
    assert len(doc) == 0
    assert doc.sections() == []
