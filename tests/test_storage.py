import pytest

from iats.errors import HalError
from iats.storage import Storage


def test_missing_key_is_none():
    assert Storage("settings").get_blob("absent") is None


def test_set_and_get_in_memory():
    s = Storage("settings")
    s.set_blob("pin", b"\x01\x02")
    assert s.get_blob("pin") == b"\x01\x02"


def test_empty_blob_erases_key():
    s = Storage("settings")
    s.set_blob("pin", b"\x01")
    s.set_blob("pin", b"")
    assert s.get_blob("pin") is None


def test_erasing_missing_key_is_harmless():
    s = Storage("settings")
    s.set_blob("absent", b"")
    assert s.get_blob("absent") is None


def test_commit_persists(tmp_path):
    path = tmp_path / "nvs.json"
    s = Storage("settings", path)
    s.set_blob("name", b"tracker")
    s.commit()
    assert Storage("settings", path).get_blob("name") == b"tracker"


def test_uncommitted_changes_are_not_persisted(tmp_path):
    path = tmp_path / "nvs.json"
    s = Storage("settings", path)
    s.set_blob("name", b"tracker")
    assert Storage("settings", path).get_blob("name") is None


def test_namespaces_are_isolated(tmp_path):
    path = tmp_path / "nvs.json"
    a = Storage("alpha", path)
    a.set_blob("k", b"a")
    a.commit()
    b = Storage("beta", path)
    b.set_blob("k", b"b")
    b.commit()
    assert Storage("alpha", path).get_blob("k") == b"a"
    assert Storage("beta", path).get_blob("k") == b"b"


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "nvs.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(HalError):
        Storage("settings", path)