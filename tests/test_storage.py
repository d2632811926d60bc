from unittest.mock import patch
from homes.storage import JsonFileStorage, MemoryStorage


def test_memory_storage_round_trip():
    storage = MemoryStorage()
    assert storage.get_item("favorites") is None
    assert storage.set_item("favorites", "[1]") is True
    assert storage.get_item("favorites") == "[1]"
    assert storage.remove_item("favorites") is True
    assert storage.get_item("favorites") is None


def test_file_storage_missing_file(tmp_path):
    storage = JsonFileStorage(tmp_path / "store.json")
    assert storage.get_item("favorites") is None


def test_file_storage_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "store.json"
    assert JsonFileStorage(path).set_item("favorites", "[3, 7]") is True
    JsonFileStorage(path).set_item("theme", "dark")

    storage = JsonFileStorage(path)
    assert storage.get_item("favorites") == "[3, 7]"
    assert storage.get_item("theme") == "dark"


def test_file_storage_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")
    storage = JsonFileStorage(path)
    assert storage.get_item("favorites") is None


def test_file_storage_non_object_file_reads_as_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStorage(path).get_item("favorites") is None


def test_file_storage_non_string_slot_reads_as_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text('{"favorites": [1, 2]}', encoding="utf-8")
    assert JsonFileStorage(path).get_item("favorites") is None


def test_file_storage_overwrites_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("not json", encoding="utf-8")
    storage = JsonFileStorage(path)
    assert storage.set_item("favorites", "[1]") is True
    assert storage.get_item("favorites") == "[1]"


def test_file_storage_write_failure_returns_false(tmp_path):
    storage = JsonFileStorage(tmp_path / "store.json")
    with patch("pathlib.Path.write_text", side_effect=OSError("disk full")):
        assert storage.set_item("favorites", "[1]") is False
    assert storage.get_item("favorites") is None


def test_file_storage_remove_item(tmp_path):
    storage = JsonFileStorage(tmp_path / "store.json")
    storage.set_item("favorites", "[1]")
    storage.set_item("theme", "dark")
    assert storage.remove_item("favorites") is True
    assert storage.get_item("favorites") is None
    assert storage.get_item("theme") == "dark"
    assert storage.remove_item("missing") is True


def test_file_storage_deeply_nested_file_reads_as_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[" * 100000, encoding="utf-8")
    assert JsonFileStorage(path).get_item("favorites") is None
